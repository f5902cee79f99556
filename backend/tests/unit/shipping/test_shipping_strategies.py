"""Unit tests for standard, volumetric and rush shipping strategies"""

from decimal import Decimal

import pytest

from domain.exceptions import InputValidationError
from domain.shipping.ports import ShippingMode
from domain.shipping.strategies import (
    RushShippingStrategy,
    StandardShippingStrategy,
    VolumetricShippingStrategy,
)


@pytest.fixture
def standard(fee_schedule):
    return StandardShippingStrategy(fee_schedule)


@pytest.fixture
def volumetric(fee_schedule):
    return VolumetricShippingStrategy(fee_schedule)


@pytest.fixture
def rush(standard, fee_schedule):
    return RushShippingStrategy(standard, fee_schedule)


class TestCommonPreconditions:
    """Every strategy rejects structurally invalid input"""

    @pytest.mark.parametrize("strategy_name", ["standard", "volumetric", "rush"])
    def test_empty_lines_rejected(self, strategy_name, request, hanoi_delivery):
        strategy = request.getfixturevalue(strategy_name)
        with pytest.raises(InputValidationError):
            strategy.calculate_fee([], hanoi_delivery)

    @pytest.mark.parametrize("strategy_name", ["standard", "volumetric", "rush"])
    def test_missing_delivery_rejected(self, strategy_name, request, make_line):
        strategy = request.getfixturevalue(strategy_name)
        with pytest.raises(InputValidationError):
            strategy.calculate_fee([make_line(dimensions_cm="10x10x10")], None)

    @pytest.mark.parametrize("province", ["", "   ", None])
    def test_blank_province_rejected(self, standard, make_line, make_delivery, province):
        with pytest.raises(InputValidationError, match="province/city"):
            standard.calculate_fee([make_line()], make_delivery(province))


class TestStandardShippingStrategy:

    def test_mode(self, standard):
        assert standard.mode == ShippingMode.STANDARD

    def test_inner_city_3_2kg(self, standard, make_line, hanoi_delivery):
        """Base fee plus one started 0.5 kg increment"""
        lines = [make_line(weight_kg="1.6", quantity=2)]
        assert standard.calculate_fee(lines, hanoi_delivery) == Decimal("24500")

    def test_da_nang_under_half_kg(self, standard, make_line, danang_delivery):
        lines = [make_line(weight_kg="0.4")]
        assert standard.calculate_fee(lines, danang_delivery) == Decimal("30000")

    def test_zero_weight_is_free(self, standard, make_line, hanoi_delivery):
        lines = [make_line(weight_kg="0")]
        assert standard.calculate_fee(lines, hanoi_delivery) == Decimal("0")

    def test_idempotent(self, standard, make_line, hcm_delivery):
        lines = [make_line(weight_kg="4.3")]
        first = standard.calculate_fee(lines, hcm_delivery)
        second = standard.calculate_fee(lines, hcm_delivery)
        assert first == second == Decimal("29500")

    def test_ignores_dimensions(self, standard, make_line, hanoi_delivery):
        lines = [make_line(weight_kg="1.0", dimensions_cm="100x100x100")]
        assert standard.calculate_fee(lines, hanoi_delivery) == Decimal("22000")


class TestVolumetricShippingStrategy:

    def test_mode(self, volumetric):
        assert volumetric.mode == ShippingMode.VOLUMETRIC

    def test_equal_actual_and_dimensional_weight(self, volumetric, make_line, danang_delivery):
        """30x20x10 / 6000 = 1.0 kg, chargeable = max(1.0, 1.0)"""
        lines = [make_line(weight_kg="1.0", dimensions_cm="30x20x10")]
        # other region: 30000 + one increment for 0.5 kg over
        assert volumetric.calculate_fee(lines, danang_delivery) == Decimal("32500")

    def test_bulky_light_item_priced_by_volume(self, volumetric, make_line, hanoi_delivery):
        lines = [make_line(weight_kg="0.2", dimensions_cm="60x50x40")]
        # 120000 / 6000 = 20 kg -> 22000 + ceil(17 / 0.5) * 2500
        assert volumetric.calculate_fee(lines, hanoi_delivery) == Decimal("22000") + 34 * Decimal("2500")

    @pytest.mark.parametrize("dimensions", [None, "", "0x10x10", "10x10", "axbxc"])
    def test_bad_dimensions_rejected(self, volumetric, make_line, hanoi_delivery, dimensions):
        with pytest.raises(InputValidationError):
            volumetric.calculate_fee([make_line(dimensions_cm=dimensions)], hanoi_delivery)


class TestRushShippingStrategy:

    def test_requires_base_strategy(self, fee_schedule):
        with pytest.raises(ValueError):
            RushShippingStrategy(None, fee_schedule)

    def test_mode(self, rush):
        assert rush.mode == ShippingMode.RUSH

    def test_fee_is_base_plus_surcharge_per_eligible_line(self, rush, standard, make_line, hanoi_delivery):
        lines = [
            make_line(weight_kg="1.0", eligible_for_rush=True),
            make_line(weight_kg="1.0", eligible_for_rush=True, quantity=3),
            make_line(weight_kg="0.5", eligible_for_rush=False),
        ]
        base = standard.calculate_fee(lines, hanoi_delivery)
        assert rush.calculate_fee(lines, hanoi_delivery) == base + 2 * Decimal("10000")

    def test_surcharge_is_per_line_not_per_unit(self, rush, make_line):
        lines = [make_line(eligible_for_rush=True, quantity=5)]
        assert rush.surcharge(lines) == Decimal("10000")

    def test_no_eligible_lines_adds_no_surcharge(self, rush, standard, make_line, hanoi_delivery):
        lines = [make_line(weight_kg="2.0")]
        assert rush.calculate_fee(lines, hanoi_delivery) == standard.calculate_fee(lines, hanoi_delivery)

    @pytest.mark.parametrize("province", ["Ho Chi Minh", "Da Nang", "Hai Phong"])
    def test_outside_rush_zone_rejected(self, rush, make_line, make_delivery, province):
        with pytest.raises(InputValidationError, match="Hanoi"):
            rush.calculate_fee([make_line(eligible_for_rush=True)], make_delivery(province))

    def test_wraps_volumetric_base(self, volumetric, fee_schedule, make_line, hanoi_delivery):
        rush = RushShippingStrategy(volumetric, fee_schedule)
        lines = [make_line(weight_kg="0.2", dimensions_cm="60x50x40", eligible_for_rush=True)]
        expected = volumetric.calculate_fee(lines, hanoi_delivery) + Decimal("10000")
        assert rush.calculate_fee(lines, hanoi_delivery) == expected


class TestMissingProductWeight:

    def test_standard_rejects_missing_weight(self, standard, make_line, hanoi_delivery):
        line = make_line()
        line.product.weight_kg = None
        with pytest.raises(InputValidationError):
            standard.calculate_fee([line], hanoi_delivery)
