"""Unit tests for the shared regional tiering routine"""

from decimal import Decimal

import pytest

from config import Settings
from domain.shipping.tiering import (
    FeeSchedule,
    Region,
    classify_region,
    increments_over,
    is_rush_zone,
    tiered_fee,
)


class TestRegionClassification:
    """Substring, case-insensitive region matching"""

    @pytest.mark.parametrize("province", [
        "Hanoi", "HANOI", "hanoi - Ba Dinh", "Ho Chi Minh City", "ho chi minh",
    ])
    def test_inner_city(self, province):
        assert classify_region(province) == Region.INNER_CITY

    @pytest.mark.parametrize("province", ["Da Nang", "Hai Phong", "", None])
    def test_other(self, province):
        assert classify_region(province) == Region.OTHER

    def test_rush_zone_is_hanoi_only(self):
        assert is_rush_zone("Hanoi") is True
        assert is_rush_zone("Thanh pho HANOI") is True
        assert is_rush_zone("Ho Chi Minh") is False
        assert is_rush_zone(None) is False


class TestTieredFee:
    """Weight tiers and the rounding law"""

    @pytest.mark.parametrize("weight", ["0", "-1", "-0.01"])
    def test_zero_or_negative_weight_is_free(self, weight, fee_schedule):
        assert tiered_fee(Decimal(weight), Region.INNER_CITY, fee_schedule) == Decimal("0")
        assert tiered_fee(Decimal(weight), Region.OTHER, fee_schedule) == Decimal("0")

    @pytest.mark.parametrize("weight", ["0.1", "1.0", "3.0"])
    def test_inner_city_base_fee_up_to_3kg(self, weight, fee_schedule):
        assert tiered_fee(Decimal(weight), Region.INNER_CITY, fee_schedule) == Decimal("22000")

    @pytest.mark.parametrize("weight", ["0.1", "0.4", "0.5"])
    def test_other_region_base_fee_up_to_half_kg(self, weight, fee_schedule):
        assert tiered_fee(Decimal(weight), Region.OTHER, fee_schedule) == Decimal("30000")

    def test_inner_city_3_2kg_charges_one_increment(self, fee_schedule):
        assert tiered_fee(Decimal("3.2"), Region.INNER_CITY, fee_schedule) == Decimal("24500")

    @pytest.mark.parametrize("weight,increments", [
        ("0.6", 1), ("1.0", 1), ("1.01", 2), ("2.5", 4),
    ])
    def test_other_region_increments_round_up(self, weight, increments, fee_schedule):
        expected = Decimal("30000") + increments * Decimal("2500")
        assert tiered_fee(Decimal(weight), Region.OTHER, fee_schedule) == expected

    def test_increments_over(self):
        assert increments_over(Decimal("0.1"), Decimal("0.5")) == 1
        assert increments_over(Decimal("0.5"), Decimal("0.5")) == 1
        assert increments_over(Decimal("0.51"), Decimal("0.5")) == 2
        assert increments_over(Decimal("0"), Decimal("0.5")) == 0

    def test_custom_schedule_is_honored(self):
        schedule = FeeSchedule(inner_city_base_fee=Decimal("1000"), additional_fee_per_increment=Decimal("100"))
        assert tiered_fee(Decimal("4.0"), Region.INNER_CITY, schedule) == Decimal("1200")


class TestFeeScheduleFromSettings:
    def test_reads_pricing_fields(self):
        settings = Settings(INNER_CITY_BASE_FEE=Decimal("25000"), RUSH_SURCHARGE_PER_LINE=Decimal("15000"))
        schedule = FeeSchedule.from_settings(settings)
        assert schedule.inner_city_base_fee == Decimal("25000")
        assert schedule.rush_surcharge_per_line == Decimal("15000")
        assert schedule.volumetric_divisor == Decimal("6000")
