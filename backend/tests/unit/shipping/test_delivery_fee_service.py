"""Unit tests for DeliveryFeeService (mode selection and fee breakdown)"""

from decimal import Decimal

import pytest

from domain.exceptions import InputValidationError
from domain.shipping.ports import ShippingMode
from domain.shipping.service import DeliveryFeeService


@pytest.fixture
def service(fee_schedule):
    return DeliveryFeeService(fee_schedule)


class TestCalculateFee:

    def test_standard_mode_by_default(self, service, make_line, hanoi_delivery):
        assert service.calculate_fee([make_line(weight_kg="1.0")], hanoi_delivery) == Decimal("22000")

    def test_volumetric_mode(self, service, make_line, hanoi_delivery):
        lines = [make_line(weight_kg="0.2", dimensions_cm="60x50x40")]
        assert service.calculate_fee(lines, hanoi_delivery, ShippingMode.VOLUMETRIC) == Decimal("107000")

    def test_rush_mode(self, service, make_line, hanoi_delivery):
        lines = [make_line(weight_kg="1.0", eligible_for_rush=True)]
        assert service.calculate_fee(lines, hanoi_delivery, ShippingMode.RUSH) == Decimal("32000")


class TestFreeShippingDiscount:

    def test_above_threshold(self, service):
        assert service.free_shipping_discount(Decimal("100001")) == Decimal("25000")

    def test_at_threshold_gets_nothing(self, service):
        assert service.free_shipping_discount(Decimal("100000")) == Decimal("0")


class TestCalculateBreakdown:

    def test_missing_order_rejected(self, service):
        with pytest.raises(InputValidationError):
            service.calculate_breakdown(None)

    def test_standard_only_small_order(self, service, make_order, make_line):
        order = make_order(lines=[make_line(weight_kg="1.0", price="40000")])
        breakdown = service.calculate_breakdown(order)
        assert breakdown.total_fee == Decimal("22000")
        assert breakdown.base_fee == Decimal("22000")
        assert breakdown.free_shipping_discount == Decimal("0")
        assert breakdown.standard_line_count == 1
        assert breakdown.rush_line_count == 0

    def test_discount_capped_at_standard_fee(self, service, make_order, make_line):
        order = make_order(lines=[make_line(weight_kg="1.0", price="200000")])
        breakdown = service.calculate_breakdown(order)
        # 22000 fee, 25000 discount capped to 22000
        assert breakdown.free_shipping_discount == Decimal("22000")
        assert breakdown.total_fee == Decimal("0")

    def test_rush_split(self, service, make_order, make_line, make_delivery):
        lines = [
            make_line(weight_kg="1.0", price="40000", eligible_for_rush=True, title="Rush CD"),
            make_line(weight_kg="1.0", price="40000", title="Book"),
        ]
        order = make_order(lines=lines, delivery=make_delivery("Hanoi", rush_requested=True))
        breakdown = service.calculate_breakdown(order, rush_requested=True)

        assert breakdown.rush_line_count == 1
        assert breakdown.standard_line_count == 1
        assert breakdown.rush_surcharge == Decimal("10000")
        assert breakdown.base_fee == Decimal("44000")
        assert breakdown.total_fee == Decimal("54000")

    def test_rush_requested_outside_zone_prices_standard(self, service, make_order, make_line, hcm_delivery):
        order = make_order(lines=[make_line(eligible_for_rush=True, price="40000")], delivery=hcm_delivery)
        breakdown = service.calculate_breakdown(order, rush_requested=True)
        assert breakdown.rush_line_count == 0
        assert breakdown.rush_surcharge == Decimal("0")
        assert breakdown.total_fee == Decimal("22000")

    def test_total_equals_parts(self, service, make_order, make_line, make_delivery):
        lines = [
            make_line(weight_kg="3.5", price="150000", eligible_for_rush=True),
            make_line(weight_kg="2.0", price="150000"),
        ]
        order = make_order(lines=lines, delivery=make_delivery("Hanoi"))
        b = service.calculate_breakdown(order, rush_requested=True)
        assert b.total_fee == b.base_fee + b.rush_surcharge - b.free_shipping_discount


class TestCalculateShippingFee:

    def test_standard_order(self, service, make_order):
        assert service.calculate_shipping_fee(make_order()) == Decimal("22000")

    def test_rush_order(self, service, make_order, make_line, make_delivery):
        order = make_order(
            lines=[make_line(eligible_for_rush=True, quantity=2)],
            delivery=make_delivery("Hanoi", rush_requested=True),
        )
        assert service.calculate_shipping_fee(order, rush_requested=True) == Decimal("32000")

    def test_matches_breakdown_total(self, service, make_order, make_line, make_delivery):
        order = make_order(
            lines=[make_line(eligible_for_rush=True), make_line(price="120000")],
            delivery=make_delivery("Hanoi", rush_requested=True),
        )
        expected = service.calculate_breakdown(order, rush_requested=True).total_fee
        assert service.calculate_shipping_fee(order, rush_requested=True) == expected

    def test_rush_outside_zone_rejected(self, service, make_order, make_line, hcm_delivery):
        order = make_order(lines=[make_line(eligible_for_rush=True)], delivery=hcm_delivery)
        with pytest.raises(InputValidationError, match="not eligible for rush"):
            service.calculate_shipping_fee(order, rush_requested=True)

    def test_rush_without_eligible_lines_rejected(self, service, make_order, hanoi_delivery):
        with pytest.raises(InputValidationError, match="no items in the order are eligible"):
            service.calculate_shipping_fee(make_order(delivery=hanoi_delivery), rush_requested=True)

    @pytest.mark.parametrize("address", [None, "", "   "])
    def test_blank_address_rejected(self, service, make_order, make_delivery, address):
        order = make_order(delivery=make_delivery("Hanoi", address=address))
        with pytest.raises(InputValidationError, match="address is required"):
            service.calculate_shipping_fee(order)

    def test_missing_order_rejected(self, service):
        with pytest.raises(InputValidationError):
            service.calculate_shipping_fee(None)

    def test_empty_lines_rejected(self, service, make_order):
        order = make_order()
        order.lines = []
        with pytest.raises(InputValidationError):
            service.calculate_shipping_fee(order)


class TestEstimatedDeliveryDays:

    def test_rush_in_zone_is_next_day(self, service, hanoi_delivery):
        assert service.estimated_delivery_days(hanoi_delivery, rush_requested=True) == 1

    def test_rush_outside_zone_uses_region(self, service, hcm_delivery, danang_delivery):
        assert service.estimated_delivery_days(hcm_delivery, rush_requested=True) == 2
        assert service.estimated_delivery_days(danang_delivery, rush_requested=True) == 4

    def test_inner_city(self, service, hanoi_delivery, hcm_delivery):
        assert service.estimated_delivery_days(hanoi_delivery) == 2
        assert service.estimated_delivery_days(hcm_delivery) == 2

    def test_other_region(self, service, danang_delivery):
        assert service.estimated_delivery_days(danang_delivery) == 4

    def test_missing_delivery_defaults(self, service, make_delivery):
        assert service.estimated_delivery_days(None) == 4
        assert service.estimated_delivery_days(make_delivery(" ")) == 4
