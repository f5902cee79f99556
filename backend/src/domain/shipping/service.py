"""Delivery fee service - strategy selection and fee breakdown.

Selects a shipping strategy by mode and, for whole orders, splits lines into
a standard group and a rush group:

1. When rush is requested and the address is a rush zone, rush-eligible
   lines go to the rush group; everything else stays standard
2. Standard group: base fee minus free-shipping discount (never below 0)
3. Rush group: rush strategy fee (its own base fee + per-line surcharge)
4. Total = discounted standard fee + rush fee

calculate_shipping_fee() is the strict order-level entry point: unlike
calculate_breakdown() it rejects rush requests that cannot be honored
instead of pricing everything as standard.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from domain.exceptions import InputValidationError
from domain.orders.models import DeliveryInfo, Order, OrderLine

from .ports import ShippingMode
from .registry import ShippingStrategyRegistry
from .strategies import RushShippingStrategy, validate_fee_inputs
from .tiering import FeeSchedule, Region, classify_region, is_rush_zone


logger = logging.getLogger(__name__)

RUSH_DELIVERY_DAYS = 1
DEFAULT_DELIVERY_DAYS = 4

_DELIVERY_DAYS_BY_REGION = {
    Region.INNER_CITY: 2,
    Region.OTHER: DEFAULT_DELIVERY_DAYS,
}


@dataclass
class DeliveryFeeBreakdown:
    """Itemized delivery fee for an order.

    Attributes:
        total_fee: Amount charged to the customer
        base_fee: Tiered fees of both groups before surcharge and discount
        rush_surcharge: Sum of per-line rush surcharges
        free_shipping_discount: Discount actually applied to the standard group
        standard_line_count: Lines priced under the standard policy
        rush_line_count: Lines priced under the rush policy
    """
    total_fee: Decimal
    base_fee: Decimal
    rush_surcharge: Decimal = Decimal("0")
    free_shipping_discount: Decimal = Decimal("0")
    standard_line_count: int = 0
    rush_line_count: int = 0


class DeliveryFeeService:
    """Entry point for delivery fee calculation.

    Usage:
        service = DeliveryFeeService(FeeSchedule.from_settings(get_settings()))
        fee = service.calculate_fee(order.lines, order.delivery_info, ShippingMode.STANDARD)
        breakdown = service.calculate_breakdown(order, rush_requested=True)
    """

    def __init__(
        self,
        schedule: Optional[FeeSchedule] = None,
        registry: Optional[ShippingStrategyRegistry] = None
    ):
        self.schedule = schedule or FeeSchedule()
        self.registry = registry or ShippingStrategyRegistry.build_default(self.schedule)

    def calculate_fee(
        self,
        lines: Optional[list[OrderLine]],
        delivery: Optional[DeliveryInfo],
        mode: ShippingMode = ShippingMode.STANDARD
    ) -> Decimal:
        """Calculate a fee with the strategy registered for mode."""
        return self.registry.get(mode).calculate_fee(lines, delivery)

    def free_shipping_discount(self, value_excl_vat: Decimal) -> Decimal:
        """Discount granted when non-rush goods exceed the threshold value."""
        if Decimal(str(value_excl_vat)) > self.schedule.free_shipping_threshold:
            return self.schedule.max_free_shipping_discount
        return Decimal("0")

    def is_rush_address_eligible(self, delivery: Optional[DeliveryInfo]) -> bool:
        if delivery is None:
            return False
        return is_rush_zone(delivery.province_city)

    def calculate_breakdown(self, order: Optional[Order], rush_requested: bool = False) -> DeliveryFeeBreakdown:
        """Itemize the delivery fee for a whole order.

        Raises:
            InputValidationError: If order is missing or fails the common
                fee preconditions
        """
        if order is None:
            raise InputValidationError("Order is required for delivery fee breakdown calculation.")
        validate_fee_inputs(order.lines, order.delivery_info, context="delivery fee breakdown")

        delivery = order.delivery_info
        standard_lines = list(order.lines)
        rush_lines: list[OrderLine] = []

        if rush_requested:
            if self.is_rush_address_eligible(delivery):
                rush_lines = [line for line in order.lines if line.eligible_for_rush]
                standard_lines = [line for line in order.lines if not line.eligible_for_rush]
            else:
                logger.info(
                    f"Rush requested for order {order.order_id} but '{delivery.province_city}' "
                    f"is not a rush zone; pricing all lines as standard"
                )

        standard_fee = Decimal("0")
        discount = Decimal("0")
        if standard_lines:
            standard_fee = self.registry.get(ShippingMode.STANDARD).calculate_fee(standard_lines, delivery)
            standard_value = sum((line.line_total for line in standard_lines), Decimal("0"))
            discount = min(self.free_shipping_discount(standard_value), standard_fee)

        rush_fee = Decimal("0")
        rush_surcharge = Decimal("0")
        if rush_lines:
            rush_strategy = self.registry.get(ShippingMode.RUSH)
            rush_fee = rush_strategy.calculate_fee(rush_lines, delivery)
            if isinstance(rush_strategy, RushShippingStrategy):
                rush_surcharge = rush_strategy.surcharge(rush_lines)

        breakdown = DeliveryFeeBreakdown(
            total_fee=(standard_fee - discount) + rush_fee,
            base_fee=standard_fee + rush_fee - rush_surcharge,
            rush_surcharge=rush_surcharge,
            free_shipping_discount=discount,
            standard_line_count=len(standard_lines),
            rush_line_count=len(rush_lines),
        )

        logger.info(
            f"Delivery fee breakdown for order {order.order_id}: total={breakdown.total_fee} "
            f"base={breakdown.base_fee} surcharge={breakdown.rush_surcharge} "
            f"discount={breakdown.free_shipping_discount}"
        )
        return breakdown

    def calculate_shipping_fee(self, order: Optional[Order], rush_requested: bool = False) -> Decimal:
        """Total delivery fee for an order, failing hard on unusable rush requests.

        Raises:
            InputValidationError: If order, lines, delivery info, province/city
                or address is missing, or rush is requested for an address
                outside the rush zone or an order without rush-eligible lines
        """
        if order is None:
            raise InputValidationError("Order is required for shipping fee calculation.")
        validate_fee_inputs(order.lines, order.delivery_info, context="shipping fee")

        delivery = order.delivery_info
        if delivery.address is None or not delivery.address.strip():
            raise InputValidationError(
                f"Delivery address is required for shipping calculation. Order ID: {order.order_id}"
            )

        if rush_requested:
            if not self.is_rush_address_eligible(delivery):
                raise InputValidationError(
                    "Delivery address is not eligible for rush order. "
                    "Rush order is only available for inner city Hanoi districts."
                )
            if not any(line is not None and line.eligible_for_rush for line in order.lines):
                raise InputValidationError(
                    "Rush order requested, but no items in the order are eligible for rush delivery."
                )

        return self.calculate_breakdown(order, rush_requested=rush_requested).total_fee

    def estimated_delivery_days(self, delivery: Optional[DeliveryInfo], rush_requested: bool = False) -> int:
        """Expected days until delivery.

        Rush to a rush-zone address is next day; otherwise inner-city
        addresses take 2 days and every other region DEFAULT_DELIVERY_DAYS.
        """
        if rush_requested and self.is_rush_address_eligible(delivery):
            return RUSH_DELIVERY_DAYS
        if delivery is None or delivery.province_city is None or not delivery.province_city.strip():
            return DEFAULT_DELIVERY_DAYS
        return _DELIVERY_DAYS_BY_REGION[classify_region(delivery.province_city)]
