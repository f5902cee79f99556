"""Rush delivery eligibility checks"""

from typing import Optional

from domain.orders.models import Order, OrderLine
from domain.shipping.tiering import is_rush_zone
from domain.validation.models import ValidationContext
from domain.validation.results import RushDeliveryValidationResult


def _item_label(line: OrderLine, index: int) -> str:
    """Product title for display, or the line position when the title is blank."""
    title = line.product.title if line.product is not None else None
    if title is None or not title.strip():
        return f"orderItems[{index}]"
    return title


def validate_rush_delivery(
    order: Optional[Order],
    context: Optional[ValidationContext] = None
) -> RushDeliveryValidationResult:
    """Check whether the order can ship with rush delivery.

    Rush needs an address in the rush zone and at least one line flagged
    eligible_for_rush. Each line is listed as eligible or ineligible by
    product title, or by its position when the title is blank.
    """
    result = RushDeliveryValidationResult()

    if order is None:
        result.add_error("order", "ORDER_NULL", "Order is required for rush delivery validation")
        return result

    delivery = order.delivery_info
    result.address_eligible = delivery is not None and is_rush_zone(delivery.province_city)
    if not result.address_eligible:
        result.add_error(
            "rushDelivery.address",
            "ADDRESS_NOT_ELIGIBLE",
            "Address not eligible for rush delivery"
        )

    for index, line in enumerate(order.lines):
        if line is None:
            continue
        if line.eligible_for_rush:
            result.add_eligible_item(_item_label(line, index))
        else:
            result.add_ineligible_item(_item_label(line, index))

    result.items_eligible = any(line is not None and line.eligible_for_rush for line in order.lines)
    if not result.items_eligible:
        result.add_error(
            "rushDelivery.items",
            "NO_ELIGIBLE_ITEMS",
            "No items in order are eligible for rush delivery"
        )
    elif result.ineligible_items:
        result.add_info(
            "rushDelivery.items",
            "PARTIAL_RUSH_ELIGIBILITY",
            f"{len(result.ineligible_items)} item(s) will ship with standard delivery"
        )

    result.rush_delivery_available = result.address_eligible and result.items_eligible
    if not result.address_eligible:
        result.eligibility_reason = "Address not eligible for rush delivery"
        result.add_recovery_suggestion("Rush delivery is only available for major cities")
    elif not result.items_eligible:
        result.eligibility_reason = "No items eligible for rush delivery"
        result.add_recovery_suggestion("Some products cannot be delivered via rush delivery")

    return result
