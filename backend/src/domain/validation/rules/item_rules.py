"""Order line checks"""

from typing import Optional

from domain.orders.models import OrderLine
from domain.validation.models import ValidationContext, ValidationIssue, ValidationSeverity
from domain.validation.results import OrderItemValidationResult


def validate_order_items(
    lines: Optional[list[OrderLine]],
    context: Optional[ValidationContext] = None
) -> OrderItemValidationResult:
    """Validate every order line and count valid/invalid lines.

    Rules:
    - ITEMS_EMPTY: the order has no lines
    - ITEM_NULL / PRODUCT_MISSING: line or its product is missing
    - QUANTITY_INVALID: quantity must be positive
    - PRICE_INVALID: price at order time must be positive

    Returns:
        OrderItemValidationResult with counts and recovery suggestions
    """
    result = OrderItemValidationResult()

    if not lines:
        result.add_issue(ValidationIssue(
            field="orderItems",
            code="ITEMS_EMPTY",
            message="Order must contain at least one item",
            severity=ValidationSeverity.ERROR,
            user_message="Please add items to your cart before proceeding",
            possible_fixes=("Add products to cart",),
        ))
        return result

    result.total_items_validated = len(lines)
    for index, line in enumerate(lines):
        if _validate_line(line, f"orderItems[{index}]", result):
            result.valid_items_count += 1
        else:
            result.invalid_items_count += 1

    if result.invalid_items_count > 0:
        result.add_recovery_suggestion(f"Review and fix {result.invalid_items_count} invalid items")
    if result.valid_items_count > 0:
        result.add_recovery_suggestion(f"{result.valid_items_count} items are valid and ready for processing")

    return result


def _validate_line(line: Optional[OrderLine], field_path: str, result: OrderItemValidationResult) -> bool:
    if line is None:
        result.add_error(field_path, "ITEM_NULL", "Order item is null")
        return False

    valid = True
    if line.product is None:
        result.add_error(f"{field_path}.product", "PRODUCT_MISSING", "Product information is missing")
        valid = False

    if line.quantity is None or line.quantity <= 0:
        result.add_issue(ValidationIssue(
            field=f"{field_path}.quantity",
            code="QUANTITY_INVALID",
            message="Quantity must be positive",
            severity=ValidationSeverity.ERROR,
            actual_value=line.quantity,
        ))
        valid = False

    if line.price_at_order_time is None or line.price_at_order_time <= 0:
        result.add_issue(ValidationIssue(
            field=f"{field_path}.price",
            code="PRICE_INVALID",
            message="Price must be positive",
            severity=ValidationSeverity.ERROR,
            actual_value=line.price_at_order_time,
        ))
        valid = False

    return valid
