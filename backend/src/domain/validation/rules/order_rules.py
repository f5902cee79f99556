"""Order structure and business-rule checks"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from domain.orders.models import Order
from domain.validation.models import ValidationContext, ValidationIssue, ValidationSeverity
from domain.validation.results import OrderValidationResult


FUTURE_DATE_GRACE = timedelta(minutes=5)


def _reference_now(order_date: datetime, context: ValidationContext) -> datetime:
    if context.now is not None:
        return context.now
    if order_date.tzinfo is None:
        return datetime.now()
    return datetime.now(timezone.utc)


def validate_order_structure(
    order: Optional[Order],
    context: Optional[ValidationContext] = None
) -> OrderValidationResult:
    """Validate identity, dates and total amount of an order.

    Rules:
    - ORDER_NULL (CRITICAL): order is missing
    - ORDER_ID_MISSING / ORDER_DATE_MISSING: required header fields
    - ORDER_TOO_OLD: order date older than max_order_age_days
    - ORDER_FUTURE_DATE (WARNING): order date more than 5 minutes ahead
    - INVALID_TOTAL: total amount must be positive
    - HIGH_AMOUNT (WARNING): total above high_amount_threshold

    Args:
        order: Order to check
        context: Thresholds (defaults apply when omitted)

    Returns:
        OrderValidationResult with all findings
    """
    context = context or ValidationContext()
    result = OrderValidationResult()

    if order is None:
        result.add_critical("order", "ORDER_NULL", "Order is required for validation")
        return result

    result.add_context("order_id", order.order_id)

    if order.order_id is None or not order.order_id.strip():
        result.add_error("orderId", "ORDER_ID_MISSING", "Order ID is required")

    if order.order_date is None:
        result.add_error("orderDate", "ORDER_DATE_MISSING", "Order date is required")
    else:
        now = _reference_now(order.order_date, context)
        if order.order_date < now - timedelta(days=context.max_order_age_days):
            result.add_issue(ValidationIssue(
                field="orderDate",
                code="ORDER_TOO_OLD",
                message=f"Order is too old to process (created {order.order_date.isoformat()})",
                severity=ValidationSeverity.ERROR,
                actual_value=order.order_date,
            ))
            result.add_recovery_suggestion("Please create a new order")
        if order.order_date > now + FUTURE_DATE_GRACE:
            result.add_warning("orderDate", "ORDER_FUTURE_DATE", "Order date is in the future")

    if order.total_amount <= 0:
        result.add_issue(ValidationIssue(
            field="businessRules.amount",
            code="INVALID_TOTAL",
            message="Total amount must be greater than zero",
            severity=ValidationSeverity.ERROR,
            actual_value=order.total_amount,
        ))
    elif order.total_amount > context.high_amount_threshold:
        result.add_issue(ValidationIssue(
            field="businessRules.amount",
            code="HIGH_AMOUNT",
            message="Order amount is unusually high",
            severity=ValidationSeverity.WARNING,
            actual_value=order.total_amount,
            expected_value=context.high_amount_threshold,
        ))
        result.add_recovery_suggestion("Please verify the order total is correct")

    return result
