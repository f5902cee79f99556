"""Pricing consistency checks.

Recomputes subtotal, VAT and total from the order lines and compares them
with the stored totals. Every comparison uses the result's tolerance.
"""

from typing import Optional

from domain.orders.models import Order
from domain.validation.models import ValidationContext, ValidationIssue, ValidationSeverity
from domain.validation.results import PricingValidationResult


def validate_order_pricing(
    order: Optional[Order],
    context: Optional[ValidationContext] = None
) -> PricingValidationResult:
    """Validate stored order totals against the line items.

    Rules:
    - ORDER_NULL (CRITICAL): order is missing
    - SUBTOTAL_MISMATCH: stored excl-VAT total != sum of line totals
    - VAT_CALCULATION_ERROR: stored incl-VAT total != subtotal * (1 + VAT rate)
    - VAT_AMOUNT_MISMATCH (WARNING): stored VAT amount != stored excl-VAT * VAT rate
    - DELIVERY_FEE_INVALID: negative delivery fee
    - TOTAL_CALCULATION_ERROR: total amount != incl-VAT total + delivery fee
    """
    context = context or ValidationContext()
    result = PricingValidationResult(tolerance=context.pricing_tolerance)

    if order is None:
        result.add_critical("order", "ORDER_NULL", "Order is required for pricing validation")
        return result

    subtotal = order.subtotal()
    vat = subtotal * context.vat_rate
    subtotal_with_vat = subtotal + vat

    result.calculated_subtotal = subtotal
    result.calculated_vat = vat
    result.calculated_delivery_fee = order.delivery_fee
    result.calculated_total = subtotal_with_vat + order.delivery_fee

    if not result.is_within_tolerance(order.total_price_excl_vat, subtotal):
        result.add_issue(ValidationIssue(
            field="pricing.subtotal",
            code="SUBTOTAL_MISMATCH",
            message="Calculated subtotal doesn't match stored value",
            severity=ValidationSeverity.ERROR,
            actual_value=order.total_price_excl_vat,
            expected_value=subtotal,
        ))
        result.add_recovery_suggestion("Recalculate order totals")

    if not result.is_within_tolerance(order.total_price_incl_vat, subtotal_with_vat):
        result.add_issue(ValidationIssue(
            field="pricing.vat",
            code="VAT_CALCULATION_ERROR",
            message="VAT calculation is incorrect",
            severity=ValidationSeverity.ERROR,
            actual_value=order.total_price_incl_vat,
            expected_value=subtotal_with_vat,
        ))
        result.add_recovery_suggestion("Recalculate VAT amount")

    expected_vat_amount = order.total_price_excl_vat * context.vat_rate
    if not result.is_within_tolerance(order.vat_amount, expected_vat_amount):
        result.add_issue(ValidationIssue(
            field="pricing.vatAmount",
            code="VAT_AMOUNT_MISMATCH",
            message="Stored VAT amount does not match the VAT rate",
            severity=ValidationSeverity.WARNING,
            actual_value=order.vat_amount,
            expected_value=expected_vat_amount,
        ))

    if order.delivery_fee < 0:
        result.add_issue(ValidationIssue(
            field="pricing.deliveryFee",
            code="DELIVERY_FEE_INVALID",
            message="Delivery fee cannot be negative",
            severity=ValidationSeverity.ERROR,
            actual_value=order.delivery_fee,
        ))

    expected_total = order.total_price_incl_vat + order.delivery_fee
    if not result.is_within_tolerance(order.total_amount, expected_total):
        result.add_issue(ValidationIssue(
            field="pricing.total",
            code="TOTAL_CALCULATION_ERROR",
            message="Total amount calculation is incorrect",
            severity=ValidationSeverity.ERROR,
            actual_value=order.total_amount,
            expected_value=expected_total,
        ))
        result.add_recovery_suggestion("Recalculate final total")

    return result
