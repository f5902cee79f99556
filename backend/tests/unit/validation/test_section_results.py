"""Unit tests for section validation results"""

from decimal import Decimal

import pytest

from domain.validation.models import ValidationIssue, ValidationSeverity
from domain.validation.results import (
    DeliveryValidationResult,
    OrderItemValidationResult,
    OrderValidationResult,
    PricingValidationResult,
    RushDeliveryValidationResult,
    SectionState,
)


class TestSectionStateMachine:
    """CLEAN -> DEGRADED -> INVALID -> BLOCKED as issues accumulate"""

    def test_new_result_is_clean(self):
        result = OrderValidationResult()
        assert result.state == SectionState.CLEAN
        assert result.is_valid is True
        assert result.severity == ValidationSeverity.INFO
        assert result.summary == "Validation passed - no issues found"

    def test_transitions(self):
        result = OrderValidationResult()

        result.add_info("f", "I", "info")
        assert result.state == SectionState.DEGRADED

        result.add_warning("f", "W", "warning")
        assert result.state == SectionState.DEGRADED
        assert result.is_valid is True
        assert result.severity == ValidationSeverity.WARNING

        result.add_error("f", "E", "error")
        assert result.state == SectionState.INVALID
        assert result.is_valid is False

        result.add_critical("f", "X", "critical")
        assert result.state == SectionState.BLOCKED
        assert result.severity == ValidationSeverity.CRITICAL

    def test_none_issue_ignored(self):
        result = OrderValidationResult()
        result.add_issue(None)
        assert result.issues == []

    def test_summary_regenerated(self):
        result = OrderValidationResult()
        result.add_warning("a", "W", "w")
        assert result.summary == "1 warning(s) found"
        result.add_critical("b", "X", "c")
        assert result.summary == "1 critical error(s), 1 error(s), 1 warning(s) found"

    def test_info_only_summary(self):
        result = OrderValidationResult()
        result.add_info("a", "I", "note")
        assert result.summary == "1 info issue(s) found"

    def test_queries(self):
        result = OrderValidationResult()
        result.add_error("a", "E", "first")
        result.add_critical("b", "X", "second")
        result.add_warning("c", "W", "third")
        assert result.has_errors() and result.has_critical_errors() and result.has_warnings()
        assert [i.code for i in result.errors] == ["E", "X"]
        assert [i.code for i in result.warnings] == ["W"]
        assert result.error_summary() == "first; second"
        assert result.warning_summary() == "third"

    def test_recovery_suggestion_ignores_blank(self):
        result = OrderValidationResult()
        result.add_recovery_suggestion("Recalculate totals")
        result.add_recovery_suggestion("")
        result.add_recovery_suggestion("   ")
        result.add_recovery_suggestion(None)
        assert result.recovery_suggestions == ["Recalculate totals"]

    def test_context(self):
        result = OrderValidationResult()
        result.add_context("order_id", "ORD-1")
        assert result.context == {"order_id": "ORD-1"}

    @pytest.mark.parametrize("result_cls", [
        OrderItemValidationResult,
        DeliveryValidationResult,
        PricingValidationResult,
        RushDeliveryValidationResult,
    ])
    def test_every_section_shares_derivation(self, result_cls):
        result = result_cls()
        result.add_issue(ValidationIssue("f", "C", "m", ValidationSeverity.ERROR))
        assert result.is_valid is False
        assert result.state == SectionState.INVALID


class TestPricingValidationResult:

    def test_default_tolerance(self):
        assert PricingValidationResult().tolerance == Decimal("0.01")

    def test_tolerance_boundary_is_inclusive(self):
        result = PricingValidationResult()
        assert result.is_within_tolerance(Decimal("100.00"), Decimal("100.01"))
        assert result.is_within_tolerance(Decimal("100.01"), Decimal("100.00"))
        assert not result.is_within_tolerance(Decimal("100.00"), Decimal("100.011"))

    def test_accepts_floats(self):
        assert PricingValidationResult().is_within_tolerance(0.1 + 0.2, 0.3)

    def test_pricing_summary(self):
        result = PricingValidationResult(
            calculated_subtotal=Decimal("100000"),
            calculated_vat=Decimal("10000"),
            calculated_delivery_fee=Decimal("22000"),
            calculated_total=Decimal("132000"),
        )
        assert result.pricing_summary == (
            "Subtotal: 100000.00, VAT: 10000.00, Delivery: 22000.00, Total: 132000.00"
        )


class TestRushDeliveryValidationResult:

    def test_available_summary(self):
        result = RushDeliveryValidationResult(rush_delivery_available=True)
        result.add_eligible_item("CD")
        result.add_eligible_item("  ")
        assert result.eligibility_summary == "Rush delivery available - 1 eligible items"

    def test_address_not_eligible_summary(self):
        result = RushDeliveryValidationResult(items_eligible=True)
        assert result.eligibility_summary == "Rush delivery unavailable - address not eligible"

    def test_no_items_summary(self):
        result = RushDeliveryValidationResult(address_eligible=True)
        assert result.eligibility_summary == "Rush delivery unavailable - no eligible items"

    def test_unknown_reason_summary(self):
        result = RushDeliveryValidationResult(address_eligible=True, items_eligible=True)
        assert result.eligibility_summary == "Rush delivery unavailable - unknown reason"
        result.eligibility_reason = "Service paused"
        assert result.eligibility_summary == "Rush delivery unavailable - Service paused"
