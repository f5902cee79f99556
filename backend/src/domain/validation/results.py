"""Section validation results.

One result per checked concern (order structure, items, delivery, pricing,
rush delivery). A result accumulates issues and recovery suggestions; its
validity, severity, state and summary are derived from the issue list on
every read via fold_issues(), so they can never go stale.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from .models import ValidationIssue, ValidationSeverity, Verdict, fold_issues


class SectionState(str, Enum):
    """Lifecycle of a section result as issues accumulate"""
    CLEAN = "CLEAN"          # no issues
    DEGRADED = "DEGRADED"    # only INFO/WARNING, still valid
    INVALID = "INVALID"      # has ERROR
    BLOCKED = "BLOCKED"      # has CRITICAL


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class SectionValidationResult:
    issues: list[ValidationIssue] = field(default_factory=list)
    recovery_suggestions: list[str] = field(default_factory=list)
    context: dict[str, Any] = field(default_factory=dict)
    validated_at: datetime = field(default_factory=_utcnow)

    # Derived state

    @property
    def verdict(self) -> Verdict:
        return fold_issues(self.issues)

    @property
    def is_valid(self) -> bool:
        return self.verdict.is_valid

    @property
    def severity(self) -> ValidationSeverity:
        return self.verdict.severity

    @property
    def state(self) -> SectionState:
        if not self.issues:
            return SectionState.CLEAN
        severity = self.severity
        if severity.is_critical:
            return SectionState.BLOCKED
        if severity.is_blocking:
            return SectionState.INVALID
        return SectionState.DEGRADED

    @property
    def summary(self) -> str:
        if not self.issues:
            return "Validation passed - no issues found"

        parts = []
        critical = len(self.critical_errors)
        if critical:
            parts.append(f"{critical} critical error(s)")
        if self.has_errors():
            parts.append(f"{len(self.errors)} error(s)")
        if self.has_warnings():
            parts.append(f"{len(self.warnings)} warning(s)")
        if not parts:
            parts.append(f"{len(self.issues)} info issue(s)")
        return ", ".join(parts) + " found"

    # Mutation

    def add_issue(self, issue: Optional[ValidationIssue]) -> None:
        if issue is not None:
            self.issues.append(issue)

    def add_error(self, field_name: str, code: str, message: str) -> None:
        self.add_issue(ValidationIssue(field_name, code, message, ValidationSeverity.ERROR))

    def add_warning(self, field_name: str, code: str, message: str) -> None:
        self.add_issue(ValidationIssue(field_name, code, message, ValidationSeverity.WARNING))

    def add_info(self, field_name: str, code: str, message: str) -> None:
        self.add_issue(ValidationIssue(field_name, code, message, ValidationSeverity.INFO))

    def add_critical(self, field_name: str, code: str, message: str) -> None:
        self.add_issue(ValidationIssue(field_name, code, message, ValidationSeverity.CRITICAL))

    def add_recovery_suggestion(self, suggestion: Optional[str]) -> None:
        """Append a suggestion; blank or missing suggestions are ignored."""
        if suggestion is not None and suggestion.strip():
            self.recovery_suggestions.append(suggestion)

    def add_context(self, key: str, value: Any) -> None:
        self.context[key] = value

    # Queries

    def has_errors(self) -> bool:
        """True when any ERROR or CRITICAL issue is present."""
        return any(issue.is_blocking for issue in self.issues)

    def has_warnings(self) -> bool:
        return any(issue.severity is ValidationSeverity.WARNING for issue in self.issues)

    def has_critical_errors(self) -> bool:
        return any(issue.is_critical for issue in self.issues)

    @property
    def errors(self) -> list[ValidationIssue]:
        """ERROR and CRITICAL issues"""
        return [issue for issue in self.issues if issue.is_blocking]

    @property
    def critical_errors(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.is_critical]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity is ValidationSeverity.WARNING]

    def error_summary(self) -> str:
        return "; ".join(issue.user_message for issue in self.errors)

    def warning_summary(self) -> str:
        return "; ".join(issue.user_message for issue in self.warnings)


@dataclass
class OrderValidationResult(SectionValidationResult):
    """Order structure and business-rule checks"""
    pass


@dataclass
class OrderItemValidationResult(SectionValidationResult):
    total_items_validated: int = 0
    valid_items_count: int = 0
    invalid_items_count: int = 0


@dataclass
class DeliveryValidationResult(SectionValidationResult):
    delivery_method: Optional[str] = None
    rush_delivery_eligible: bool = False
    address_validation_status: Optional[str] = None


@dataclass
class PricingValidationResult(SectionValidationResult):
    """Pricing checks plus the recomputed reference amounts.

    All amount equality checks go through is_within_tolerance().
    """
    calculated_subtotal: Decimal = Decimal("0")
    calculated_vat: Decimal = Decimal("0")
    calculated_delivery_fee: Decimal = Decimal("0")
    calculated_total: Decimal = Decimal("0")
    tolerance: Decimal = Decimal("0.01")

    def is_within_tolerance(self, value1, value2) -> bool:
        """True iff |value1 - value2| <= tolerance (boundary inclusive)."""
        return abs(Decimal(str(value1)) - Decimal(str(value2))) <= self.tolerance

    @property
    def pricing_summary(self) -> str:
        return (
            f"Subtotal: {self.calculated_subtotal:.2f}, VAT: {self.calculated_vat:.2f}, "
            f"Delivery: {self.calculated_delivery_fee:.2f}, Total: {self.calculated_total:.2f}"
        )


@dataclass
class RushDeliveryValidationResult(SectionValidationResult):
    rush_delivery_available: bool = False
    address_eligible: bool = False
    items_eligible: bool = False
    eligibility_reason: Optional[str] = None
    eligible_items: list[str] = field(default_factory=list)
    ineligible_items: list[str] = field(default_factory=list)

    def add_eligible_item(self, item: Optional[str]) -> None:
        if item is not None and item.strip():
            self.eligible_items.append(item)

    def add_ineligible_item(self, item: Optional[str]) -> None:
        if item is not None and item.strip():
            self.ineligible_items.append(item)

    @property
    def eligibility_summary(self) -> str:
        if self.rush_delivery_available:
            return f"Rush delivery available - {len(self.eligible_items)} eligible items"
        if not self.address_eligible:
            return "Rush delivery unavailable - address not eligible"
        if not self.items_eligible:
            return "Rush delivery unavailable - no eligible items"
        return f"Rush delivery unavailable - {self.eligibility_reason or 'unknown reason'}"
