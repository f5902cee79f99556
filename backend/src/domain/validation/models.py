"""Validation models: severity, issue and the verdict fold"""

from dataclasses import dataclass, field as dataclass_field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, Optional


class ValidationSeverity(str, Enum):
    """Issue severity, ordered by blocking power: INFO < WARNING < ERROR < CRITICAL"""
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]

    @property
    def is_blocking(self) -> bool:
        """ERROR and CRITICAL issues make a result invalid."""
        return self in (ValidationSeverity.ERROR, ValidationSeverity.CRITICAL)

    @property
    def is_critical(self) -> bool:
        return self is ValidationSeverity.CRITICAL

    @classmethod
    def highest(cls, severities: Iterable["ValidationSeverity"]) -> "ValidationSeverity":
        """Maximum severity present, INFO when there is none."""
        return max(severities, key=lambda s: s.rank, default=cls.INFO)


_SEVERITY_RANK = {
    ValidationSeverity.INFO: 0,
    ValidationSeverity.WARNING: 1,
    ValidationSeverity.ERROR: 2,
    ValidationSeverity.CRITICAL: 3,
}


@dataclass(frozen=True)
class ValidationIssue:
    """A single validation finding.

    Immutable once constructed. Two issues are equal when field, code and
    severity match; messages, values and fixes do not take part.
    """
    field: Optional[str]
    code: str
    message: str = dataclass_field(compare=False)
    severity: ValidationSeverity
    user_message: Optional[str] = dataclass_field(default=None, compare=False)
    actual_value: Any = dataclass_field(default=None, compare=False)
    expected_value: Any = dataclass_field(default=None, compare=False)
    possible_fixes: tuple[str, ...] = dataclass_field(default=(), compare=False)

    def __post_init__(self):
        if self.user_message is None:
            object.__setattr__(self, "user_message", self.message)
        fixes = tuple(fix for fix in self.possible_fixes if fix and fix.strip())
        object.__setattr__(self, "possible_fixes", fixes)

    @property
    def is_blocking(self) -> bool:
        return self.severity.is_blocking

    @property
    def is_critical(self) -> bool:
        return self.severity.is_critical

    @property
    def summary(self) -> str:
        """e.g. "[ERROR] deliveryInfo.city: City/Province is required" """
        prefix = f"[{self.severity.value}] "
        if self.field:
            prefix += f"{self.field}: "
        return prefix + self.user_message


@dataclass(frozen=True)
class Verdict:
    """Derived validity and severity for a collection of issues."""
    is_valid: bool
    severity: ValidationSeverity


def fold_issues(issues: Iterable[ValidationIssue]) -> Verdict:
    """Reduce issues to a verdict.

    Invalid when any issue is ERROR or CRITICAL; severity is the maximum
    present, INFO for an empty sequence.
    """
    severity = ValidationSeverity.highest(issue.severity for issue in issues)
    return Verdict(is_valid=not severity.is_blocking, severity=severity)


@dataclass(frozen=True)
class ValidationContext:
    """Thresholds passed to every section rule.

    `now` pins the clock for date checks; None means the current time.
    """
    vat_rate: Decimal = Decimal("0.10")
    pricing_tolerance: Decimal = Decimal("0.01")
    max_order_age_days: int = 30
    high_amount_threshold: Decimal = Decimal("100000000")
    now: Optional[datetime] = None

    @classmethod
    def from_settings(cls, settings) -> "ValidationContext":
        return cls(
            vat_rate=settings.VAT_RATE,
            pricing_tolerance=settings.PRICING_TOLERANCE,
            max_order_age_days=settings.MAX_ORDER_AGE_DAYS,
            high_amount_threshold=settings.HIGH_ORDER_AMOUNT_THRESHOLD,
        )
