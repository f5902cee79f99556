"""Detailed validation report aggregating all section results"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional, Union

from .models import ValidationIssue, ValidationSeverity, fold_issues
from .results import SectionValidationResult


CRITICAL_RECOMMENDATION = "Critical issues detected - contact technical support immediately"
ERROR_RECOMMENDATION = "Errors must be fixed before proceeding with order processing"
WARNING_RECOMMENDATION = "Warnings should be reviewed - order can proceed but may have issues"
READY_RECOMMENDATION = "Order validation passed - ready for processing"


@dataclass(frozen=True)
class ValidationSection:
    """Snapshot of one section result taken when it is added to a report"""
    name: str
    is_valid: bool
    severity: ValidationSeverity
    issues: tuple[ValidationIssue, ...] = ()
    recovery_suggestions: tuple[str, ...] = ()
    summary: str = "No validation performed"

    @classmethod
    def from_result(cls, name: str, result: Optional[SectionValidationResult]) -> "ValidationSection":
        if result is None:
            return cls(name=name, is_valid=True, severity=ValidationSeverity.INFO)
        return cls(
            name=name,
            is_valid=result.is_valid,
            severity=result.severity,
            issues=tuple(result.issues),
            recovery_suggestions=tuple(result.recovery_suggestions),
            summary=result.summary,
        )

    def has_errors(self) -> bool:
        return any(issue.is_blocking for issue in self.issues)


@dataclass(frozen=True)
class ValidationStatistics:
    total: int = 0
    critical: int = 0
    errors: int = 0
    warnings: int = 0
    info: int = 0

    @classmethod
    def from_issues(cls, issues: list[ValidationIssue]) -> "ValidationStatistics":
        def count(severity: ValidationSeverity) -> int:
            return sum(1 for issue in issues if issue.severity is severity)

        return cls(
            total=len(issues),
            critical=count(ValidationSeverity.CRITICAL),
            errors=count(ValidationSeverity.ERROR),
            warnings=count(ValidationSeverity.WARNING),
            info=count(ValidationSeverity.INFO),
        )


@dataclass
class DetailedValidationReport:
    """
    Order-level validation report.

    Overall validity and severity are the fold of every issue in the report,
    so a single CRITICAL issue anywhere makes the report invalid/CRITICAL.

    Usage:
        report = DetailedValidationReport(order_id="ORD-1")
        report.add_section("Order Items", item_result)
        report.generate_summary()
        report.generate_recommendations()
    """
    order_id: Optional[str] = None
    validated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    sections: dict[str, ValidationSection] = field(default_factory=dict)
    all_issues: list[ValidationIssue] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    recovery_suggestions: list[str] = field(default_factory=list)
    context: dict[str, Any] = field(default_factory=dict)
    summary: str = ""

    @property
    def is_valid(self) -> bool:
        return fold_issues(self.all_issues).is_valid

    @property
    def severity(self) -> ValidationSeverity:
        return fold_issues(self.all_issues).severity

    @property
    def statistics(self) -> ValidationStatistics:
        return ValidationStatistics.from_issues(self.all_issues)

    def add_section(
        self,
        name: str,
        result: Union[SectionValidationResult, ValidationSection, None]
    ) -> ValidationSection:
        """
        Add a section and merge its issues and recovery suggestions.

        Raises:
            ValueError: If a section with this name was already added
        """
        if name in self.sections:
            raise ValueError(f"Section '{name}' is already part of this report")

        if isinstance(result, ValidationSection):
            section = result
        else:
            section = ValidationSection.from_result(name, result)

        self.sections[name] = section
        self.all_issues.extend(section.issues)
        self.recovery_suggestions.extend(section.recovery_suggestions)
        return section

    def section(self, name: str) -> Optional[ValidationSection]:
        return self.sections.get(name)

    def has_section_errors(self, name: str) -> bool:
        section = self.sections.get(name)
        return section is not None and section.has_errors()

    def add_issue(self, issue: Optional[ValidationIssue]) -> None:
        if issue is not None:
            self.all_issues.append(issue)

    def add_recommendation(self, recommendation: Optional[str]) -> None:
        if recommendation is not None and recommendation.strip():
            self.recommendations.append(recommendation)

    def add_recovery_suggestion(self, suggestion: Optional[str]) -> None:
        if suggestion is not None and suggestion.strip():
            self.recovery_suggestions.append(suggestion)

    def add_context(self, key: str, value: Any) -> None:
        self.context[key] = value

    def has_errors(self) -> bool:
        return any(issue.is_blocking for issue in self.all_issues)

    def has_critical_errors(self) -> bool:
        return any(issue.is_critical for issue in self.all_issues)

    def has_warnings(self) -> bool:
        return any(issue.severity is ValidationSeverity.WARNING for issue in self.all_issues)

    @property
    def error_issues(self) -> list[ValidationIssue]:
        """ERROR and CRITICAL issues"""
        return [issue for issue in self.all_issues if issue.is_blocking]

    @property
    def critical_issues(self) -> list[ValidationIssue]:
        return [issue for issue in self.all_issues if issue.is_critical]

    @property
    def warning_issues(self) -> list[ValidationIssue]:
        return [issue for issue in self.all_issues if issue.severity is ValidationSeverity.WARNING]

    def generate_summary(self) -> str:
        stats = self.statistics
        if stats.total == 0:
            self.summary = "Validation completed successfully - no issues found"
            return self.summary

        parts = []
        if stats.critical:
            parts.append(f"{stats.critical} critical")
        if stats.errors:
            parts.append(f"{stats.errors} error(s)")
        if stats.warnings:
            parts.append(f"{stats.warnings} warning(s)")
        if stats.info:
            parts.append(f"{stats.info} info")

        self.summary = f"Validation completed with {stats.total} issue(s): " + ", ".join(parts)
        return self.summary

    def generate_recommendations(self) -> list[str]:
        """Rebuild the recommendation list from the current issues."""
        self.recommendations.clear()

        if self.has_critical_errors():
            self.recommendations.append(CRITICAL_RECOMMENDATION)
        if self.has_errors():
            self.recommendations.append(ERROR_RECOMMENDATION)
        if self.has_warnings():
            self.recommendations.append(WARNING_RECOMMENDATION)

        for name, section in self.sections.items():
            if section.has_errors():
                self.recommendations.append(f"Fix {name.lower()} issues before proceeding")

        if not self.recommendations:
            self.recommendations.append(READY_RECOMMENDATION)
        return self.recommendations
