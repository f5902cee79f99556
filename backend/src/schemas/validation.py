"""Pydantic schemas for validation report responses"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field

from domain.validation.models import ValidationSeverity
from domain.validation.report import DetailedValidationReport


class ValidationIssueResponse(BaseModel):
    """Response schema for a single validation issue."""
    field: Optional[str] = None
    code: str
    severity: ValidationSeverity
    message: str
    user_message: str
    actual_value: Optional[Any] = None
    expected_value: Optional[Any] = None
    possible_fixes: list[str] = Field(default_factory=list)

    class Config:
        from_attributes = True
        use_enum_values = True


class ValidationStatisticsResponse(BaseModel):
    """Issue counts by severity."""
    total: int
    critical: int
    errors: int
    warnings: int
    info: int

    class Config:
        from_attributes = True


class ValidationSectionResponse(BaseModel):
    """Verdict of one report section."""
    name: str
    is_valid: bool
    severity: ValidationSeverity
    summary: str
    issues: list[ValidationIssueResponse] = Field(default_factory=list)

    class Config:
        from_attributes = True
        use_enum_values = True


class DetailedValidationReportResponse(BaseModel):
    """Response schema for a detailed validation report.

    By default only the verdict, summary and recommendations are exposed;
    issue lists are included when detail is requested.
    """
    order_id: Optional[str] = None
    validated_at: datetime
    is_valid: bool
    severity: ValidationSeverity
    summary: str
    recommendations: list[str] = Field(default_factory=list)
    recovery_suggestions: list[str] = Field(default_factory=list)
    statistics: ValidationStatisticsResponse
    sections: list[ValidationSectionResponse] = Field(default_factory=list)
    issues: Optional[list[ValidationIssueResponse]] = None

    class Config:
        use_enum_values = True
        json_schema_extra = {
            "example": {
                "order_id": "ORD-1001",
                "validated_at": "2026-01-15T09:30:00Z",
                "is_valid": True,
                "severity": "WARNING",
                "summary": "Validation completed with 1 issue(s): 1 warning(s)",
                "recommendations": [
                    "Warnings should be reviewed - order can proceed but may have issues"
                ],
                "recovery_suggestions": [],
                "statistics": {"total": 1, "critical": 0, "errors": 0, "warnings": 1, "info": 0},
                "sections": [],
                "issues": None
            }
        }

    @classmethod
    def from_report(
        cls,
        report: DetailedValidationReport,
        include_issues: bool = False
    ) -> "DetailedValidationReportResponse":
        sections = []
        for section in report.sections.values():
            payload = ValidationSectionResponse.model_validate(section)
            if not include_issues:
                payload.issues = []
            sections.append(payload)

        issues: Optional[list[ValidationIssueResponse]] = None
        if include_issues:
            issues = [ValidationIssueResponse.model_validate(issue) for issue in report.all_issues]

        return cls(
            order_id=report.order_id,
            validated_at=report.validated_at,
            is_valid=report.is_valid,
            severity=report.severity,
            summary=report.summary,
            recommendations=list(report.recommendations),
            recovery_suggestions=list(report.recovery_suggestions),
            statistics=ValidationStatisticsResponse.model_validate(report.statistics),
            sections=sections,
            issues=issues,
        )
