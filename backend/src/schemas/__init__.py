"""Pydantic response schemas for engine results"""

from .shipping import DeliveryFeeBreakdownResponse
from .validation import (
    DetailedValidationReportResponse,
    ValidationIssueResponse,
    ValidationSectionResponse,
    ValidationStatisticsResponse,
)

__all__ = [
    "DeliveryFeeBreakdownResponse",
    "DetailedValidationReportResponse",
    "ValidationIssueResponse",
    "ValidationSectionResponse",
    "ValidationStatisticsResponse",
]
