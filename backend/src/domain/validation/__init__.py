"""Validation domain module.

Section validators for order structure, items, delivery, pricing and rush
delivery, aggregated into a DetailedValidationReport.
"""

from .engine import OrderValidationEngine
from .models import ValidationContext, ValidationIssue, ValidationSeverity, Verdict, fold_issues
from .port import ValidatorPort
from .report import DetailedValidationReport, ValidationSection, ValidationStatistics
from .results import (
    DeliveryValidationResult,
    OrderItemValidationResult,
    OrderValidationResult,
    PricingValidationResult,
    RushDeliveryValidationResult,
    SectionState,
    SectionValidationResult,
)

__all__ = [
    "OrderValidationEngine",
    "ValidationContext",
    "ValidationIssue",
    "ValidationSeverity",
    "Verdict",
    "fold_issues",
    "ValidatorPort",
    "DetailedValidationReport",
    "ValidationSection",
    "ValidationStatistics",
    "DeliveryValidationResult",
    "OrderItemValidationResult",
    "OrderValidationResult",
    "PricingValidationResult",
    "RushDeliveryValidationResult",
    "SectionState",
    "SectionValidationResult",
]
