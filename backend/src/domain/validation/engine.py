"""OrderValidationEngine - runs the section validators and builds the report"""

import logging
from typing import Any, Callable, Optional

from domain.orders.models import Order
from observability.metrics import validation_issues_total, validation_reports_total

from .models import ValidationContext, ValidationIssue, ValidationSeverity
from .port import ValidatorPort
from .report import DetailedValidationReport
from .results import OrderValidationResult, SectionValidationResult
from .rules import (
    validate_delivery_info,
    validate_order_items,
    validate_order_pricing,
    validate_order_structure,
    validate_rush_delivery,
)
from .rules.delivery_rules import wants_rush


logger = logging.getLogger(__name__)

ORDER_STRUCTURE = "Order Structure"
ORDER_ITEMS = "Order Items"
DELIVERY_INFORMATION = "Delivery Information"
PRICING = "Pricing"
RUSH_DELIVERY = "Rush Delivery"

REPORT_VERSION = "2.0"


def _rush_requested(order: Optional[Order]) -> bool:
    return order is not None and order.delivery_info is not None and wants_rush(order.delivery_info)


# (section name, subject selector, rule, applies-to-order predicate)
SectionRule = tuple[
    str,
    Callable[[Optional[Order]], Any],
    Callable[[Any, ValidationContext], SectionValidationResult],
    Callable[[Optional[Order]], bool],
]

SECTION_RULES: list[SectionRule] = [
    (ORDER_STRUCTURE, lambda order: order, validate_order_structure, lambda order: True),
    (ORDER_ITEMS, lambda order: order.lines if order else None, validate_order_items, lambda order: True),
    (DELIVERY_INFORMATION, lambda order: order.delivery_info if order else None, validate_delivery_info, lambda order: True),
    (PRICING, lambda order: order, validate_order_pricing, lambda order: True),
    (RUSH_DELIVERY, lambda order: order, validate_rush_delivery, _rush_requested),
]


class OrderValidationEngine(ValidatorPort):
    """Concrete implementation of ValidatorPort.

    Runs every section rule in order and merges the results into one
    DetailedValidationReport. The rush delivery section only runs when the
    order requests rush delivery. A rule that crashes is recorded as a
    CRITICAL issue for its section (fail-open), so the report is always
    produced.
    """

    def __init__(self, context: Optional[ValidationContext] = None):
        self.context = context or ValidationContext()

    @classmethod
    def from_settings(cls, settings) -> "OrderValidationEngine":
        return cls(ValidationContext.from_settings(settings))

    def validate(self, order: Optional[Order]) -> DetailedValidationReport:
        order_id = order.order_id if order is not None else None
        report = DetailedValidationReport(order_id=order_id)
        report.add_context("validationVersion", REPORT_VERSION)
        report.add_context("rushRequested", _rush_requested(order))

        for section_name, select, rule, applies in SECTION_RULES:
            if not applies(order):
                continue

            result = self._run_section(section_name, rule, select, order)
            report.add_section(section_name, result)

            for issue in result.issues:
                validation_issues_total.labels(
                    section=section_name, severity=issue.severity.value
                ).inc()
            logger.debug(
                f"Validation section '{section_name}' found {len(result.issues)} issues for order {order_id}",
                extra={"order_id": order_id, "section": section_name}
            )

        report.generate_summary()
        report.generate_recommendations()
        validation_reports_total.labels(verdict="valid" if report.is_valid else "invalid").inc()

        logger.info(
            f"Validation completed for order {order_id}: {report.summary}",
            extra={"order_id": order_id}
        )
        return report

    def _run_section(
        self,
        section_name: str,
        rule: Callable[[Any, ValidationContext], SectionValidationResult],
        select: Callable[[Optional[Order]], Any],
        order: Optional[Order]
    ) -> SectionValidationResult:
        try:
            return rule(select(order), self.context)
        except Exception as e:
            logger.error(
                f"Validation section '{section_name}' failed for order "
                f"{order.order_id if order is not None else None}: {e}",
                exc_info=True,
                extra={"section": section_name}
            )
            result = OrderValidationResult()
            result.add_issue(ValidationIssue(
                field="validation",
                code="VALIDATION_ERROR",
                message=f"Validation section '{section_name}' failed to execute: {e}",
                severity=ValidationSeverity.CRITICAL,
                user_message="Order could not be validated",
            ))
            result.add_context("error", str(e))
            return result

    def is_ready_for_payment(self, report: DetailedValidationReport) -> bool:
        ready = report.is_valid and not report.has_critical_errors()
        logger.info(
            f"Payment readiness for order {report.order_id}: ready={ready}, "
            f"blocking={len(report.error_issues)}",
            extra={"order_id": report.order_id}
        )
        return ready
