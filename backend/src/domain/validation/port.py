"""ValidatorPort interface"""

from abc import ABC, abstractmethod
from typing import Optional

from domain.orders.models import Order

from .report import DetailedValidationReport


class ValidatorPort(ABC):
    """Port interface for order validation services.

    Defines the contract for validation engines. This allows different
    validation implementations while keeping callers isolated from the rules.
    """

    @abstractmethod
    def validate(self, order: Optional[Order]) -> DetailedValidationReport:
        """Validate an order and build a detailed report.

        Implementations never raise for invalid data; every problem becomes
        a ValidationIssue in the report.

        Args:
            order: The order to validate (may be None)

        Returns:
            DetailedValidationReport with summary and recommendations generated
        """
        pass

    @abstractmethod
    def is_ready_for_payment(self, report: DetailedValidationReport) -> bool:
        """Decide whether the caller may proceed to payment.

        Args:
            report: Report produced by validate()

        Returns:
            True if the report has no ERROR or CRITICAL issues
        """
        pass
