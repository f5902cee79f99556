"""Payment ports - gateway adapter and payment strategy contracts.

Following hexagonal architecture, payment strategies depend only on
GatewayAdapterPort. Signing, HTTP transport and response parsing live in
adapter implementations (see the gateways package), so strategies stay
gateway-agnostic and testable without network access.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Mapping, Optional

from domain.orders.models import Order

from .models import CardDetails, PaymentMethod, PaymentMethodType


class GatewayAdapterPort(ABC):
    """
    Abstract interface for payment gateway adapters.

    Implementations:
    - StubGatewayAdapter: In-memory gateway for tests and development
    - Future: a signed HTTP adapter per settlement gateway

    Implementation Requirements:
    - process_payment/process_refund MUST raise PaymentError on rejection
    - MUST raise ResourceNotFoundError when a referenced transaction is unknown
    - MUST be thread-safe or stateless; strategies share one adapter
    """

    @abstractmethod
    def prepare_payment_parameters(
        self,
        order: Order,
        payment_method: Optional[PaymentMethod] = None,
        card_details: Optional[CardDetails] = None
    ) -> dict[str, Any]:
        """
        Build the gateway's native payment parameters from order data.

        Returns:
            A new, caller-owned mutable dict

        Raises:
            InputValidationError: If the order lacks data the gateway needs
        """
        pass

    @abstractmethod
    def process_payment(self, parameters: Mapping[str, Any]) -> dict[str, str]:
        """
        Submit a payment.

        Returns:
            Gateway response (responseCode, message, transactionId, optional paymentUrl)

        Raises:
            PaymentError: If the gateway rejects or cannot complete the payment
        """
        pass

    @abstractmethod
    def prepare_refund_parameters(
        self,
        order: Order,
        original_transaction_id: str,
        amount: Decimal,
        reason: Optional[str]
    ) -> dict[str, Any]:
        """Build the gateway's native refund parameters."""
        pass

    @abstractmethod
    def process_refund(self, parameters: Mapping[str, Any]) -> dict[str, str]:
        """
        Submit a refund.

        Raises:
            PaymentError: If the gateway rejects the refund
            ResourceNotFoundError: If the original transaction is unknown
        """
        pass

    @property
    @abstractmethod
    def gateway_type(self) -> str:
        """Gateway type identifier (UPPERCASE_WITH_UNDERSCORES), e.g. STUB"""
        pass


class PaymentStrategyPort(ABC):
    """Contract for one payment-method category."""

    @abstractmethod
    def process_payment(
        self,
        order: Optional[Order],
        client_parameters: Optional[Mapping[str, Any]] = None
    ) -> dict[str, str]:
        """
        Pay for an order through the gateway.

        Args:
            order: Order to pay for
            client_parameters: Caller-supplied values; these override the
                adapter's prepared parameters

        Raises:
            InputValidationError: If order is missing or a required
                parameter for this method is missing/blank
            PaymentError, ResourceNotFoundError: Propagated from the adapter
        """
        pass

    @abstractmethod
    def process_refund(
        self,
        original_transaction_id: Optional[str],
        order: Optional[Order],
        refund_amount: Decimal,
        reason: Optional[str] = None
    ) -> dict[str, str]:
        """
        Refund a previous transaction.

        Raises:
            InputValidationError: If order or original_transaction_id is missing/blank
            PaymentError, ResourceNotFoundError: Propagated from the adapter
        """
        pass

    @property
    @abstractmethod
    def strategy_type(self) -> PaymentMethodType:
        """Payment-method category handled by this strategy."""
        pass
