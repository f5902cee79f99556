"""Payment strategies - one per payment-method category.

Each strategy asks the gateway adapter for its native parameter set, merges
the caller's parameters on top (caller values win) and forwards the result
to the adapter. Gateway failures are never retried here.
"""

import logging
from decimal import Decimal
from typing import Any, Mapping, Optional

from domain.exceptions import EngineError, InputValidationError
from domain.orders.models import Order
from observability.metrics import payments_processed_total

from .models import BANK_CODE_PARAM, PaymentMethodType
from .ports import GatewayAdapterPort, PaymentStrategyPort


logger = logging.getLogger(__name__)


class BasePaymentStrategy(PaymentStrategyPort):
    """
    Shared gateway plumbing for payment strategies.

    Subclasses declare strategy_type and may override
    validate_client_parameters() to require method-specific values.
    """

    def __init__(self, gateway_adapter: GatewayAdapterPort):
        if gateway_adapter is None:
            raise ValueError(f"gateway_adapter cannot be None for {type(self).__name__}")
        self.gateway_adapter = gateway_adapter

    def validate_client_parameters(self, client_parameters: Mapping[str, Any]) -> None:
        """Hook for method-specific parameter checks. Default accepts anything."""
        pass

    def build_payment_parameters(
        self,
        order: Order,
        client_parameters: Mapping[str, Any]
    ) -> dict[str, Any]:
        """Adapter-prepared parameters overridden by caller-supplied values."""
        parameters = self.gateway_adapter.prepare_payment_parameters(order)
        parameters.update(client_parameters)
        return parameters

    def process_payment(
        self,
        order: Optional[Order],
        client_parameters: Optional[Mapping[str, Any]] = None
    ) -> dict[str, str]:
        if order is None:
            raise InputValidationError("Order cannot be null for payment processing.")

        client_parameters = client_parameters or {}
        self.validate_client_parameters(client_parameters)

        logger.info(
            f"{type(self).__name__}: processing payment for order {order.order_id} "
            f"via gateway {self.gateway_adapter.gateway_type}",
            extra={
                "order_id": order.order_id,
                "payment_method": self.strategy_type.value,
                "gateway": self.gateway_adapter.gateway_type,
            }
        )

        parameters = self.build_payment_parameters(order, client_parameters)
        return self._forward("payment", self.gateway_adapter.process_payment, parameters)

    def process_refund(
        self,
        original_transaction_id: Optional[str],
        order: Optional[Order],
        refund_amount: Decimal,
        reason: Optional[str] = None
    ) -> dict[str, str]:
        if order is None or original_transaction_id is None or not original_transaction_id.strip():
            raise InputValidationError(
                "Order and original transaction ID are required for refund processing."
            )

        logger.info(
            f"{type(self).__name__}: processing refund of {refund_amount} for order "
            f"{order.order_id}, transaction {original_transaction_id}",
            extra={
                "order_id": order.order_id,
                "payment_method": self.strategy_type.value,
                "gateway": self.gateway_adapter.gateway_type,
            }
        )

        parameters = self.gateway_adapter.prepare_refund_parameters(
            order, original_transaction_id, refund_amount, reason
        )
        return self._forward("refund", self.gateway_adapter.process_refund, parameters)

    def _forward(self, operation: str, call, parameters: Mapping[str, Any]) -> dict[str, str]:
        method = self.strategy_type.value.lower()
        try:
            response = call(parameters)
        except EngineError:
            payments_processed_total.labels(method=method, operation=operation, status="error").inc()
            raise
        payments_processed_total.labels(method=method, operation=operation, status="success").inc()
        return response


class CreditCardPaymentStrategy(BasePaymentStrategy):
    """International/credit card payments. No extra parameters required."""

    @property
    def strategy_type(self) -> PaymentMethodType:
        return PaymentMethodType.CREDIT_CARD


class DomesticCardPaymentStrategy(BasePaymentStrategy):
    """Domestic debit card payments. The caller must name the issuing bank."""

    @property
    def strategy_type(self) -> PaymentMethodType:
        return PaymentMethodType.DOMESTIC_DEBIT_CARD

    def validate_client_parameters(self, client_parameters: Mapping[str, Any]) -> None:
        bank_code = client_parameters.get(BANK_CODE_PARAM)
        if bank_code is None or not str(bank_code).strip():
            raise InputValidationError(
                f"Parameter '{BANK_CODE_PARAM}' is required for Domestic Card payment strategy."
            )
