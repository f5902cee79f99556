"""Payment dispatcher - selects the strategy for a payment-method category."""

from decimal import Decimal
from typing import Any, Mapping, Optional

from domain.exceptions import InputValidationError
from domain.orders.models import Order

from .models import PaymentMethodType
from .ports import GatewayAdapterPort, PaymentStrategyPort
from .strategies import CreditCardPaymentStrategy, DomesticCardPaymentStrategy


class PaymentDispatcher:
    """
    Routes payment calls through a dispatch table keyed on PaymentMethodType.

    Usage:
        dispatcher = PaymentDispatcher.from_adapter(build_gateway_adapter(settings))
        response = dispatcher.process_payment(
            PaymentMethodType.DOMESTIC_DEBIT_CARD, order, {"bankCode": "NCB"}
        )

    The table is fixed at construction; dispatch only reads it.
    """

    def __init__(self, strategies: list[PaymentStrategyPort]):
        self._strategies: dict[PaymentMethodType, PaymentStrategyPort] = {}
        for strategy in strategies:
            if strategy.strategy_type in self._strategies:
                raise RuntimeError(
                    f"Payment strategy for '{strategy.strategy_type.value}' is already registered"
                )
            self._strategies[strategy.strategy_type] = strategy

    @classmethod
    def from_adapter(cls, gateway_adapter: GatewayAdapterPort) -> "PaymentDispatcher":
        """Build a dispatcher with every built-in strategy sharing one adapter."""
        return cls([
            CreditCardPaymentStrategy(gateway_adapter),
            DomesticCardPaymentStrategy(gateway_adapter),
        ])

    def supported_types(self) -> list[PaymentMethodType]:
        return sorted(self._strategies.keys(), key=lambda t: t.value)

    def strategy_for(self, method_type: PaymentMethodType) -> PaymentStrategyPort:
        """
        Look up the strategy for a payment-method category.

        Raises:
            InputValidationError: If no strategy handles method_type
        """
        strategy = self._strategies.get(method_type)
        if strategy is None:
            label = getattr(method_type, "value", method_type)
            raise InputValidationError(f"Unsupported payment method type: {label}")
        return strategy

    def process_payment(
        self,
        method_type: PaymentMethodType,
        order: Optional[Order],
        client_parameters: Optional[Mapping[str, Any]] = None
    ) -> dict[str, str]:
        return self.strategy_for(method_type).process_payment(order, client_parameters)

    def process_refund(
        self,
        method_type: PaymentMethodType,
        original_transaction_id: Optional[str],
        order: Optional[Order],
        refund_amount: Decimal,
        reason: Optional[str] = None
    ) -> dict[str, str]:
        return self.strategy_for(method_type).process_refund(
            original_transaction_id, order, refund_amount, reason
        )
