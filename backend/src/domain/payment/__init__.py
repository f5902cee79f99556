"""Payment domain module.

Payment strategies per payment-method category and the dispatcher that
selects them. Gateway adapters live in the gateways package.
"""

from .dispatcher import PaymentDispatcher
from .models import CardDetails, GatewayStatus, PaymentMethod, PaymentMethodType
from .ports import GatewayAdapterPort, PaymentStrategyPort
from .strategies import BasePaymentStrategy, CreditCardPaymentStrategy, DomesticCardPaymentStrategy

__all__ = [
    "PaymentDispatcher",
    "CardDetails",
    "GatewayStatus",
    "PaymentMethod",
    "PaymentMethodType",
    "GatewayAdapterPort",
    "PaymentStrategyPort",
    "BasePaymentStrategy",
    "CreditCardPaymentStrategy",
    "DomesticCardPaymentStrategy",
]
