"""Payment method models"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class PaymentMethodType(str, Enum):
    """Payment-method categories with a dedicated strategy"""
    CREDIT_CARD = "CREDIT_CARD"
    DOMESTIC_DEBIT_CARD = "DOMESTIC_DEBIT_CARD"


class GatewayStatus(str, Enum):
    """Normalized gateway transaction status"""
    SUCCESS = "SUCCESS"
    PENDING = "PENDING"
    CANCELLED = "CANCELLED"
    FAILED = "FAILED"


@dataclass
class PaymentMethod:
    payment_method_id: str
    method_type: PaymentMethodType
    user_id: Optional[str] = None


@dataclass
class CardDetails:
    """Card data forwarded to the gateway; only the masked number is kept."""
    cardholder_name: str
    card_number_masked: str
    expiry_date_mm_yy: str
    issuing_bank: Optional[str] = None


# Parameter keys shared by strategies and gateway adapters
BANK_CODE_PARAM = "bankCode"
RESPONSE_CODE_KEY = "responseCode"
MESSAGE_KEY = "message"
TRANSACTION_ID_KEY = "transactionId"
PAYMENT_URL_KEY = "paymentUrl"
