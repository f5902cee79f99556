"""
Stub Gateway - In-memory payment gateway for testing

Simulates a settlement gateway that answers with response code "00" without
any network access. Used for unit tests and local development.
"""

import logging
from decimal import Decimal
from typing import Any, Mapping, Optional
from uuid import uuid4

from domain.exceptions import InputValidationError, PaymentError, ResourceNotFoundError
from domain.orders.models import Order
from domain.payment.models import (
    MESSAGE_KEY,
    PAYMENT_URL_KEY,
    RESPONSE_CODE_KEY,
    TRANSACTION_ID_KEY,
    CardDetails,
    GatewayStatus,
    PaymentMethod,
)
from domain.payment.ports import GatewayAdapterPort


logger = logging.getLogger(__name__)

SUCCESS_CODE = "00"
FAILURE_CODE = "99"

_STATUS_BY_CODE = {
    "00": GatewayStatus.SUCCESS,
    "01": GatewayStatus.PENDING,
    "02": GatewayStatus.CANCELLED,
}

VALID_MODES = ("success", "failure", "not_found")


def map_response_code(code: Optional[str]) -> GatewayStatus:
    """Normalize a gateway response code. Unknown or missing codes are FAILED."""
    return _STATUS_BY_CODE.get(code, GatewayStatus.FAILED)


class StubGatewayAdapter(GatewayAdapterPort):
    """
    Stub payment gateway for testing and development.

    Configuration:
        - mode: "success" | "failure" | "not_found" (default: "success")
        - timeout_seconds: accepted for parity with real adapters; unused
        - error_message: Custom error message when mode="failure"

    Usage:
        # Success case
        adapter = StubGatewayAdapter()
        response = adapter.process_payment(adapter.prepare_payment_parameters(order))
        assert response["responseCode"] == "00"

        # Failure case
        adapter = StubGatewayAdapter(mode="failure")
        # process_payment raises PaymentError
    """

    def __init__(
        self,
        mode: str = "success",
        timeout_seconds: int = 30,
        error_message: str = "Stub gateway simulated failure"
    ):
        if mode not in VALID_MODES:
            raise ValueError(
                f"Invalid stub gateway mode '{mode}'. Allowed values: {', '.join(VALID_MODES)}"
            )
        self.mode = mode
        self.timeout_seconds = timeout_seconds
        self.error_message = error_message

    @property
    def gateway_type(self) -> str:
        return "STUB"

    def prepare_payment_parameters(
        self,
        order: Order,
        payment_method: Optional[PaymentMethod] = None,
        card_details: Optional[CardDetails] = None
    ) -> dict[str, Any]:
        if order is None or not order.order_id:
            raise InputValidationError("Order ID is required to prepare payment parameters.")

        parameters: dict[str, Any] = {
            "orderId": order.order_id,
            "amount": str(order.total_amount),
            "currency": "VND",
            "orderInfo": f"Payment for order {order.order_id}",
        }
        if payment_method is not None:
            parameters["paymentMethod"] = payment_method.method_type.value
        if card_details is not None:
            parameters["cardHolder"] = card_details.cardholder_name
            parameters["cardNumber"] = card_details.card_number_masked
        return parameters

    def process_payment(self, parameters: Mapping[str, Any]) -> dict[str, str]:
        order_id = str(parameters.get("orderId", ""))

        if self.mode == "failure":
            logger.info("StubGatewayAdapter: Simulating payment failure")
            raise PaymentError(self.error_message, gateway_code=FAILURE_CODE)

        if self.mode == "not_found":
            logger.info("StubGatewayAdapter: Simulating unknown order")
            raise ResourceNotFoundError("order", order_id)

        transaction_id = uuid4().hex
        logger.info(
            f"StubGatewayAdapter: Payment accepted for order {order_id}",
            extra={"order_id": order_id, "gateway": self.gateway_type}
        )
        return {
            RESPONSE_CODE_KEY: SUCCESS_CODE,
            MESSAGE_KEY: "Payment successful",
            TRANSACTION_ID_KEY: transaction_id,
            PAYMENT_URL_KEY: f"https://stub-gateway.local/pay/{transaction_id}",
        }

    def prepare_refund_parameters(
        self,
        order: Order,
        original_transaction_id: str,
        amount: Decimal,
        reason: Optional[str]
    ) -> dict[str, Any]:
        return {
            "orderId": order.order_id,
            "originalTransactionId": original_transaction_id,
            "amount": str(amount),
            "reason": reason or "",
        }

    def process_refund(self, parameters: Mapping[str, Any]) -> dict[str, str]:
        original_transaction_id = str(parameters.get("originalTransactionId", ""))

        if self.mode == "failure":
            logger.info("StubGatewayAdapter: Simulating refund failure")
            raise PaymentError(self.error_message, gateway_code=FAILURE_CODE)

        if self.mode == "not_found":
            logger.info("StubGatewayAdapter: Simulating unknown transaction")
            raise ResourceNotFoundError("transaction", original_transaction_id)

        logger.info(
            f"StubGatewayAdapter: Refund accepted for transaction {original_transaction_id}",
            extra={"order_id": str(parameters.get("orderId", "")), "gateway": self.gateway_type}
        )
        return {
            RESPONSE_CODE_KEY: SUCCESS_CODE,
            MESSAGE_KEY: "Refund successful",
            TRANSACTION_ID_KEY: uuid4().hex,
        }
