"""Observability for the fee, payment and validation engine.

Structured logging with request correlation plus Prometheus counters for fee
calculations, gateway calls and validation outcomes.
"""

from .logging_config import JSONFormatter, RequestIDFilter, configure_from_settings, configure_logging, get_logger
from .metrics import (
    payments_processed_total,
    shipping_fee_amount,
    shipping_fee_calculations_total,
    validation_issues_total,
    validation_reports_total,
)
from .request_id import generate_request_id, get_request_id, request_id_var, request_scope, set_request_id

__all__ = [
    # Logging
    "JSONFormatter",
    "RequestIDFilter",
    "configure_from_settings",
    "configure_logging",
    "get_logger",
    # Metrics
    "payments_processed_total",
    "shipping_fee_amount",
    "shipping_fee_calculations_total",
    "validation_issues_total",
    "validation_reports_total",
    # Request ID
    "generate_request_id",
    "get_request_id",
    "request_id_var",
    "request_scope",
    "set_request_id",
]
