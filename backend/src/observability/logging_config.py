"""Structured logging for the engine.

Engine modules log through logging.getLogger(__name__) and attach order,
strategy, gateway or validation-section context with `extra=`. The handler
installed by configure_logging() stamps each record with the active request
ID and renders it either as one JSON object per line or as plain text.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Optional, TextIO

from .request_id import get_request_id


# Record attributes copied into the JSON payload when a caller passes them via extra=
CONTEXT_FIELDS = ("order_id", "strategy", "gateway", "section", "payment_method")

PLAIN_FORMAT = "%(asctime)s - %(levelname)s - %(request_id)s - %(name)s - %(message)s"


class RequestIDFilter(logging.Filter):
    """Stamp every record with the request ID bound to the current context."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id()
        return True


class JSONFormatter(logging.Formatter):
    """Render log records as single-line JSON.

    Payload keys: timestamp, level, logger, request_id, module, function,
    message, plus any CONTEXT_FIELDS present on the record and error/traceback
    when exception info is attached.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "request_id": getattr(record, "request_id", "no-request-id"),
            "module": record.module,
            "function": record.funcName,
            "message": record.getMessage(),
        }

        payload.update(
            (name, str(getattr(record, name)))
            for name in CONTEXT_FIELDS
            if getattr(record, name, None) is not None
        )

        if record.exc_info:
            payload["error"] = str(record.exc_info[1])
            payload["traceback"] = self.formatException(record.exc_info)

        return json.dumps(payload)


def configure_logging(
    level: str = "INFO",
    json_format: bool = True,
    stream: Optional[TextIO] = None
) -> logging.Handler:
    """Replace the root handlers with a single engine handler.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR), case-insensitive
        json_format: JSON lines when True, PLAIN_FORMAT otherwise
        stream: Output stream (defaults to stdout)

    Returns:
        The installed handler
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: '{level}'")

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(JSONFormatter() if json_format else logging.Formatter(PLAIN_FORMAT))
    handler.addFilter(RequestIDFilter())

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(numeric_level)
    root_logger.addHandler(handler)
    return handler


def configure_from_settings(settings) -> logging.Handler:
    """Configure logging from engine Settings (LOG_LEVEL, LOG_JSON)."""
    return configure_logging(level=settings.LOG_LEVEL, json_format=settings.LOG_JSON)


def get_logger(name: str) -> logging.Logger:
    """Module logger; records pick up the request ID once configure_logging() ran."""
    return logging.getLogger(name)
