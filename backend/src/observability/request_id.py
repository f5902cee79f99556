"""Correlation IDs for engine requests.

A fee calculation, payment or validation run can be tagged with a request ID
that every log line emitted during the run carries. The ID lives in a
ContextVar, so concurrent requests (threads or asyncio tasks) never see each
other's value.

Usage:
    with request_scope(incoming_id):
        engine.validate(order)
"""

import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional


NO_REQUEST_ID = "no-request-id"

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def generate_request_id() -> str:
    """New random (UUID4) request ID."""
    return str(uuid.uuid4())


def get_request_id() -> str:
    """Request ID bound to the current context, or NO_REQUEST_ID."""
    return request_id_var.get() or NO_REQUEST_ID


def set_request_id(request_id: str) -> None:
    """Bind request_id to the current context until it is replaced."""
    request_id_var.set(request_id)


@contextmanager
def request_scope(request_id: Optional[str] = None) -> Iterator[str]:
    """Bind a request ID (generated when omitted) for the duration of a block.

    The previously bound ID is restored on exit, including when the block
    raises.
    """
    token = request_id_var.set(request_id or generate_request_id())
    try:
        yield request_id_var.get()
    finally:
        request_id_var.reset(token)
