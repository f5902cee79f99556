"""Error taxonomy for the fee, payment and validation engine.

Calculation and payment preconditions are hard failures raised at the point
of the failing operation. Section validators never raise; they record
ValidationIssue objects instead.
"""

from typing import Optional


class EngineError(Exception):
    """Base exception for all engine errors."""
    pass


class InputValidationError(EngineError):
    """Input to a calculation or strategy is structurally invalid.

    Raised for missing delivery info, empty line lists, malformed product
    dimensions, missing payment parameters or a province that is not a rush
    zone. Always caller-fixable and never retried automatically.
    """
    pass


class PaymentError(EngineError):
    """The gateway adapter rejected or could not complete a payment/refund.

    Attributes:
        gateway_code: Gateway response code, when the gateway returned one
    """

    def __init__(self, message: str, gateway_code: Optional[str] = None):
        super().__init__(message)
        self.gateway_code = gateway_code


class ResourceNotFoundError(EngineError):
    """A referenced entity does not exist at the adapter boundary.

    Attributes:
        resource: Kind of entity (e.g. "transaction")
        identifier: Identifier that could not be resolved
    """

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} '{identifier}' not found")
        self.resource = resource
        self.identifier = identifier
