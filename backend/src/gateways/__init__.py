"""Payment gateway adapters.

Infrastructure implementations of GatewayAdapterPort plus the registry that
resolves the configured gateway type at startup.
"""

from .registry import GatewayRegistry, build_gateway_adapter
from .implementations.stub_gateway import StubGatewayAdapter, map_response_code

__all__ = [
    "GatewayRegistry",
    "build_gateway_adapter",
    "StubGatewayAdapter",
    "map_response_code",
]
