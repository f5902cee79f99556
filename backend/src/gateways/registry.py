"""
Gateway Registry - registration and resolution of payment gateway adapters

Maps gateway_type strings to adapter classes. The active gateway is chosen
once from Settings.PAYMENT_GATEWAY and handed to the payment dispatcher;
business code never looks it up again.
"""

from typing import Optional, Type

from domain.payment.ports import GatewayAdapterPort

from .implementations.stub_gateway import StubGatewayAdapter


class GatewayRegistry:
    """
    Registry for payment gateway adapter implementations.

    Usage:
        registry = GatewayRegistry.build_default()
        adapter = registry.get("STUB", mode="success")

    Thread-safety: reads are safe once registration is finished. Register
    adapters only while wiring the application.
    """

    def __init__(self):
        self._adapters: dict[str, Type[GatewayAdapterPort]] = {}

    @classmethod
    def build_default(cls) -> "GatewayRegistry":
        """Registry pre-populated with the built-in adapters."""
        registry = cls()
        registry.register("STUB", StubGatewayAdapter)
        return registry

    def register(self, gateway_type: str, implementation: Type[GatewayAdapterPort]) -> None:
        """
        Register a gateway adapter implementation.

        Args:
            gateway_type: Unique identifier for the gateway (e.g., 'STUB')
            implementation: Class implementing GatewayAdapterPort

        Raises:
            ValueError: If gateway_type is empty or implementation doesn't inherit from GatewayAdapterPort
            RuntimeError: If gateway_type is already registered
        """
        if not gateway_type or not gateway_type.strip():
            raise ValueError("gateway_type cannot be empty")

        if not isinstance(implementation, type) or not issubclass(implementation, GatewayAdapterPort):
            name = getattr(implementation, "__name__", type(implementation).__name__)
            raise ValueError(
                f"Implementation must inherit from GatewayAdapterPort, got {name}"
            )

        key = gateway_type.upper()
        if key in self._adapters:
            raise RuntimeError(f"Gateway type '{key}' is already registered.")

        self._adapters[key] = implementation

    def get(self, gateway_type: str, **options) -> GatewayAdapterPort:
        """
        Create an adapter instance by type.

        Args:
            gateway_type: The gateway type to instantiate (case-insensitive)
            **options: Constructor arguments for the adapter

        Returns:
            A new adapter instance

        Raises:
            ValueError: If gateway_type is not registered
        """
        key = (gateway_type or "").upper()
        if key not in self._adapters:
            available = ', '.join(self.list_available()) if self._adapters else 'none'
            raise ValueError(
                f"Unknown gateway type: '{gateway_type}'. "
                f"Available gateways: {available}"
            )
        return self._adapters[key](**options)

    def list_available(self) -> list[str]:
        return sorted(self._adapters.keys())

    def is_registered(self, gateway_type: str) -> bool:
        return (gateway_type or "").upper() in self._adapters


def build_gateway_adapter(settings, registry: Optional[GatewayRegistry] = None) -> GatewayAdapterPort:
    """
    Construct the configured gateway adapter.

    Args:
        settings: Settings providing PAYMENT_GATEWAY, PAYMENT_GATEWAY_MODE and
            PAYMENT_GATEWAY_TIMEOUT_SECONDS
        registry: Registry to resolve from (default: built-in adapters)

    Raises:
        ValueError: If the configured gateway type is unknown
    """
    registry = registry or GatewayRegistry.build_default()
    return registry.get(
        settings.PAYMENT_GATEWAY,
        mode=settings.PAYMENT_GATEWAY_MODE,
        timeout_seconds=settings.PAYMENT_GATEWAY_TIMEOUT_SECONDS,
    )
