"""
Shipping Strategy Registry - dispatch table from ShippingMode to strategy

Built once per engine instance (typically at process start) and only read
afterwards, so lookups need no locking.
"""

from typing import Dict, Optional

from .ports import ShippingFeeStrategyPort, ShippingMode
from .strategies import RushShippingStrategy, StandardShippingStrategy, VolumetricShippingStrategy
from .tiering import FeeSchedule


class ShippingStrategyRegistry:
    """
    Registry of shipping fee strategy instances keyed by ShippingMode.

    Usage:
        registry = ShippingStrategyRegistry.build_default(schedule)
        fee = registry.get(ShippingMode.RUSH).calculate_fee(lines, delivery)
    """

    def __init__(self):
        self._strategies: Dict[ShippingMode, ShippingFeeStrategyPort] = {}

    def register(self, strategy: ShippingFeeStrategyPort) -> None:
        """
        Register a strategy under its own mode.

        Raises:
            ValueError: If strategy doesn't implement ShippingFeeStrategyPort
            RuntimeError: If the mode is already registered
        """
        if not isinstance(strategy, ShippingFeeStrategyPort):
            raise ValueError(
                f"Strategy must implement ShippingFeeStrategyPort, "
                f"got {type(strategy).__name__}"
            )

        if strategy.mode in self._strategies:
            raise RuntimeError(
                f"Shipping mode '{strategy.mode.value}' is already registered."
            )

        self._strategies[strategy.mode] = strategy

    def get(self, mode: ShippingMode) -> ShippingFeeStrategyPort:
        """
        Get the strategy for a shipping mode.

        Raises:
            ValueError: If no strategy is registered for mode
        """
        mode = ShippingMode(mode)
        if mode not in self._strategies:
            available = ', '.join(self.list_available()) or 'none'
            raise ValueError(
                f"Unknown shipping mode: '{mode.value}'. "
                f"Available modes: {available}"
            )
        return self._strategies[mode]

    def list_available(self) -> list[str]:
        return sorted(mode.value for mode in self._strategies)

    def is_registered(self, mode: ShippingMode) -> bool:
        return mode in self._strategies

    @classmethod
    def build_default(cls, schedule: Optional[FeeSchedule] = None) -> "ShippingStrategyRegistry":
        """Standard, volumetric, and rush (wrapping standard) strategies."""
        schedule = schedule or FeeSchedule()
        standard = StandardShippingStrategy(schedule)

        registry = cls()
        registry.register(standard)
        registry.register(VolumetricShippingStrategy(schedule))
        registry.register(RushShippingStrategy(standard, schedule))
        return registry
