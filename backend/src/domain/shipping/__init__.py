"""Shipping fee domain module.

Weight helpers, the shared regional tiering routine, and the standard,
volumetric and rush fee strategies.
"""

from .ports import ShippingFeeStrategyPort, ShippingMode
from .registry import ShippingStrategyRegistry
from .service import DeliveryFeeBreakdown, DeliveryFeeService
from .strategies import RushShippingStrategy, StandardShippingStrategy, VolumetricShippingStrategy
from .tiering import FeeSchedule, Region, classify_region, is_rush_zone, tiered_fee

__all__ = [
    "ShippingFeeStrategyPort",
    "ShippingMode",
    "ShippingStrategyRegistry",
    "DeliveryFeeBreakdown",
    "DeliveryFeeService",
    "StandardShippingStrategy",
    "VolumetricShippingStrategy",
    "RushShippingStrategy",
    "FeeSchedule",
    "Region",
    "classify_region",
    "is_rush_zone",
    "tiered_fee",
]
