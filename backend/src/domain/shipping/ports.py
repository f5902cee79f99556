"""ShippingFeeStrategyPort - contract for delivery fee calculation.

Each strategy turns a list of order lines plus delivery info into a single
non-negative fee. Strategies are stateless: the same inputs always yield the
same fee.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from enum import Enum
from typing import Optional

from domain.orders.models import DeliveryInfo, OrderLine


class ShippingMode(str, Enum):
    """Shipping fee policies selectable by callers"""
    STANDARD = "STANDARD"
    VOLUMETRIC = "VOLUMETRIC"
    RUSH = "RUSH"


class ShippingFeeStrategyPort(ABC):
    """Port interface for shipping fee strategies."""

    @abstractmethod
    def calculate_fee(
        self,
        lines: Optional[list[OrderLine]],
        delivery: Optional[DeliveryInfo]
    ) -> Decimal:
        """Calculate the delivery fee.

        Args:
            lines: Order lines to ship (must not be empty)
            delivery: Delivery info with a non-blank province/city

        Returns:
            Non-negative fee

        Raises:
            InputValidationError: If lines are empty, delivery is missing,
                province/city is blank, or a strategy-specific requirement
                (dimensions, rush zone) is not met
        """
        pass

    @property
    @abstractmethod
    def mode(self) -> ShippingMode:
        """Shipping mode this strategy implements."""
        pass
