"""Shipping fee strategies.

- StandardShippingStrategy: total actual weight, regional tiers
- VolumetricShippingStrategy: per-unit max(actual, dimensional) weight, same tiers
- RushShippingStrategy: wraps a base strategy and adds a flat surcharge per
  rush-eligible order line (Hanoi only)

All three use tiering.tiered_fee() for regional pricing.
"""

import logging
from decimal import Decimal
from typing import Optional

from domain.exceptions import InputValidationError
from domain.orders.models import DeliveryInfo, OrderLine
from observability.metrics import shipping_fee_amount, shipping_fee_calculations_total

from .ports import ShippingFeeStrategyPort, ShippingMode
from .tiering import FeeSchedule, classify_region, is_rush_zone, tiered_fee
from .weight import total_actual_weight, total_chargeable_weight


logger = logging.getLogger(__name__)


def validate_fee_inputs(
    lines: Optional[list[OrderLine]],
    delivery: Optional[DeliveryInfo],
    context: str = "shipping"
) -> None:
    """Common preconditions for every fee calculation.

    Raises:
        InputValidationError: If lines are empty/absent, delivery is absent,
            or the province/city is blank
    """
    if not lines or delivery is None:
        raise InputValidationError(
            f"Order items and delivery information are required for {context} calculation."
        )
    if delivery.province_city is None or not delivery.province_city.strip():
        raise InputValidationError("Delivery province/city is required.")


class BaseShippingStrategy(ShippingFeeStrategyPort):
    """Shared schedule handling and metrics for tiered strategies."""

    def __init__(self, schedule: Optional[FeeSchedule] = None):
        self.schedule = schedule or FeeSchedule()

    def _record(self, fee: Decimal) -> Decimal:
        shipping_fee_calculations_total.labels(strategy=self.mode.value.lower(), status="success").inc()
        shipping_fee_amount.labels(strategy=self.mode.value.lower()).observe(float(fee))
        return fee

    def _reject(self, error: InputValidationError) -> None:
        shipping_fee_calculations_total.labels(strategy=self.mode.value.lower(), status="rejected").inc()
        logger.info(f"{type(self).__name__}: rejected fee calculation: {error}")


class StandardShippingStrategy(BaseShippingStrategy):
    """Weight-tiered, region-aware pricing on total actual weight."""

    @property
    def mode(self) -> ShippingMode:
        return ShippingMode.STANDARD

    def calculate_fee(
        self,
        lines: Optional[list[OrderLine]],
        delivery: Optional[DeliveryInfo]
    ) -> Decimal:
        try:
            validate_fee_inputs(lines, delivery, context="shipping")
            weight_kg = total_actual_weight(lines)
        except InputValidationError as e:
            self._reject(e)
            raise

        region = classify_region(delivery.province_city)
        fee = tiered_fee(weight_kg, region, self.schedule)

        logger.debug(
            f"Standard shipping: weight={weight_kg}kg region={region.value} fee={fee}"
        )
        return self._record(fee)


class VolumetricShippingStrategy(BaseShippingStrategy):
    """Tiered pricing on chargeable weight (max of actual and dimensional).

    Every product must carry valid "LxWxH" dimensions.
    """

    @property
    def mode(self) -> ShippingMode:
        return ShippingMode.VOLUMETRIC

    def calculate_fee(
        self,
        lines: Optional[list[OrderLine]],
        delivery: Optional[DeliveryInfo]
    ) -> Decimal:
        try:
            validate_fee_inputs(lines, delivery, context="volumetric shipping")
            weight_kg = total_chargeable_weight(lines, self.schedule.volumetric_divisor)
        except InputValidationError as e:
            self._reject(e)
            raise

        region = classify_region(delivery.province_city)
        fee = tiered_fee(weight_kg, region, self.schedule)

        logger.debug(
            f"Volumetric shipping: chargeable weight={weight_kg}kg region={region.value} fee={fee}"
        )
        return self._record(fee)


class RushShippingStrategy(BaseShippingStrategy):
    """Base strategy fee plus a flat surcharge per rush-eligible order line.

    The surcharge counts lines flagged eligible_for_rush, not physical units:
    a line with quantity 3 adds one surcharge.
    """

    def __init__(self, base_strategy: ShippingFeeStrategyPort, schedule: Optional[FeeSchedule] = None):
        if base_strategy is None:
            raise ValueError("base_strategy cannot be None for RushShippingStrategy")
        super().__init__(schedule)
        self.base_strategy = base_strategy

    @property
    def mode(self) -> ShippingMode:
        return ShippingMode.RUSH

    def surcharge(self, lines: list[OrderLine]) -> Decimal:
        eligible_lines = sum(1 for line in lines if line is not None and line.eligible_for_rush)
        return eligible_lines * self.schedule.rush_surcharge_per_line

    def calculate_fee(
        self,
        lines: Optional[list[OrderLine]],
        delivery: Optional[DeliveryInfo]
    ) -> Decimal:
        try:
            validate_fee_inputs(lines, delivery, context="rush shipping")
            if not is_rush_zone(delivery.province_city):
                raise InputValidationError(
                    "Rush delivery is currently only available for inner city Hanoi districts."
                )
        except InputValidationError as e:
            self._reject(e)
            raise

        base_fee = self.base_strategy.calculate_fee(lines, delivery)
        surcharge = self.surcharge(lines)
        fee = base_fee + surcharge

        logger.debug(
            f"Rush shipping: base fee={base_fee} surcharge={surcharge} total={fee}"
        )
        return self._record(fee)
