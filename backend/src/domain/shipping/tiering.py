"""Regional weight-tier pricing shared by every shipping strategy.

This is the single place where regional pricing is computed. Standard and
volumetric strategies differ only in how they weigh an order; both hand the
resulting weight to tiered_fee().

Tiers:
- INNER_CITY (province contains "hanoi" or "ho chi minh"): base fee covers
  the first 3 kg
- OTHER: base fee covers the first 0.5 kg
- Beyond the covered weight: one increment fee per started 0.5 kg
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_CEILING
from enum import Enum
from typing import Optional


INNER_CITY_MARKERS = ("hanoi", "ho chi minh")
RUSH_ZONE_MARKERS = ("hanoi",)


class Region(str, Enum):
    """Pricing region of a delivery address"""
    INNER_CITY = "INNER_CITY"
    OTHER = "OTHER"


@dataclass(frozen=True)
class FeeSchedule:
    """Immutable pricing constants handed to strategies at construction."""
    inner_city_base_fee: Decimal = Decimal("22000")
    inner_city_base_weight_kg: Decimal = Decimal("3.0")
    other_region_base_fee: Decimal = Decimal("30000")
    other_region_base_weight_kg: Decimal = Decimal("0.5")
    additional_fee_per_increment: Decimal = Decimal("2500")
    weight_increment_kg: Decimal = Decimal("0.5")
    rush_surcharge_per_line: Decimal = Decimal("10000")
    volumetric_divisor: Decimal = Decimal("6000")
    free_shipping_threshold: Decimal = Decimal("100000")
    max_free_shipping_discount: Decimal = Decimal("25000")

    @classmethod
    def from_settings(cls, settings) -> "FeeSchedule":
        return cls(
            inner_city_base_fee=settings.INNER_CITY_BASE_FEE,
            inner_city_base_weight_kg=settings.INNER_CITY_BASE_WEIGHT_KG,
            other_region_base_fee=settings.OTHER_REGION_BASE_FEE,
            other_region_base_weight_kg=settings.OTHER_REGION_BASE_WEIGHT_KG,
            additional_fee_per_increment=settings.ADDITIONAL_FEE_PER_INCREMENT,
            weight_increment_kg=settings.WEIGHT_INCREMENT_KG,
            rush_surcharge_per_line=settings.RUSH_SURCHARGE_PER_LINE,
            volumetric_divisor=settings.VOLUMETRIC_DIVISOR,
            free_shipping_threshold=settings.FREE_SHIPPING_THRESHOLD,
            max_free_shipping_discount=settings.MAX_FREE_SHIPPING_DISCOUNT,
        )


def _normalize(province_city: Optional[str]) -> str:
    return (province_city or "").strip().lower()


def classify_region(province_city: Optional[str]) -> Region:
    """Classify a province/city string into a pricing region.

    Substring match, case-insensitive. Not a canonical district list.
    """
    province = _normalize(province_city)
    if any(marker in province for marker in INNER_CITY_MARKERS):
        return Region.INNER_CITY
    return Region.OTHER


def is_rush_zone(province_city: Optional[str]) -> bool:
    """True when rush delivery serves this province (currently Hanoi only)."""
    province = _normalize(province_city)
    return any(marker in province for marker in RUSH_ZONE_MARKERS)


def increments_over(excess_kg: Decimal, increment_kg: Decimal) -> int:
    """Number of started increments in excess_kg (0.1 kg over counts as one)."""
    if excess_kg <= 0:
        return 0
    return int((excess_kg / increment_kg).to_integral_value(rounding=ROUND_CEILING))


def tiered_fee(weight_kg: Decimal, region: Region, schedule: FeeSchedule) -> Decimal:
    """Compute the shipping fee for a total billable weight.

    Args:
        weight_kg: Total billable (actual or chargeable) weight in kg
        region: Pricing region of the delivery address
        schedule: Fee constants

    Returns:
        Fee as Decimal; 0 when weight_kg <= 0
    """
    weight_kg = Decimal(str(weight_kg))
    if weight_kg <= 0:
        return Decimal("0")

    if region == Region.INNER_CITY:
        base_fee = schedule.inner_city_base_fee
        covered_kg = schedule.inner_city_base_weight_kg
    else:
        base_fee = schedule.other_region_base_fee
        covered_kg = schedule.other_region_base_weight_kg

    increments = increments_over(weight_kg - covered_kg, schedule.weight_increment_kg)
    return base_fee + increments * schedule.additional_fee_per_increment
