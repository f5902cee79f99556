"""Actual, volumetric and chargeable weight helpers.

Dimensions are "LxWxH" strings in centimeters (e.g. "30x20x10"). Volumetric
weight is L*W*H / divisor, and the chargeable weight of a unit is the larger
of its actual and volumetric weight.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Optional

from domain.exceptions import InputValidationError
from domain.orders.models import OrderLine, Product


_DIMENSION_SEPARATOR = re.compile(r"[xX]")


def parse_dimensions(dimensions_cm: Optional[str]) -> tuple[Decimal, Decimal, Decimal]:
    """Parse an "LxWxH" string into three positive numbers.

    Args:
        dimensions_cm: Dimension string in centimeters

    Returns:
        (length, width, height) as Decimals

    Raises:
        InputValidationError: If the string is blank, does not have exactly
            three parts, or any part is non-numeric or not positive
    """
    if dimensions_cm is None or not dimensions_cm.strip():
        raise InputValidationError("Product dimensions are required (expected LxWxH in cm)")

    parts = _DIMENSION_SEPARATOR.split(dimensions_cm)
    if len(parts) != 3:
        raise InputValidationError(
            f"Invalid product dimensions format: '{dimensions_cm}'. Expected LxWxH."
        )

    try:
        length, width, height = (Decimal(part.strip()) for part in parts)
    except InvalidOperation as e:
        raise InputValidationError(
            f"Invalid number in product dimensions: '{dimensions_cm}'"
        ) from e

    if not all(value.is_finite() and value > 0 for value in (length, width, height)):
        raise InputValidationError(
            f"Product dimensions must be positive values: '{dimensions_cm}'"
        )

    return length, width, height


def volumetric_weight(dimensions_cm: Optional[str], divisor: Decimal) -> Decimal:
    """Dimensional weight in kg for one unit."""
    length, width, height = parse_dimensions(dimensions_cm)
    return (length * width * height) / Decimal(divisor)


def unit_weight(product: Product) -> Decimal:
    """Actual weight in kg of one unit.

    Raises:
        InputValidationError: If the weight is missing or non-numeric
    """
    try:
        weight_kg = Decimal(str(product.weight_kg)) if product.weight_kg is not None else None
    except InvalidOperation:
        weight_kg = None
    if weight_kg is None or not weight_kg.is_finite():
        raise InputValidationError(
            f"Product '{product.title}' has no valid weight: {product.weight_kg!r}"
        )
    return weight_kg


def chargeable_weight(product: Product, divisor: Decimal) -> Decimal:
    """max(actual, volumetric) weight in kg for one unit of a product."""
    try:
        volumetric = volumetric_weight(product.dimensions_cm, divisor)
    except InputValidationError as e:
        raise InputValidationError(
            f"Product '{product.title}' cannot be priced by volume: {e}"
        ) from e
    return max(unit_weight(product), volumetric)


def require_product(line: OrderLine) -> Product:
    if line is None or line.product is None:
        raise InputValidationError("Product details missing for an order item.")
    return line.product


def actual_weight(line: OrderLine) -> Decimal:
    """Actual weight in kg of a whole line (unit weight x quantity)."""
    product = require_product(line)
    return unit_weight(product) * line.quantity


def total_actual_weight(lines: list[OrderLine]) -> Decimal:
    return sum((actual_weight(line) for line in lines), Decimal("0"))


def total_chargeable_weight(lines: list[OrderLine], divisor: Decimal) -> Decimal:
    return sum(
        (chargeable_weight(require_product(line), divisor) * line.quantity for line in lines),
        Decimal("0")
    )
