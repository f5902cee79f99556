"""Order entities consumed read-only by the engine.

These are the upstream collaborators' shapes (order, line, product, delivery
info). The engine never mutates them; persistence lives elsewhere.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass
class Product:
    """Catalog product as seen by the engine.

    Attributes:
        product_id: Catalog identifier
        title: Display title
        weight_kg: Actual weight of one unit in kilograms
        dimensions_cm: Optional "LxWxH" string in centimeters
        price: Current catalog price (excl. VAT)
        stock: Units in stock
    """
    product_id: str
    title: str
    weight_kg: Decimal
    dimensions_cm: Optional[str] = None
    price: Decimal = Decimal("0")
    stock: int = 0


@dataclass
class OrderLine:
    """One line of an order.

    The rush flag marks the line as qualifying for expedited delivery.
    """
    product: Optional[Product]
    quantity: int
    price_at_order_time: Decimal
    eligible_for_rush: bool = False

    @property
    def line_total(self) -> Decimal:
        return Decimal(str(self.price_at_order_time)) * self.quantity


@dataclass
class DeliveryInfo:
    recipient_name: Optional[str]
    phone_number: Optional[str]
    province_city: Optional[str]
    address: Optional[str]
    email: Optional[str] = None
    instructions: Optional[str] = None
    rush_requested: bool = False
    delivery_method: str = "STANDARD"


@dataclass
class Order:
    """Customer order with its cumulative totals.

    Totals are whatever the upstream workflow stored; the pricing validator
    checks them against the line items.
    """
    order_id: Optional[str]
    lines: list[OrderLine] = field(default_factory=list)
    delivery_info: Optional[DeliveryInfo] = None
    order_date: Optional[datetime] = None
    total_price_excl_vat: Decimal = Decimal("0")
    total_price_incl_vat: Decimal = Decimal("0")
    delivery_fee: Decimal = Decimal("0")
    total_amount: Decimal = Decimal("0")

    @property
    def vat_amount(self) -> Decimal:
        return self.total_price_incl_vat - self.total_price_excl_vat

    def subtotal(self) -> Decimal:
        """Sum of line totals, skipping lines without a price or quantity."""
        return sum(
            (
                line.line_total
                for line in self.lines
                if line is not None and line.price_at_order_time is not None and line.quantity is not None
            ),
            Decimal("0")
        )
