"""Order entities read by the fee, payment and validation engine."""

from .models import DeliveryInfo, Order, OrderLine, Product

__all__ = [
    "DeliveryInfo",
    "Order",
    "OrderLine",
    "Product",
]
