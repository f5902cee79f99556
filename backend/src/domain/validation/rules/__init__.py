"""Section validation rules.

Each rule module exposes one function that takes the subject and a
ValidationContext and returns a populated section result. Rules record
issues instead of raising.
"""

from .delivery_rules import validate_delivery_info
from .item_rules import validate_order_items
from .order_rules import validate_order_structure
from .pricing_rules import validate_order_pricing
from .rush_rules import validate_rush_delivery

__all__ = [
    "validate_delivery_info",
    "validate_order_items",
    "validate_order_structure",
    "validate_order_pricing",
    "validate_rush_delivery",
]
