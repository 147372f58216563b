"""The Smoothie Machine: smoothie order pricing and description."""

from .enums import NO_SWEETENER, Size
from .graph import OrderHandler, reset_order, submit_order
from .models import FillDirective, OrderResult, OrderSelection, PricedOrder
from .pricing import (
    IncompleteOrderError,
    compute_price,
    describe,
    price_order,
    validate,
)

__all__ = [
    "NO_SWEETENER",
    "FillDirective",
    "IncompleteOrderError",
    "OrderHandler",
    "OrderResult",
    "OrderSelection",
    "PricedOrder",
    "Size",
    "compute_price",
    "describe",
    "price_order",
    "reset_order",
    "submit_order",
    "validate",
]
