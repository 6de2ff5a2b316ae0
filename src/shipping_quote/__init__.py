"""
Shipping Quote Calculator

Computes shipping quotes for carts: a flat base fee plus a per-item charge,
rounded to whole currency units and sub-units.
"""

__version__ = "1.0.0"

from .models import LineItem, Quote
from .calculator import QuoteCalculator, create_quote_from_items, create_quote_from_amount

__all__ = [
    "LineItem",
    "Quote",
    "QuoteCalculator",
    "create_quote_from_items",
    "create_quote_from_amount",
]
