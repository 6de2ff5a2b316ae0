"""
Data models for the Shipping Quote Calculator.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Mapping

from prices import Money


def _require_int(name: str, value: Any):
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")


@dataclass(frozen=True)
class LineItem:
    """Represents a single cart item to be shipped."""
    quantity: int
    product_id: str = ""

    def __post_init__(self):
        _require_int("Quantity", self.quantity)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LineItem":
        """Build a line item from a cart entry such as {"productId": "X", "quantity": 2}."""
        if not isinstance(data, Mapping):
            raise ValueError(f"Cart item must be an object, got {type(data).__name__}")

        if 'quantity' not in data:
            raise ValueError(f"Cart item is missing a quantity: {dict(data)}")

        product_id = data.get('productId', data.get('product_id', ''))
        return cls(quantity=data['quantity'], product_id=str(product_id))


@dataclass(frozen=True)
class Quote:
    """A price expressed as whole currency units plus sub-units (dollars and cents)."""
    units: int
    subunits: int

    def __post_init__(self):
        _require_int("Quote units", self.units)
        _require_int("Quote subunits", self.subunits)
        if self.units < 0:
            raise ValueError(f"Quote units must be non-negative, got {self.units}")
        if not 0 <= self.subunits <= 99:
            raise ValueError(f"Quote subunits must be in [0, 99], got {self.subunits}")

    def __str__(self) -> str:
        return f"${self.units}.{self.subunits:02d}"

    @classmethod
    def zero(cls) -> "Quote":
        return cls(units=0, subunits=0)

    @property
    def amount(self) -> Decimal:
        """The quote as a Decimal with two places, e.g. Decimal('11.50')."""
        return Decimal(self.units * 100 + self.subunits).scaleb(-2)

    def to_money(self, currency: str = 'USD') -> Money:
        return Money(self.amount, currency)

    def to_dict(self, currency: str = 'USD') -> Dict[str, Any]:
        """JSON-safe representation of the quote."""
        return {
            'currencyCode': currency,
            'units': self.units,
            'subunits': self.subunits,
            'formatted': str(self),
        }
