#!/usr/bin/env python3
"""
Shipping Quote Calculator
Turns cart items into a shipping quote: a flat base fee plus a per-item charge,
rounded to whole currency units and sub-units.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Iterable, List, Optional, Union

from prices import Money

from .models import LineItem, Quote

logger = logging.getLogger(__name__)

Amount = Union[int, float, Decimal, Money]

DEFAULT_BASE_FEE = Decimal('10.00')
DEFAULT_PER_ITEM_FEE = Decimal('0.50')


def _to_decimal(value: Amount) -> Decimal:
    """Convert an amount to Decimal, taking floats at their shortest repr (10.555 -> Decimal('10.555'))."""
    if isinstance(value, Money):
        value = value.amount
    if isinstance(value, bool):
        raise ValueError(f"Not a currency amount: {value!r}")
    if isinstance(value, float):
        value = Decimal(repr(value))
    elif isinstance(value, int):
        value = Decimal(value)
    elif not isinstance(value, Decimal):
        raise ValueError(f"Not a currency amount: {value!r}")

    if not value.is_finite():
        raise ValueError(f"Currency amount must be finite, got {value}")
    return value


class QuoteCalculator:
    """
    Computes shipping quotes for carts.

    The fee schedule and currency are fixed at construction.
    """

    def __init__(self, base_fee: Amount = DEFAULT_BASE_FEE,
                 per_item_fee: Amount = DEFAULT_PER_ITEM_FEE,
                 currency_code: str = 'USD',
                 log: Optional[logging.Logger] = None):
        self.base_fee = _to_decimal(base_fee)
        self.per_item_fee = _to_decimal(per_item_fee)
        if self.base_fee < 0 or self.per_item_fee < 0:
            raise ValueError(
                f"Fees must be non-negative (base={self.base_fee}, per item={self.per_item_fee})"
            )
        self.currency_code = currency_code.upper()
        self.currency_symbol = self._get_currency_symbol(self.currency_code)
        self.logger = log or logger

    def _get_currency_symbol(self, currency_code: str) -> str:
        """Get currency symbol from currency code."""
        symbols = {
            'USD': '$',
            'EUR': '€',
            'GBP': '£',
            'JPY': '¥',
            'CAD': 'C$',
            'AUD': 'A$',
            'CHF': 'CHF',
            'SEK': 'kr',
            'NOK': 'kr',
            'DKK': 'kr',
        }
        return symbols.get(currency_code, currency_code)

    def create_quote_from_items(self, items: Iterable[LineItem]) -> Quote:
        """
        Quote the shipping cost for a cart.

        Any item with a quantity below 1 rejects the whole cart and yields a zero
        quote. An empty cart ships for free.
        """
        self.logger.info("[create_quote_from_items] received request")
        try:
            total_items = self._count_items(list(items))
            if total_items is None:
                return Quote.zero()
            return self.create_quote_from_amount(self._total_cost(total_items))
        finally:
            self.logger.info("[create_quote_from_items] completed request")

    def create_quote_from_amount(self, value: Amount) -> Quote:
        """
        Convert a currency amount into a Quote, rounding sub-units half away from zero.

        Negative amounts are clamped to a zero quote. A Money amount must be in
        the calculator's currency.
        """
        if isinstance(value, Money) and value.currency.upper() != self.currency_code:
            raise ValueError(
                f"Cannot quote {value.currency} amount with a {self.currency_code} calculator"
            )
        amount = _to_decimal(value)
        if amount < 0:
            self.logger.warning(f"Negative amount {amount} clamped to zero quote")
            return Quote.zero()

        whole_units = int(amount)
        fraction = amount - whole_units

        rounded_subunits = int((fraction * 100).quantize(Decimal('1'), rounding=ROUND_HALF_UP))
        total_subunits = whole_units * 100 + rounded_subunits

        # divmod carries a rounded-up 100 sub-units into the next unit
        units, subunits = divmod(total_subunits, 100)
        self.logger.debug(f"Amount {amount} -> {units} units, {subunits} subunits")
        return Quote(units=units, subunits=subunits)

    def _count_items(self, items: List[LineItem]) -> Optional[int]:
        """Sum quantities, or None when an item carries a quantity below 1."""
        for item in items:
            if item.quantity < 1:
                self.logger.warning(
                    f"Rejecting cart: item {item.product_id or '<unnamed>'} has quantity {item.quantity}"
                )
                return None
        return sum(item.quantity for item in items)

    def _total_cost(self, total_items: int) -> Decimal:
        if total_items > 0:
            return self.base_fee + self.per_item_fee * total_items
        return Decimal('0')

    def format_quote(self, quote: Quote) -> str:
        """Format a quote with the configured currency symbol."""
        formatted = f"{quote.amount:,.2f}"

        if self.currency_code in ['EUR']:
            return f"{formatted} {self.currency_symbol}"
        else:
            return f"{self.currency_symbol}{formatted}"

    def quote_breakdown(self, items: Iterable[LineItem]) -> Dict[str, Any]:
        """
        Quote a cart and explain how the figure was reached.
        """
        items = list(items)
        quote = self.create_quote_from_items(items)
        rejected = [item for item in items if item.quantity < 1]
        total_items = 0 if rejected else sum(item.quantity for item in items)

        steps = []
        if rejected:
            steps.append(f"Rejected: {len(rejected)} item(s) with quantity below 1")
        elif total_items > 0:
            steps.append(f"Base fee: {self._format_amount(self.base_fee)}")
            steps.append(
                f"+ {total_items} item(s) x {self._format_amount(self.per_item_fee)}: "
                f"{self._format_amount(self.per_item_fee * total_items)}"
            )
        else:
            steps.append("Empty cart: no shipping charge")
        steps.append(f"= Shipping: {self.format_quote(quote)}")

        return {
            'totalItems': total_items,
            'rejected': bool(rejected),
            'baseFee': str(self.base_fee),
            'perItemFee': str(self.per_item_fee),
            'quote': quote.to_dict(self.currency_code),
            'calculationSteps': steps,
        }

    def _format_amount(self, amount: Decimal) -> str:
        return self.format_quote(self.create_quote_from_amount(amount))


_default_calculator = QuoteCalculator()


def create_quote_from_items(items: Iterable[LineItem]) -> Quote:
    """
    Convenience function to quote a cart with the default fee schedule.
    """
    return _default_calculator.create_quote_from_items(items)


def create_quote_from_amount(value: Amount) -> Quote:
    """
    Convenience function to convert an amount into a Quote.
    """
    return _default_calculator.create_quote_from_amount(value)
