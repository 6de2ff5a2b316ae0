#!/usr/bin/env python3
"""
Tests for the quote data models.
"""

import unittest
from decimal import Decimal

from prices import Money

from shipping_quote.models import LineItem, Quote


class TestQuote(unittest.TestCase):
    """Test cases for the Quote value type."""

    def test_string_rendering_pads_subunits(self):
        test_cases = [
            (Quote(11, 50), "$11.50"),
            (Quote(0, 0), "$0.00"),
            (Quote(10, 5), "$10.05"),
            (Quote(1234, 99), "$1234.99"),
        ]

        for quote, expected in test_cases:
            with self.subTest(quote=quote):
                self.assertEqual(str(quote), expected)

    def test_invariant_is_enforced(self):
        bad_parts = [(1, 100), (1, -1), (-1, 0), (1.5, 2), (1, 2.0), (True, 0), ('1', 0)]

        for units, subunits in bad_parts:
            with self.subTest(units=units, subunits=subunits):
                with self.assertRaises(ValueError):
                    Quote(units, subunits)

    def test_quote_is_immutable(self):
        quote = Quote(3, 20)
        with self.assertRaises(AttributeError):
            quote.units = 4

    def test_zero(self):
        self.assertEqual(Quote.zero(), Quote(0, 0))

    def test_amount_and_money(self):
        quote = Quote(11, 50)
        self.assertEqual(quote.amount, Decimal('11.50'))
        self.assertEqual(quote.to_money(), Money(Decimal('11.50'), 'USD'))
        self.assertEqual(quote.to_money('EUR').currency, 'EUR')

    def test_to_dict(self):
        self.assertEqual(Quote(10, 56).to_dict(), {
            'currencyCode': 'USD',
            'units': 10,
            'subunits': 56,
            'formatted': '$10.56',
        })


class TestLineItem(unittest.TestCase):
    """Test cases for LineItem parsing."""

    def test_from_dict_accepts_both_key_styles(self):
        self.assertEqual(
            LineItem.from_dict({'productId': 'OLJCESPC7Z', 'quantity': 2}),
            LineItem(quantity=2, product_id='OLJCESPC7Z'),
        )
        self.assertEqual(
            LineItem.from_dict({'product_id': 'L9ECAV7KIM', 'quantity': 1}),
            LineItem(quantity=1, product_id='L9ECAV7KIM'),
        )
        self.assertEqual(LineItem.from_dict({'quantity': 0}), LineItem(0))

    def test_from_dict_rejects_bad_entries(self):
        bad_entries = [
            {'productId': 'X'},
            {'quantity': '3'},
            {'quantity': 1.5},
            {'quantity': True},
            ['quantity', 3],
        ]

        for entry in bad_entries:
            with self.subTest(entry=entry):
                with self.assertRaises(ValueError):
                    LineItem.from_dict(entry)

    def test_constructor_requires_integer_quantity(self):
        for quantity in [1.5, '2', None, False]:
            with self.subTest(quantity=quantity):
                with self.assertRaises(ValueError):
                    LineItem(quantity)
        self.assertEqual(LineItem(-1).quantity, -1)


if __name__ == '__main__':
    unittest.main()
