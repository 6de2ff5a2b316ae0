#!/usr/bin/env python3
"""
Example usage of the Shipping Quote Calculator
Demonstrates quoting carts and converting amounts with sample data.
"""

import json
from decimal import Decimal

from shipping_quote import LineItem, QuoteCalculator, create_quote_from_amount, create_quote_from_items


def create_sample_cart():
    """Create a sample cart for demonstration."""
    return [
        LineItem(quantity=2, product_id="OLJCESPC7Z"),
        LineItem(quantity=1, product_id="66VCHSJNUP"),
        LineItem(quantity=4, product_id="1YMWWN1N4O"),
    ]


def demonstrate_default_rates():
    """Demonstrate quoting with the default fee schedule."""
    print("=" * 60)
    print("DEMONSTRATION: Default Fee Schedule")
    print("=" * 60)

    cart = create_sample_cart()
    print(f"Cart: {sum(item.quantity for item in cart)} item(s) across {len(cart)} line(s)")
    print(f"Quote: {create_quote_from_items(cart)}")
    print(f"Empty cart: {create_quote_from_items([])}")
    print(f"Cart with a zero quantity: {create_quote_from_items(cart + [LineItem(0)])}")


def demonstrate_amounts():
    """Demonstrate cent rounding of raw amounts."""
    print("\n" + "=" * 60)
    print("DEMONSTRATION: Amount Rounding")
    print("=" * 60)

    for value in [10.555, 0.125, 9.995, -5.0]:
        print(f"{value!r:>8} -> {create_quote_from_amount(value)}")


def demonstrate_custom_calculator():
    """Demonstrate a calculator with its own rates and currency."""
    print("\n" + "=" * 60)
    print("DEMONSTRATION: Custom Calculator")
    print("=" * 60)

    calculator = QuoteCalculator(base_fee=Decimal('7.50'), per_item_fee=Decimal('1.25'), currency_code='EUR')
    print(json.dumps(calculator.quote_breakdown(create_sample_cart()), indent=2, ensure_ascii=False))


def main():
    """Run all demonstrations."""
    demonstrate_default_rates()
    demonstrate_amounts()
    demonstrate_custom_calculator()


if __name__ == "__main__":
    main()
