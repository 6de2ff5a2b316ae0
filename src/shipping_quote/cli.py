#!/usr/bin/env python3
"""
Shipping Quote CLI
Quotes shipping for a JSON cart, or converts a raw amount into a quote.
"""

import json
import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .calculator import QuoteCalculator, DEFAULT_BASE_FEE, DEFAULT_PER_ITEM_FEE
from .models import LineItem

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

console = Console()


def _parse_decimal(ctx, param, value) -> Optional[Decimal]:
    """Click callback turning a string option or argument into a Decimal."""
    if value is None:
        return None
    try:
        parsed = Decimal(str(value).strip().lstrip('$').replace(',', ''))
    except InvalidOperation:
        raise click.BadParameter(f"'{value}' is not a valid amount")
    if not parsed.is_finite():
        raise click.BadParameter(f"'{value}' is not a finite amount")
    return parsed


def load_cart(data: Any) -> List[LineItem]:
    """Read line items from a decoded JSON cart: a list of items or {"items": [...]}."""
    if isinstance(data, dict):
        data = data.get('items')
    if not isinstance(data, list):
        raise ValueError("Cart must be a list of items or an object with an 'items' list")
    return [LineItem.from_dict(entry) for entry in data]


def _emit(result: Dict[str, Any], as_json: bool, output: Optional[str]):
    """Write the result to a file and/or the console."""
    if output:
        with open(output, 'w', encoding='utf-8') as f:
            json.dump(result, f, indent=2, ensure_ascii=False)
        logger.info(f"✅ Results saved to: {output}")

    if as_json:
        click.echo(json.dumps(result, indent=2, ensure_ascii=False))
    elif not output:
        _print_result(result)


def _print_result(result: Dict[str, Any]):
    """Rich rendering of a quote result."""
    quote = result['quote']
    table = Table(title="Shipping Quote", show_header=True)
    table.add_column("Field", style="cyan")
    table.add_column("Value", justify="right")

    if 'totalItems' in result:
        table.add_row("Items", str(result['totalItems']))
        table.add_row("Base fee", result['baseFee'])
        table.add_row("Per-item fee", result['perItemFee'])
    else:
        table.add_row("Amount", result['amount'])
    table.add_row("Units", str(quote['units']))
    table.add_row("Subunits", str(quote['subunits']))
    table.add_row("Quote", f"[bold]{quote['formatted']}[/bold]")
    console.print(table)

    steps = result.get('calculationSteps')
    if steps:
        console.print(Panel("\n".join(steps), title="Calculation", border_style="blue"))


@click.group()
@click.option('--base-fee', callback=_parse_decimal, default=str(DEFAULT_BASE_FEE),
              show_default=True, help='Flat fee charged on every non-empty cart')
@click.option('--per-item-fee', callback=_parse_decimal, default=str(DEFAULT_PER_ITEM_FEE),
              show_default=True, help='Fee charged per item shipped')
@click.option('--currency', default='USD', show_default=True, help='ISO 4217 currency code')
@click.option('--json', 'as_json', is_flag=True, help='Print JSON instead of a table')
@click.option('--output', '-o', type=click.Path(dir_okay=False), help='Output JSON file path')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.pass_context
def cli(ctx, base_fee: Decimal, per_item_fee: Decimal, currency: str,
        as_json: bool, output: Optional[str], verbose: bool):
    """Shipping quote calculator: flat base fee plus a per-item charge."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        calculator = QuoteCalculator(base_fee, per_item_fee, currency_code=currency)
    except ValueError as e:
        raise click.BadParameter(str(e))

    ctx.obj = {'calculator': calculator, 'as_json': as_json, 'output': output}


@cli.command()
@click.argument('cart', type=click.File('r', encoding='utf-8'))
@click.pass_obj
def items(obj: Dict[str, Any], cart):
    """Quote shipping for the JSON cart in CART ('-' reads stdin)."""
    try:
        line_items = load_cart(json.load(cart))
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid cart JSON: {e}")
    except ValueError as e:
        raise click.ClickException(f"Invalid cart: {e}")

    logger.debug(f"Loaded {len(line_items)} line item(s) from {cart.name}")
    result = obj['calculator'].quote_breakdown(line_items)
    _emit(result, obj['as_json'], obj['output'])


@cli.command()
@click.argument('value', callback=_parse_decimal)
@click.pass_obj
def amount(obj: Dict[str, Any], value: Decimal):
    """Convert a currency amount VALUE into a quote (use '--' before negatives)."""
    calculator = obj['calculator']
    quote = calculator.create_quote_from_amount(value)
    result = {
        'amount': str(value),
        'quote': quote.to_dict(calculator.currency_code),
    }
    _emit(result, obj['as_json'], obj['output'])


def main():
    """Main CLI entry point."""
    cli()


if __name__ == '__main__':
    main()
