"""Flask CLI commands for running the calculators from a shell."""
import click
from flask import current_app
from flask.cli import with_appcontext

from halal_finance.services.config import get_zakat_config
from halal_finance.services.inheritance import compute_inheritance
from halal_finance.services.pricing import get_gold_price
from halal_finance.services.sanitize import (
    parse_amount,
    zakat_input_from_mapping,
    inheritance_input_from_mapping,
)
from halal_finance.services.zakat import compute_zakat


def _money(value: float) -> str:
    return f'{value:,.2f}'


@click.command('zakat')
@click.option('--gold-grams', default='0', help='Gold held, in grams')
@click.option('--silver-grams', default='0', help='Silver held, in grams')
@click.option('--cash', default='0', help='Cash and savings')
@click.option('--investments', default='0', help='Investments and stocks')
@click.option('--debts', default='0', help='Outstanding debts')
@click.option('--gold-price', default=None, help='Gold price per 10g (default: live price)')
@with_appcontext
def zakat_command(gold_grams, silver_grams, cash, investments, debts, gold_price):
    """Calculate zakat due on the given holdings."""
    if parse_amount(gold_price) > 0:
        price = parse_amount(gold_price)
        source = 'option'
    else:
        quote = get_gold_price()
        price = quote.price_per_ten_grams
        source = quote.source

    zakat_input = zakat_input_from_mapping({
        'gold_grams': gold_grams,
        'silver_grams': silver_grams,
        'cash': cash,
        'investments': investments,
        'debts': debts,
    }, price)
    result = compute_zakat(zakat_input, get_zakat_config(current_app.config.get('SILVER_PRICE_PER_GRAM')))

    click.echo(f'Gold price (per 10g): {_money(zakat_input.gold_price_per_ten_grams)} [{source}]')
    click.echo(f'Gold value:           {_money(result.gold_value)}')
    click.echo(f'Silver value:         {_money(result.silver_value)}')
    click.echo(f'Total wealth:         {_money(result.total_wealth)}')
    click.echo(f'Nisab threshold:      {_money(result.nisab_threshold)}')
    click.echo(f'Zakat due:            {_money(result.zakat_due)}')
    if result.zakat_due > 0:
        click.echo('Wealth is above nisab: zakat is due this year.')
    else:
        click.echo('Wealth is below nisab: no zakat is due this year.')


@click.command('inheritance')
@click.option('--total-wealth', default='0', help='Total estate value')
@click.option('--debts', default='0', help='Outstanding debts of the deceased')
@click.option('--spouse', default='0', help='1 if a spouse survives')
@click.option('--sons', default='0', help='Number of sons')
@click.option('--daughters', default='0', help='Number of daughters')
@click.option('--father', default='0', help='1 if the father survives')
@click.option('--mother', default='0', help='1 if the mother survives')
def inheritance_command(total_wealth, debts, spouse, sons, daughters, father, mother):
    """Distribute an estate using the simplified fixed-fraction model."""
    inheritance_input = inheritance_input_from_mapping({
        'total_wealth': total_wealth,
        'debts': debts,
        'heirs': {
            'spouse': spouse,
            'sons': sons,
            'daughters': daughters,
            'father': father,
            'mother': mother,
        },
    })
    outcome = compute_inheritance(inheritance_input)
    if not outcome.ok:
        click.echo(f'Error: {outcome.error}', err=True)
        raise SystemExit(1)

    result = outcome.result
    click.echo(f'Net wealth: {_money(result.net_wealth)}')
    for heir, amount in result.shares.items():
        click.echo(f'  {heir}: {_money(amount)}')
    if result.unallocated > 0.005:
        click.echo(f'Unallocated: {_money(result.unallocated)}')


@click.command('gold-price')
@with_appcontext
def gold_price_command():
    """Show the gold price the zakat calculator would use."""
    quote = get_gold_price()
    click.echo(f'{_money(quote.price_per_ten_grams)} {quote.currency} per 10g [{quote.source}]')


def register_cli(app):
    """Register CLI commands with the Flask app."""
    app.cli.add_command(zakat_command)
    app.cli.add_command(inheritance_command)
    app.cli.add_command(gold_price_command)
