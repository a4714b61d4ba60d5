import json
import logging

import click
from flask.cli import with_appcontext
from werkzeug.datastructures import MultiDict

from app.calculators.formatting import format_output
from app.calculators.registry import CALCULATORS, get_calculator, get_category
from app.utils import schema
from app.utils.logging import log_calculation

logger = logging.getLogger(__name__)

@click.group(name='calculators')
def calculators_cli():
    """Calculator catalog commands."""
    pass

@calculators_cli.command('list')
@click.option('--category', default=None, help='Only list one category (e.g. finance)')
@with_appcontext
def list_command(category):
    """List calculators in the catalog."""
    if category and get_category(category) is None:
        raise click.BadParameter(f"Unknown category: {category}", param_hint='--category')

    count = 0
    for calculator in CALCULATORS.values():
        if category and calculator.category != category:
            continue
        click.echo(f"{calculator.category:<18} {calculator.slug:<32} {calculator.name}")
        count += 1
    click.echo(f"{count} calculators")

def parse_assignments(assignments):
    data = MultiDict()
    for item in assignments:
        if '=' not in item:
            raise click.BadParameter(f"Expected key=value, got {item!r}", param_hint='INPUTS')
        key, value = item.split('=', 1)
        data.add(key.strip(), value.strip())
    return data

def echo_result(calculator, result):
    for output in calculator.outputs:
        value = result.get(output.key)
        if value is None:
            continue
        if output.kind == 'table':
            click.echo(f"{output.label}:")
            headers = [label for _, label, _ in output.columns]
            click.echo("  " + " | ".join(headers))
            for row in value:
                cells = [str(format_output(row.get(key), kind)) for key, _, kind in output.columns]
                click.echo("  " + " | ".join(cells))
        elif output.kind == 'list':
            click.echo(f"{output.label}:")
            for item in value:
                click.echo(f"  - {item}")
        else:
            click.echo(f"{output.label}: {format_output(value, output.kind)}")

@calculators_cli.command('run')
@click.argument('slug')
@click.argument('inputs', nargs=-1)
@with_appcontext
def run_command(slug, inputs):
    """Run a calculator, e.g. run bmi weight=70 height=175"""
    calculator = get_calculator(slug)
    if calculator is None:
        raise click.BadParameter(f"Unknown calculator: {slug}", param_hint='SLUG')

    result, errors = calculator.evaluate(parse_assignments(inputs))
    if errors:
        for field, messages in errors.items():
            for message in messages:
                click.echo(f"{field}: {message}", err=True)
        raise SystemExit(1)

    log_calculation(calculator, 'cli')
    click.echo(calculator.name)
    echo_result(calculator, result)

@calculators_cli.command('schema')
@click.argument('slug')
@with_appcontext
def schema_command(slug):
    """Print the JSON-LD structured data for a calculator."""
    calculator = get_calculator(slug)
    if calculator is None:
        raise click.BadParameter(f"Unknown calculator: {slug}", param_hint='SLUG')
    data = [
        schema.calculator_schema(calculator),
        schema.faq_schema(calculator),
        schema.howto_schema(calculator),
    ]
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))
