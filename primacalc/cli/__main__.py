"""Prima Calc CLI - Command-line interface for prima calculations."""

import json
import logging
import os
import sys
from datetime import date, datetime

import click
import yaml
from pydantic import ValidationError
from rich.console import Console

from primacalc import __version__
from primacalc.sdk import get_setting
from primacalc.sdk.prima import (
    DEFAULT_RULES,
    PrimaServiceError,
    calculate,
    get_fiscal_rules,
)

from .renderers.result_renderer import render_result
from .rules_commands import rules as rules_group
from .settings_commands import settings as settings_group


def _configure_logging(verbose: bool) -> None:
    """Configure logging from LOG_LEVEL, or DEBUG when verbose."""
    level_name = "DEBUG" if verbose else os.environ.get("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


@click.group()
@click.version_option(version=__version__, prog_name="prima-calc")
@click.option("--verbose", "-v", is_flag=True, help="Log pipeline details to stderr.")
def cli(verbose):
    """Prima Calc - Colombian semi-annual service bonus calculator.

    Computes the prima for one employee record, net of withholding
    tax per Art. 383 E.T.

    Settings are loaded from (in order):

    \b
    1. PRIMA_CALC_CONFIG_PATH environment variable
    2. ~/.config/prima-calc/settings.json (XDG default)

    Run 'prima-calc settings show' to see effective settings.
    """
    _configure_logging(verbose)


cli.add_command(rules_group)
cli.add_command(settings_group)


class RecordLoader(yaml.SafeLoader):
    """SafeLoader that keeps timestamps as strings.

    Dates are parsed by validate_record, which reports malformed ones as
    InvalidDataError instead of failing inside the YAML constructor.
    """


RecordLoader.yaml_implicit_resolvers = {
    first_char: [(tag, regexp) for tag, regexp in resolvers if tag != "tag:yaml.org,2002:timestamp"]
    for first_char, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def load_record(source) -> dict:
    """Parse an employee record from a JSON or YAML stream."""
    try:
        data = yaml.load(source.read(), Loader=RecordLoader)
    except (yaml.YAMLError, ValueError) as e:
        raise click.ClickException(f"Could not parse employee record: {e}")

    if not isinstance(data, dict):
        raise click.ClickException("Employee record must be a JSON/YAML object.")
    return data


def resolve_rules(year):
    """Fiscal rules for --year, the fiscal_year setting, or built-in defaults."""
    year = year or get_setting("fiscal_year")
    if not year:
        return DEFAULT_RULES
    return get_fiscal_rules(str(year))


@cli.command("calculate")
@click.argument("record", type=click.File("r"))
@click.option("--year", help="Fiscal rules year (default: settings fiscal_year, else built-in 2025 rules)")
@click.option("--as-of", "as_of", help="Treat this date (YYYY-MM-DD) as today; its year selects the semester")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text",
              help="Output format (default: text)")
@click.option("--labels", type=click.Choice(["en", "es"]), default="en",
              help="JSON key language (default: en)")
def calculate_cmd(record, year, as_of, output_format, labels):
    """Calculate the prima for an employee record.

    RECORD is a JSON or YAML file, or '-' to read from stdin. Keys may be
    English (name, entry_date, monthly_salaries, calculation_period,
    salary_method, unpaid_absences) or their Spanish equivalents.

    \b
    Examples:
      prima-calc calculate employee.json
      prima-calc calculate employee.yaml --as-of 2025-06-30 --format json
      cat employee.json | prima-calc calculate - --labels es
    """
    if year and (not year.isdigit() or len(year) != 4):
        raise click.BadParameter(f"Invalid year '{year}'. Must be 4 digits.", param_hint="--year")

    clock = date.today
    if as_of:
        try:
            today = datetime.strptime(as_of, "%Y-%m-%d").date()
        except ValueError:
            raise click.BadParameter(f"Invalid date '{as_of}'. Use YYYY-MM-DD.", param_hint="--as-of")
        clock = lambda: today

    data = load_record(record)

    try:
        rules = resolve_rules(year)
        result = calculate(data, rules=rules, clock=clock)
    except PrimaServiceError as e:
        raise click.ClickException(str(e))
    except ValidationError as e:
        raise click.ClickException(f"Invalid rules file: {e}")

    if output_format == "json":
        click.echo(json.dumps(result.to_dict(labels=labels), indent=2, ensure_ascii=False))
    else:
        render_result(Console(), result, rules)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
