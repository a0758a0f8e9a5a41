"""Fiscal rules commands."""

import json

import click
from pydantic import ValidationError
from rich.console import Console

from primacalc.sdk.prima import (
    DEFAULT_RULES,
    PrimaServiceError,
    get_available_years,
    get_fiscal_rules,
)

from .renderers.result_renderer import render_rules


def rules_to_dict(rules) -> dict:
    """Serialize rules to JSON-safe data (unbounded max_uvt becomes null)."""
    data = rules.model_dump()
    for bracket in data["withholding_table"]:
        if bracket["max_uvt"] == float("inf"):
            bracket["max_uvt"] = None
    return data


@click.group()
def rules():
    """Inspect fiscal year rules (UVT value, limits, withholding table).

    Rules files are YYYY.yaml, searched in the settings 'rules_dir',
    then <config dir>/tax-rules, then the rules bundled with prima-calc.
    """
    pass


@rules.command("show")
@click.argument("year", required=False)
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text",
              help="Output format (default: text)")
def rules_show(year, output_format):
    """Show rules for YEAR (default: built-in 2025 rules).

    Falls back to the nearest earlier year with a rules file.
    """
    if year and (not year.isdigit() or len(year) != 4):
        raise click.BadParameter(f"Invalid year '{year}'. Must be 4 digits.")

    try:
        fiscal_rules = get_fiscal_rules(year) if year else DEFAULT_RULES
    except PrimaServiceError as e:
        raise click.ClickException(str(e))
    except ValidationError as e:
        raise click.ClickException(f"Invalid rules file: {e}")

    if output_format == "json":
        click.echo(json.dumps(rules_to_dict(fiscal_rules), indent=2))
    else:
        render_rules(Console(), fiscal_rules)


@rules.command("list")
def rules_list():
    """List years with a rules file available."""
    years = get_available_years()
    if not years:
        click.echo("No fiscal rules files found.")
        return
    for year in years:
        click.echo(str(year))
