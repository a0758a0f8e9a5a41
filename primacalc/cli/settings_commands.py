"""Settings CLI commands for Prima Calc.

Manages settings.json - default fiscal year and extra rules directory.
"""

import click
from pathlib import Path

from primacalc.sdk import (
    load_settings,
    get_setting,
    set_setting,
    clear_setting,
    get_settings_path,
    get_rules_dirs,
)


@click.group()
def settings():
    """Manage settings (settings.json).

    Available settings:
    - fiscal_year: default fiscal rules year for 'calculate'
    - rules_dir: extra directory searched for YYYY.yaml rules
    """
    pass


@settings.command("show")
def settings_show():
    """Show current settings and their values."""
    settings_path = get_settings_path()
    current = load_settings()

    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo()

    if not current:
        click.echo("No settings configured (using defaults).")
    else:
        click.echo("Current settings:")
        for key, value in current.items():
            click.echo(f"  {key}: {value}")

    click.echo()
    click.echo("Rules search path:")
    for rules_dir in get_rules_dirs():
        click.echo(f"  {rules_dir}")


@settings.command("fiscal-year")
@click.argument("year", required=False)
@click.option("--clear", is_flag=True, help="Clear fiscal_year, revert to built-in rules")
def settings_fiscal_year(year, clear):
    """Set or clear the default fiscal rules year.

    Examples:
        prima-calc settings fiscal-year 2025
        prima-calc settings fiscal-year --clear
    """
    if clear:
        if clear_setting("fiscal_year"):
            click.echo("Cleared fiscal_year setting.")
        else:
            click.echo("fiscal_year was not set.")
        return

    if not year:
        current_year = get_setting("fiscal_year")
        if current_year:
            click.echo(f"Current fiscal_year: {current_year}")
        else:
            click.echo("No fiscal_year set. Using built-in 2025 rules.")
        return

    if not year.isdigit() or len(year) != 4:
        raise click.BadParameter(f"Invalid year '{year}'. Must be 4 digits.")

    set_setting("fiscal_year", year)
    click.echo(f"Set fiscal_year: {year}")
    click.echo(f"Saved to: {get_settings_path()}")


@settings.command("rules-dir")
@click.argument("path", required=False, type=click.Path())
@click.option("--clear", is_flag=True, help="Clear custom rules_dir")
def settings_rules_dir(path, clear):
    """Set or clear an extra directory of fiscal rules files.

    PATH holds YYYY.yaml files that override the bundled rules.
    """
    if clear:
        if clear_setting("rules_dir"):
            click.echo("Cleared rules_dir setting.")
        else:
            click.echo("rules_dir was not set.")
        return

    if not path:
        current_dir = get_setting("rules_dir")
        if current_dir:
            click.echo(f"Current rules_dir: {current_dir}")
        else:
            click.echo("No custom rules_dir set.")
        return

    rules_path = Path(path).expanduser().resolve()
    if not rules_path.is_dir():
        raise click.ClickException(f"Not a directory: {rules_path}")

    set_setting("rules_dir", str(rules_path))
    click.echo(f"Set rules_dir: {rules_path}")
    click.echo(f"Saved to: {get_settings_path()}")
