"""Rich renderers for prima results and fiscal rules.

Transforms SDK models into formatted Rich tables.
"""

from rich.console import Console
from rich.table import Table
from rich import box

from primacalc.sdk.prima import CalculationResult, FiscalYearRules


def render_result(console: Console, result: CalculationResult, rules: FiscalYearRules) -> None:
    """Render a prima calculation as a Rich table.

    Args:
        console: Rich Console instance
        result: SDK output from calculate()
        rules: Fiscal rules the result was computed with
    """
    table = Table(
        title=f"Prima: {result.employee_name} ({result.period_label})",
        box=box.ROUNDED,
    )
    table.add_column("", style="bold", min_width=25)
    table.add_column("Amount", justify="right", min_width=16)

    table.add_row("Base Salary", _fmt(result.base_salary))
    table.add_row("Worked Days", str(result.worked_days))
    table.add_row("", "")

    table.add_row("[bold]BONUS[/bold]", "")
    table.add_row("  Gross Prima", _fmt(result.gross_bonus))
    table.add_row(f"  Exempt Income ({rules.exempt_rate:.0%})", _fmt(result.exempt_income))
    table.add_row("  [dim]Taxable Base[/dim]", f"[dim]{_fmt(result.taxable_base)}[/dim]")
    table.add_row("", "")

    table.add_row(f"Withholding Tax ({rules.year})", _fmt(result.withholding_tax))
    table.add_row("", "")

    table.add_row(
        "[bold green]NET PRIMA[/bold green]",
        f"[bold green]{_fmt(result.net_bonus)}[/bold green]",
    )

    console.print(table)


def render_rules(console: Console, rules: FiscalYearRules) -> None:
    """Render fiscal rules and the withholding table in declared order."""
    summary = Table(show_header=False, box=None, padding=(0, 2))
    summary.add_column("key", style="dim")
    summary.add_column("value")
    summary.add_row("UVT value", _fmt(rules.uvt_value))
    summary.add_row("Exempt rate", f"{rules.exempt_rate:.0%}")
    summary.add_row("Exempt limit", f"{rules.exempt_limit_uvt:g} UVT ({_fmt(rules.exempt_limit)})")
    summary.add_row("Withholding threshold", f"{rules.withholding_threshold_uvt:g} UVT")
    console.print(summary)

    table = Table(title=f"Withholding Table {rules.year} (first match wins)", box=box.ROUNDED)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Over (UVT)", justify="right")
    table.add_column("Up to (UVT)", justify="right")
    table.add_column("Rate", justify="right")
    table.add_column("Fixed (UVT)", justify="right")

    for i, bracket in enumerate(rules.withholding_table, 1):
        upper = "-" if bracket.max_uvt == float("inf") else f"{bracket.max_uvt:g}"
        table.add_row(
            str(i),
            f"{bracket.min_uvt:g}",
            upper,
            f"{bracket.rate:.0%}",
            f"{bracket.fixed_fee_uvt:g}",
        )

    console.print(table)


def _fmt(amount: float | None) -> str:
    """Format currency amount."""
    if amount is None:
        return "-"
    return f"${amount:,.2f}"
