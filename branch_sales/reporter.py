from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal
from typing import Any, Dict, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from branch_sales.domain.models import PRODUCT_NAMES, SalesSummary

_CENTS = Decimal("0.01")


def format_amount(value: float) -> str:
    """
    Format a profit with at most two decimals, dropping trailing zeros.

    Rounding is half-even on the exact binary value, so 2.675 -> "2.67".
    """
    rounded = Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_EVEN)
    if rounded == 0:
        return "0"
    text = f"{rounded:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def summary_to_dict(summary: SalesSummary) -> Dict[str, Any]:
    """JSON-ready view of a summary with profits rounded to cents."""
    lowest = summary.lowest_profit_branch
    return {
        "total_units": dict(zip(PRODUCT_NAMES, summary.total_units)),
        "total_profit": round(summary.total_profit, 2),
        "lowest_profit_branch": {
            "branch_id": lowest.branch_id,
            "profit": round(lowest.profit, 2),
        },
    }


def build_units_table(summary: SalesSummary) -> Table:
    table = Table(title="Total units sold", box=box.ASCII, title_justify="left")
    for name in PRODUCT_NAMES:
        table.add_column(name, justify="right", style="magenta")
    table.add_row(*(f"{units:d}" for units in summary.total_units))
    return table


def render_summary(summary: SalesSummary, console: Optional[Console] = None) -> None:
    """
    Print the units table, the total profit and the lowest-profit branch.
    """
    console = console or Console()

    console.print(build_units_table(summary))
    console.print()
    total = format_amount(summary.total_profit)
    console.print(f"Total daily profits: [bold green]{total}[/bold green]")
    console.print()

    lowest = summary.lowest_profit_branch
    console.print(f"Branch with lowest profit: [cyan]{lowest.branch_id}[/cyan]")
    console.print(
        f"Profit of branch with lowest profit: [yellow]{format_amount(lowest.profit)}[/yellow]"
    )


__all__ = ["format_amount", "summary_to_dict", "build_units_table", "render_summary"]
