from __future__ import annotations

import io

import pytest
from rich.console import Console

from branch_sales.domain.models import BranchProfit, SalesSummary
from branch_sales.reporter import format_amount, render_summary, summary_to_dict


@pytest.fixture
def summary() -> SalesSummary:
    return SalesSummary(
        total_units=(12, 24, 36, 48, 60, 72),
        total_profit=590.4000000000001,
        lowest_profit_branch=BranchProfit(branch_id="000002", profit=147.6),
    )


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (590.4000000000001, "590.4"),
        (492.0, "492"),
        (0.0, "0"),
        (12.346, "12.35"),
        (1.005, "1"),
        (2.675, "2.67"),
        (0.125, "0.12"),
        (1234567.891, "1234567.89"),
    ],
)
def test_format_amount_rounds_to_two_decimals(value: float, expected: str):
    assert format_amount(value) == expected


def test_summary_to_dict_rounds_profits(summary: SalesSummary):
    payload = summary_to_dict(summary)
    assert payload["total_units"]["Product A"] == 12
    assert payload["total_units"]["Product F"] == 72
    assert payload["total_profit"] == 590.4
    assert payload["lowest_profit_branch"] == {"branch_id": "000002", "profit": 147.6}


def test_render_summary_prints_all_statistics(summary: SalesSummary):
    buffer = io.StringIO()
    console = Console(file=buffer, width=120, color_system=None)

    render_summary(summary, console=console)

    output = buffer.getvalue()
    for letter in "ABCDEF":
        assert f"Product {letter}" in output
    assert "72" in output
    assert "Total daily profits: 590.4" in output
    assert "Branch with lowest profit: 000002" in output
    assert "Profit of branch with lowest profit: 147.6" in output
