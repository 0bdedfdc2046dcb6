"""
Synthetic sales workbook generator for the branch sales analysis.

Implements deterministic pseudo-random branch-day rows and writes them in the
workbook layout the loader expects (header row, branch label, products A-F).
"""

from __future__ import annotations

import random
import sys
import time
from pathlib import Path
from typing import List

import typer

from branch_sales.domain.models import PRODUCT_COUNT, Record
from branch_sales.infrastructure.loader import write_sales_workbook

app = typer.Typer(help="Generate a synthetic daily branch sales workbook (.xlsx).")


def _generate_records(rows: int, seed: int, max_units: int = 500) -> List[Record]:
    rng = random.Random(seed)
    return [
        tuple(rng.randint(0, max_units) for _ in range(PRODUCT_COUNT)) for _ in range(rows)
    ]


def _generate_workbook(path: Path, rows: int, seed: int, max_units: int = 500) -> Path:
    return write_sales_workbook(path, _generate_records(rows, seed=seed, max_units=max_units))


@app.command()
def main(
    rows: int = typer.Option(
        10_000,
        "--rows",
        "-r",
        min=0,
        help="Number of branch-day rows to generate.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    max_units: int = typer.Option(
        500,
        "--max-units",
        min=0,
        help="Upper bound (inclusive) of units sold per product per row.",
    ),
    output: Path = typer.Option(
        Path("sales_records.xlsx"),
        "--output",
        "-o",
        help="Workbook output path.",
    ),
) -> None:
    """
    Generate a sales workbook that `branch-sales run --data` can analyse.
    """
    start = time.perf_counter()
    typer.echo(f"Generating {rows:,} rows -> {output} (seed={seed}, max_units={max_units})")
    _generate_workbook(output, rows=rows, seed=seed, max_units=max_units)
    duration = time.perf_counter() - start
    rate = rows / duration if duration > 0 else 0.0
    typer.echo(f"Workbook written in {duration:.2f}s ({rate:,.0f} rows/s)")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
