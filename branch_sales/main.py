from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import typer

from branch_sales.config import get_settings
from branch_sales.errors import SalesAnalysisError
from branch_sales.orchestrator import RunConfig, run_analysis
from branch_sales.reporter import render_summary, summary_to_dict
from branch_sales.utils.logging import configure_logging

app = typer.Typer(help="Branch sales analysis CLI.")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    profits = ", ".join(f"{profit:.2f}" for profit in settings.product_profits)
    typer.echo(
        f"data={settings.data_path} | workers={settings.worker_count} | "
        f"profits=({profits}) | env={settings.app_env} log_level={settings.log_level}"
    )


@app.command()
def run(
    data: Optional[Path] = typer.Option(
        None,
        "--data",
        "-d",
        help="Sales workbook (.xlsx) to analyse (default from settings).",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        min=1,
        help="Override the worker pool size (default from settings).",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the summary as JSON instead of the report.",
    ),
) -> None:
    """
    Load the workbook, compute the three statistics and print them.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    try:
        summary = run_analysis(RunConfig(data_path=data, worker_count=workers))
    except SalesAnalysisError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    if as_json:
        typer.echo(json.dumps(summary_to_dict(summary), indent=2))
    else:
        render_summary(summary)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
