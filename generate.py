#!/usr/bin/env python3
"""
Exam Score Report Generator

Reads a spreadsheet of exam scores, checks every row, and prints the top
students per component plus overall and branch-wise averages.

Usage:
    python generate.py scores.xlsx
    python generate.py scores.xlsx --config config.json --excel report.xlsx

The report is printed to stdout. Skipped and flagged rows are logged to
stderr.
"""

import logging
from pathlib import Path
from typing import Optional

import typer

from examscores import (
    build_report,
    format_report,
    generate_workbook,
    load_config,
    process_rows,
    read_rows,
    validate_config,
    SpreadsheetError,
)
from examscores.logging_utils import configure_logging

logger = logging.getLogger("generate")

app = typer.Typer(
    name="exam-report",
    help="Rank exam scores and report branch-wise averages.",
    add_completion=False,
)


def _load_config_or_exit(config_path: Optional[Path]) -> dict:
    try:
        config = load_config(config_path)
    except (OSError, ValueError, TypeError) as exc:
        typer.echo(f"[ERROR] Could not load config: {exc}", err=True)
        raise typer.Exit(code=1)

    issues = validate_config(config)
    errors = [i for i in issues if i["type"] == "error"]
    for issue in issues:
        typer.echo(f"[{issue['type'].upper()}] {issue['message']}", err=True)
    if errors:
        raise typer.Exit(code=1)
    return config


@app.command()
def main(
    path: Path = typer.Argument(..., help="Path to the scores spreadsheet (.xlsx or .csv)."),
    config_path: Optional[Path] = typer.Option(
        None, "--config", help="JSON config overriding the defaults."
    ),
    excel: Optional[Path] = typer.Option(
        None, "--excel", help="Also write the report to this .xlsx file."
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Override the configured log level."
    ),
) -> None:
    """Print the ranked report for PATH."""
    config = _load_config_or_exit(config_path)

    try:
        configure_logging(log_level or config["logging"]["level"])
    except ValueError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)

    try:
        rows = read_rows(path)
    except SpreadsheetError as exc:
        logger.error("%s", exc)
        raise typer.Exit(code=1)

    batch = process_rows(rows, config)
    data = build_report(batch, top_n=config["top_n"])
    typer.echo(format_report(data))

    if excel is not None:
        wb = generate_workbook(data)
        wb.save(excel)
        logger.info("Saved report workbook to %s", excel)


if __name__ == "__main__":
    app()
