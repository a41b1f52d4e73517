"""wedlock summarize — per-function overview of an emitted JSON Lines file."""

from __future__ import annotations

from pathlib import Path

import typer


def summarize_cmd(
    records_path: Path = typer.Argument(..., help="JSON Lines file produced by 'wedlock run'"),
    limit: int = typer.Option(50, "--limit", "-n", help="Maximum rows to display"),
    shrink_wrapped_only: bool = typer.Option(
        False, "--shrink-wrapped", help="Only show functions whose prologue left the entry block"
    ),
) -> None:
    """Summarize prologue/epilogue placement and frame shape per function."""
    from wedlock.analysis.summary import corpus_totals, iter_records, summarize_records
    from wedlock.utils.formatters import print_error, print_table

    if not records_path.is_file():
        print_error(f"Path not found: {records_path}")
        raise typer.Exit(1)

    rows = summarize_records(iter_records(records_path))
    totals = corpus_totals(rows)
    if shrink_wrapped_only:
        rows = [r for r in rows if r["shrink_wrapped"]]

    print_table(rows[:limit], title=f"Functions — {records_path.name}")
    print_table([totals], title="Totals")
