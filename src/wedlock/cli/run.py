"""wedlock run — emit one JSON line per machine function in the given dumps."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer


def run_cmd(
    dumps: List[Path] = typer.Argument(..., help="Machine-function dump files (.yaml/.json)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="JSON Lines output path"),
    pretty_print: Optional[bool] = typer.Option(
        None, "--pretty-print/--no-pretty-print", help="Include printed instructions in 'asm'"
    ),
    printer: str = typer.Option("text", "--printer", help="Instruction printer: text|capstone"),
    diagnostics: Optional[Path] = typer.Option(
        None, "--diagnostics", "-d", help="Write diagnostic warnings to this file"
    ),
) -> None:
    """Extract prologue/epilogue and CFG facts from machine-function dumps."""
    from wedlock.cli.app import get_context
    from wedlock.emit.emitter import WedlockEmitter
    from wedlock.errors import DumpLoadError, StreamOpenError
    from wedlock.extraction.mir_loader import load_dump
    from wedlock.extraction.printer import get_printer
    from wedlock.utils.formatters import print_error, print_success, print_warning

    ctx = get_context()
    overrides: dict[str, object] = {"enabled": True}
    if output is not None:
        overrides["output_path"] = output
    if pretty_print is not None:
        overrides["pretty_print"] = pretty_print
    if diagnostics is not None:
        overrides["diagnostic_path"] = diagnostics
    cfg = ctx.ensure_config().model_copy(update=overrides)

    try:
        instr_printer = get_printer(printer)
    except ValueError as exc:
        print_error(str(exc))
        raise typer.Exit(1)

    try:
        with WedlockEmitter(cfg, printer=instr_printer) as emitter:
            for dump in dumps:
                try:
                    functions = load_dump(dump)
                except DumpLoadError as exc:
                    print_warning(str(exc))
                    continue
                emitter.run(functions)
    except StreamOpenError as exc:
        print_error(str(exc))
        raise typer.Exit(1)

    print_success(f"Wrote {emitter.emitted} record(s) to {cfg.output_path}")
    if emitter.skipped:
        print_warning(f"Skipped {emitter.skipped} function(s); see diagnostics")
