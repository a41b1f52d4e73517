"""Root Typer application with subcommand registration."""

from __future__ import annotations

from typing import Optional

import typer

from wedlock import WedlockContext, __version__

app = typer.Typer(
    name="wedlock",
    help="Wedlock — prologue/epilogue and CFG facts for compiled functions",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Shared state across commands
_ctx = WedlockContext()


def get_context() -> WedlockContext:
    return _ctx


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"wedlock {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    config: Optional[str] = typer.Option(None, "--config", "-C", help="Path to wedlock.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=_version_callback, is_eager=True
    ),
) -> None:
    """Wedlock — prologue/epilogue and CFG facts for compiled functions."""
    from wedlock.config.loader import load_config
    from wedlock.utils.logging import setup_logging

    _ctx.config = load_config(config)
    level = "DEBUG" if verbose else _ctx.config.logging.level
    setup_logging(level=level, json_output=_ctx.config.logging.json_output)


# -- Subcommand registration --
from wedlock.cli.run import run_cmd  # noqa: E402
from wedlock.cli.summarize import summarize_cmd  # noqa: E402

app.command(name="run")(run_cmd)
app.command(name="summarize")(summarize_cmd)
