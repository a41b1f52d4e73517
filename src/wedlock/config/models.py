"""Pydantic configuration models."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from wedlock.config.defaults import DEFAULT_LOG_LEVEL, DEFAULT_OUTPUT_PATH


class LoggingConfig(BaseModel):
    level: str = DEFAULT_LOG_LEVEL
    json_output: bool = False


class WedlockConfig(BaseModel):
    """Options recognized by the emitter.

    ``diagnostic_path`` left unset means diagnostics are discarded.
    """

    enabled: bool = False
    pretty_print: bool = False
    output_path: Path = DEFAULT_OUTPUT_PATH
    diagnostic_path: Path | None = None
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
