"""Wedlock — prologue/epilogue and control-flow facts for compiled functions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from wedlock.version import __version__

if TYPE_CHECKING:
    from wedlock.config.models import WedlockConfig


@dataclass
class WedlockContext:
    """State shared across CLI commands."""

    config: WedlockConfig | None = None

    def ensure_config(self) -> WedlockConfig:
        if self.config is None:
            from wedlock.config.loader import load_config

            self.config = load_config()
        return self.config


__all__ = ["WedlockContext", "__version__"]
