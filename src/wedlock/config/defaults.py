"""Default configuration values and paths."""

from __future__ import annotations

from pathlib import Path

CONFIG_FILE_NAMES = [
    "wedlock.yaml",
    "wedlock.yml",
    ".wedlock.yaml",
    ".wedlock.yml",
]

CONFIG_SEARCH_PATHS = [
    Path.cwd(),
    Path.home() / ".config" / "wedlock",
    Path.home(),
]

DEFAULT_OUTPUT_PATH = Path("wedlock.jsonl")
DEFAULT_LOG_LEVEL = "INFO"
