"""Offline summaries over emitted JSON Lines records."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Iterator

from wedlock.utils.logging import get_logger

log = get_logger(__name__)


def iter_records(path: Path) -> Iterator[dict[str, Any]]:
    """Yield each record of a JSON Lines file, skipping blank lines."""
    with open(path, encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                yield json.loads(line)
            except json.JSONDecodeError as exc:
                log.warning("bad_record", path=str(path), line=lineno, error=str(exc))


def summarize_record(record: dict[str, Any]) -> dict[str, Any]:
    function = record["function"]
    blocks = [bb["mi"] for bb in function["bbs"]]
    prologues = [mi["number"] for mi in blocks if mi.get("is_prologue_insertion_block")]
    entry = blocks[0]["number"] if blocks else None

    return {
        "function": function["demangled_name"] or function["name"],
        "module": record["module"]["module_stem"],
        "blocks": len(blocks),
        "instrs": sum(len(mi["instrs"]) for mi in blocks),
        "prologue_blocks": len(prologues),
        "epilogue_blocks": sum(1 for mi in blocks if mi.get("is_epilogue_insertion_block")),
        "return_blocks": sum(1 for mi in blocks if mi["ends_in_return"]),
        "stack_size": function["frame_info"]["stack_size"],
        "inline_asm": any(mi["has_inline_asm"] for mi in blocks),
        # Prologue moved out of the entry block by shrink-wrapping.
        "shrink_wrapped": bool(prologues) and prologues != [entry],
    }


def summarize_records(records: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    return [summarize_record(r) for r in records]


def corpus_totals(rows: list[dict[str, Any]]) -> dict[str, int]:
    return {
        "functions": len(rows),
        "blocks": sum(r["blocks"] for r in rows),
        "shrink_wrapped": sum(1 for r in rows if r["shrink_wrapped"]),
        "with_inline_asm": sum(1 for r in rows if r["inline_asm"]),
        "multiple_epilogues": sum(1 for r in rows if r["epilogue_blocks"] > 1),
    }
