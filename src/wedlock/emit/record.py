"""Assemble and serialize the per-function JSON record."""

from __future__ import annotations

import json
from typing import Any

from wedlock.extraction.machine_function import (
    FrameSummary,
    MachineFunction,
    ModuleInfo,
    to_signed64,
)


def frame_info_record(frame: FrameSummary) -> dict[str, Any]:
    return {
        "has_stack_objects": frame.has_stack_objects,
        "has_variadic_objects": frame.has_var_sized_objects,
        "is_frame_address_taken": frame.frame_address_taken,
        "is_return_address_taken": frame.return_address_taken,
        "num_objects": frame.num_objects,
        "num_fixed_objects": frame.num_fixed_objects,
        "stack_size": to_signed64(frame.stack_size),
        "adjusts_stack": frame.adjusts_stack,
    }


def module_record(module: ModuleInfo) -> dict[str, str]:
    return {
        "module_name": module.name,
        "module_stem": module.stem,
        "source_name": module.source_file_name,
        "source_stem": module.source_stem,
    }


def assemble_record(
    function: MachineFunction,
    module: ModuleInfo,
    bbs: list[dict[str, Any]],
    *,
    is_mangled: bool,
    demangled_name: str,
) -> dict[str, Any]:
    """Build the ``{"function": ..., "module": ...}`` object for one function."""
    return {
        "function": {
            "operand": function.display_operand,
            "name": function.name,
            "number": function.number,
            "is_mangled": is_mangled,
            "demangled_name": demangled_name,
            "frame_info": frame_info_record(function.frame),
            "bbs": bbs,
        },
        "module": module_record(module),
    }


def serialize_record(record: dict[str, Any]) -> str:
    """Compact JSON with sorted keys, so repeated runs are byte-identical."""
    return json.dumps(record, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
