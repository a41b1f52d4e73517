"""Walk a machine function's blocks in layout order."""

from __future__ import annotations

from typing import Any

from wedlock.analysis.frame_classifier import (
    is_epilogue_insertion_block,
    is_prologue_insertion_block,
)
from wedlock.extraction.instructions import extract_instructions
from wedlock.extraction.machine_function import (
    MachineBasicBlock,
    MachineFunction,
    Present,
)
from wedlock.extraction.printer import InstrPrinter


def walk_blocks(
    function: MachineFunction,
    diagnostics: Any,
    printer: InstrPrinter | None = None,
) -> list[dict[str, Any]]:
    """Return one record per basic block, in layout order.

    Anomalies (missing IR block, null or dangling edges, extra prologue
    blocks) are written to ``diagnostics`` and never abort the walk.
    """
    frame = function.frame
    records: list[dict[str, Any]] = []
    prologue_blocks = 0

    for block in function.blocks:
        record: dict[str, Any] = {}

        if block.ir_block is not None:
            record["ir"] = {"operand": block.ir_block}
        else:
            diagnostics.warning(
                "No IR BB for this machine BB; emitting partial",
                function=function.name,
                block=block.number,
            )

        facts = extract_instructions(block.instructions, printer)
        is_prologue = is_prologue_insertion_block(frame, function, block)
        if is_prologue:
            prologue_blocks += 1

        record["mi"] = {
            "number": block.number,
            "symbol": block.symbol,
            "can_fallthrough": block.can_fallthrough,
            "ends_in_return": block.is_return_block,
            "is_epilogue_insertion_block": is_epilogue_insertion_block(frame, block),
            "is_prologue_insertion_block": is_prologue,
            "address_taken": block.address_taken,
            "has_inline_asm": facts.has_inline_asm,
            "preds": _predecessors(function, block, diagnostics),
            "succs": _successors(function, block, diagnostics),
            "instrs": facts.instrs,
            "asm": facts.asm,
        }
        records.append(record)

    if prologue_blocks > 1 and not isinstance(frame.save_point, Present):
        diagnostics.warning(
            "Multiple prologue insertion blocks",
            function=function.name,
            count=prologue_blocks,
        )

    return records


def _predecessors(
    function: MachineFunction, block: MachineBasicBlock, diagnostics: Any
) -> list[dict[str, Any]]:
    preds = []
    for number in block.predecessors:
        pred = function.block_by_number(number)
        if pred is None:
            diagnostics.warning(
                "Null predecessor for MBB",
                function=function.name,
                block=block.number,
                reference=number,
            )
            continue
        preds.append({"number": pred.number, "symbol": pred.symbol})
    return preds


def _successors(
    function: MachineFunction, block: MachineBasicBlock, diagnostics: Any
) -> list[dict[str, Any]]:
    succs = []
    for number in block.successors:
        succ = function.block_by_number(number)
        if succ is None:
            diagnostics.warning(
                "Null successor for MBB",
                function=function.name,
                block=block.number,
                reference=number,
            )
            continue
        succs.append(
            {
                "number": succ.number,
                "symbol": succ.symbol,
                "layout_successor": function.is_layout_successor(block, succ),
            }
        )
    return succs
