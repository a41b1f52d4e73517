"""Decide where prologue and epilogue code lands in a machine function.

This mirrors the prologue/epilogue inserter: a shrink-wrapping pass may pick a
single save point and restore point; without them the classical locations
apply (the entry block, and every return block).
"""

from __future__ import annotations

from wedlock.extraction.machine_function import (
    FrameSummary,
    MachineBasicBlock,
    MachineFunction,
    Present,
)


def is_epilogue_insertion_block(frame: FrameSummary, block: MachineBasicBlock) -> bool:
    restore = frame.restore_point
    if isinstance(restore, Present):
        return block.number == restore.number
    return block.is_return_block


def is_prologue_insertion_block(
    frame: FrameSummary, function: MachineFunction, block: MachineBasicBlock
) -> bool:
    # Only one prologue per function is expected; funclet-based targets break
    # that assumption and are not supported.
    save = frame.save_point
    if isinstance(save, Present):
        return block.number == save.number
    entry = function.entry_block
    return entry is not None and block.number == entry.number
