"""Per-instruction fact extraction."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from wedlock.extraction.machine_function import MachineInstr
from wedlock.extraction.printer import InstrPrinter


def extract_instruction(instr: MachineInstr) -> dict[str, Any]:
    # The opcode is target-specific and is not decoded further.
    return {
        "opcode": instr.opcode,
        "frame_setup": instr.is_frame_setup,
        "frame_destroy": instr.is_frame_destroy,
    }


@dataclass
class InstructionFacts:
    instrs: list[dict[str, Any]] = field(default_factory=list)
    asm: list[str] = field(default_factory=list)
    has_inline_asm: bool = False


def extract_instructions(
    instructions: Iterable[MachineInstr], printer: InstrPrinter | None = None
) -> InstructionFacts:
    """Collect facts for a block's instructions.

    ``printer`` is called once per instruction, and only when given.
    """
    facts = InstructionFacts()
    for instr in instructions:
        if printer is not None:
            facts.asm.append(printer(instr))
        facts.instrs.append(extract_instruction(instr))
        if instr.is_inline_asm:
            facts.has_inline_asm = True
    return facts
