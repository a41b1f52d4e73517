"""Instruction pretty-printers used when pretty-printing is enabled."""

from __future__ import annotations

from typing import Callable

from capstone import CS_ARCH_X86, CS_MODE_64, Cs

from wedlock.extraction.machine_function import MachineInstr

InstrPrinter = Callable[[MachineInstr], str]


def text_printer(instr: MachineInstr) -> str:
    """Return the rendering the host attached to the instruction."""
    return instr.text


class CapstonePrinter:
    """Disassemble an instruction's raw encoding with capstone.

    Instructions without an encoding (pseudo instructions, inline asm
    placeholders) fall back to the host rendering.
    """

    def __init__(self, arch: int = CS_ARCH_X86, mode: int = CS_MODE_64) -> None:
        self._md = Cs(arch, mode)

    def __call__(self, instr: MachineInstr) -> str:
        if not instr.encoding:
            return instr.text
        rendered = [
            f"{insn.mnemonic} {insn.op_str}".strip()
            for insn in self._md.disasm(instr.encoding, 0)
        ]
        return "; ".join(rendered) if rendered else instr.text


PRINTERS: dict[str, Callable[[], InstrPrinter]] = {
    "text": lambda: text_printer,
    "capstone": CapstonePrinter,
}


def get_printer(name: str) -> InstrPrinter:
    try:
        return PRINTERS[name]()
    except KeyError:
        raise ValueError(f"unknown printer {name!r}; choose from {sorted(PRINTERS)}") from None
