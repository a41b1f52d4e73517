"""Tests for instruction facts and pretty-printers."""

import pytest

from wedlock.extraction.instructions import extract_instruction, extract_instructions
from wedlock.extraction.machine_function import MachineInstr, MIFlag
from wedlock.extraction.printer import CapstonePrinter, get_printer, text_printer


def test_extract_instruction_flags():
    instr = MachineInstr(opcode=77, flags=MIFlag.FRAME_SETUP | (1 << 4))
    assert extract_instruction(instr) == {"opcode": 77, "frame_setup": True, "frame_destroy": False}


def test_extract_instructions_without_printer():
    facts = extract_instructions([MachineInstr(opcode=1, text="NOOP")])
    assert facts.asm == []
    assert facts.instrs == [{"opcode": 1, "frame_setup": False, "frame_destroy": False}]
    assert facts.has_inline_asm is False


def test_extract_instructions_inline_asm():
    facts = extract_instructions([MachineInstr(opcode=1), MachineInstr(opcode=2, is_inline_asm=True)])
    assert facts.has_inline_asm is True


def test_text_printer():
    assert text_printer(MachineInstr(opcode=1, text="RET64")) == "RET64"


def test_capstone_printer_disassembles_encoding():
    printer = CapstonePrinter()
    assert printer(MachineInstr(opcode=1, encoding=b"\xc3")) == "ret"
    assert printer(MachineInstr(opcode=1, encoding=b"\x55")) == "push rbp"


def test_capstone_printer_falls_back_to_text():
    printer = CapstonePrinter()
    assert printer(MachineInstr(opcode=1, text="INLINEASM &nop")) == "INLINEASM &nop"


def test_get_printer():
    assert get_printer("text") is text_printer
    assert isinstance(get_printer("capstone"), CapstonePrinter)
    with pytest.raises(ValueError):
        get_printer("objdump")
