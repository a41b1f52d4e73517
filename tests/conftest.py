"""Shared test fixtures."""

from __future__ import annotations

import io

import pytest

from wedlock.config.models import WedlockConfig
from wedlock.extraction.machine_function import (
    FrameSummary,
    MachineBasicBlock,
    MachineFunction,
    MachineInstr,
    MIFlag,
    ModuleInfo,
    Present,
)
from wedlock.utils.logging import diagnostic_logger

RET = MachineInstr(opcode=1360, is_return=True, text="RET64", encoding=b"\xc3")


@pytest.fixture
def module_info() -> ModuleInfo:
    return ModuleInfo(name="build/test.ll", source_file_name="src/test.cpp")


@pytest.fixture
def diamond_function(module_info) -> MachineFunction:
    """0 -> {1, 2} -> 3, laid out as [0, 1, 2, 3]; 3 returns."""
    bb0 = MachineBasicBlock(
        number=0,
        symbol=".LBB0_0",
        ir_block="%entry",
        successors=(1, 2),
        can_fallthrough=True,
        instructions=(
            MachineInstr(opcode=1190, flags=MIFlag.FRAME_SETUP, text="PUSH64r $rbp", encoding=b"\x55"),
            MachineInstr(opcode=212, text="CMP32ri8 $edi, 1"),
        ),
    )
    bb1 = MachineBasicBlock(
        number=1,
        symbol=".LBB0_1",
        ir_block="%then",
        predecessors=(0,),
        successors=(3,),
        instructions=(MachineInstr(opcode=57, is_inline_asm=True, text="INLINEASM &nop"),),
    )
    bb2 = MachineBasicBlock(
        number=2,
        symbol=".LBB0_2",
        ir_block="%else",
        predecessors=(0,),
        successors=(3,),
        can_fallthrough=True,
        instructions=(MachineInstr(opcode=212, text="CMP32ri8 $edi, 2"),),
    )
    bb3 = MachineBasicBlock(
        number=3,
        symbol=".LBB0_3",
        ir_block="%exit",
        predecessors=(1, 2),
        instructions=(
            MachineInstr(opcode=1101, flags=MIFlag.FRAME_DESTROY, text="$rbp = POP64r", encoding=b"\x5d"),
            RET,
        ),
    )
    return MachineFunction(
        name="_Z7diamondi",
        number=0,
        frame=FrameSummary(has_stack_objects=True, num_objects=1, stack_size=16),
        blocks=(bb0, bb1, bb2, bb3),
        module=module_info,
    )


@pytest.fixture
def shrink_wrapped_function(diamond_function) -> MachineFunction:
    """The diamond with a second return block and save/restore in block 1."""
    blocks = list(diamond_function.blocks)
    blocks[2] = MachineBasicBlock(
        number=2,
        symbol=".LBB0_2",
        ir_block="%else",
        predecessors=(0,),
        instructions=(RET,),
    )
    return MachineFunction(
        name="_Z7diamondi",
        number=0,
        frame=FrameSummary(save_point=Present(1), restore_point=Present(1)),
        blocks=tuple(blocks),
        module=diamond_function.module,
    )


@pytest.fixture
def single_block_function(module_info) -> MachineFunction:
    return MachineFunction(
        name="main",
        number=3,
        blocks=(MachineBasicBlock(number=0, symbol=".LBB3_0", ir_block="%entry", instructions=(RET,)),),
        module=module_info,
    )


@pytest.fixture
def diag_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def diagnostics(diag_stream):
    return diagnostic_logger(diag_stream)


@pytest.fixture
def enabled_config(tmp_path) -> WedlockConfig:
    return WedlockConfig(
        enabled=True,
        output_path=tmp_path / "wedlock.jsonl",
        diagnostic_path=tmp_path / "wedlock.log",
    )
