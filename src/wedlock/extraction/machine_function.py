"""Frozen dataclasses describing a compiled machine function.

Blocks live in an arena (the function's ``blocks`` tuple, in layout order) and
refer to each other by block number only.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag
from functools import cached_property
from pathlib import PurePath
from typing import Union

_INT64_SIGN = 1 << 63
_UINT64_RANGE = 1 << 64


class MIFlag(IntFlag):
    FRAME_SETUP = 1 << 0
    FRAME_DESTROY = 1 << 1


@dataclass(frozen=True)
class Present:
    number: int


@dataclass(frozen=True)
class Absent:
    pass


PointRef = Union[Present, Absent]
ABSENT = Absent()


def to_signed64(value: int) -> int:
    """Read ``value`` as a two's-complement 64-bit integer.

    Values already in the signed range come back unchanged.
    """
    if _INT64_SIGN <= value < _UINT64_RANGE:
        return value - _UINT64_RANGE
    return value


@dataclass(frozen=True)
class MachineInstr:
    opcode: int
    flags: int = 0
    is_inline_asm: bool = False
    is_return: bool = False
    text: str = ""
    encoding: bytes = b""

    @property
    def is_frame_setup(self) -> bool:
        return bool(self.flags & MIFlag.FRAME_SETUP)

    @property
    def is_frame_destroy(self) -> bool:
        return bool(self.flags & MIFlag.FRAME_DESTROY)


@dataclass(frozen=True)
class MachineBasicBlock:
    number: int
    symbol: str
    ir_block: str | None = None
    predecessors: tuple[int | None, ...] = ()  # block numbers; None is a null edge
    successors: tuple[int | None, ...] = ()
    can_fallthrough: bool = False
    address_taken: bool = False
    instructions: tuple[MachineInstr, ...] = ()

    @property
    def is_return_block(self) -> bool:
        return bool(self.instructions) and self.instructions[-1].is_return


@dataclass(frozen=True)
class FrameSummary:
    has_stack_objects: bool = False
    has_var_sized_objects: bool = False
    frame_address_taken: bool = False
    return_address_taken: bool = False
    num_objects: int = 0
    num_fixed_objects: int = 0
    stack_size: int = 0
    adjusts_stack: bool = False
    save_point: PointRef = ABSENT
    restore_point: PointRef = ABSENT


@dataclass(frozen=True)
class ModuleInfo:
    name: str
    source_file_name: str = ""

    @property
    def stem(self) -> str:
        return PurePath(self.name).stem

    @property
    def source_stem(self) -> str:
        return PurePath(self.source_file_name).stem


@dataclass(frozen=True)
class MachineFunction:
    name: str
    number: int
    frame: FrameSummary = field(default_factory=FrameSummary)
    blocks: tuple[MachineBasicBlock, ...] = ()
    module: ModuleInfo | None = None
    has_instr_info: bool = True
    operand: str = ""

    @property
    def display_operand(self) -> str:
        return self.operand or f"@{self.name}"

    @property
    def entry_block(self) -> MachineBasicBlock | None:
        return self.blocks[0] if self.blocks else None

    @cached_property
    def _positions(self) -> dict[int, int]:
        return {block.number: i for i, block in enumerate(self.blocks)}

    def block_by_number(self, number: int | None) -> MachineBasicBlock | None:
        if number is None or number not in self._positions:
            return None
        return self.blocks[self._positions[number]]

    def layout_index(self, block: MachineBasicBlock) -> int:
        try:
            return self._positions[block.number]
        except KeyError:
            raise ValueError(f"block {block.number} is not part of {self.name}") from None

    def is_layout_successor(self, block: MachineBasicBlock, succ: MachineBasicBlock) -> bool:
        """True when ``succ`` is laid out immediately after ``block``."""
        return self.layout_index(succ) == self.layout_index(block) + 1
