"""Load machine-function dumps (YAML or JSON) into the frozen data model."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from wedlock.errors import DumpLoadError
from wedlock.extraction.machine_function import (
    ABSENT,
    FrameSummary,
    MachineBasicBlock,
    MachineFunction,
    MachineInstr,
    ModuleInfo,
    PointRef,
    Present,
)
from wedlock.utils.logging import get_logger

log = get_logger(__name__)


class InstrDump(BaseModel):
    opcode: int
    flags: int = 0
    inline_asm: bool = False
    is_return: bool = False
    text: str = ""
    encoding: str = ""  # hex


class BlockDump(BaseModel):
    number: int
    symbol: str = ""
    ir_block: str | None = None
    preds: list[int | None] = Field(default_factory=list)
    succs: list[int | None] = Field(default_factory=list)
    can_fallthrough: bool = False
    address_taken: bool = False
    instrs: list[InstrDump] = Field(default_factory=list)


class FrameDump(BaseModel):
    has_stack_objects: bool = False
    has_var_sized_objects: bool = False
    frame_address_taken: bool = False
    return_address_taken: bool = False
    num_objects: int = 0
    num_fixed_objects: int = 0
    stack_size: int = Field(default=0, ge=-(1 << 63), lt=1 << 64)
    adjusts_stack: bool = False
    save_point: int | None = None
    restore_point: int | None = None


class FunctionDump(BaseModel):
    name: str
    number: int
    operand: str = ""
    has_instr_info: bool = True
    frame: FrameDump = Field(default_factory=FrameDump)
    blocks: list[BlockDump] = Field(default_factory=list)


class ModuleDump(BaseModel):
    name: str
    source_file_name: str = ""


class DumpDocument(BaseModel):
    module: ModuleDump | None = None
    functions: list[FunctionDump] = Field(default_factory=list)


def _point(number: int | None) -> PointRef:
    return ABSENT if number is None else Present(number)


def _convert_block(block: BlockDump, function_number: int) -> MachineBasicBlock:
    instructions = tuple(
        MachineInstr(
            opcode=instr.opcode,
            flags=instr.flags,
            is_inline_asm=instr.inline_asm,
            is_return=instr.is_return,
            text=instr.text,
            encoding=bytes.fromhex(instr.encoding),
        )
        for instr in block.instrs
    )
    return MachineBasicBlock(
        number=block.number,
        symbol=block.symbol or f".LBB{function_number}_{block.number}",
        ir_block=block.ir_block,
        predecessors=tuple(block.preds),
        successors=tuple(block.succs),
        can_fallthrough=block.can_fallthrough,
        address_taken=block.address_taken,
        instructions=instructions,
    )


def _convert_function(func: FunctionDump, module: ModuleInfo | None) -> MachineFunction:
    numbers = [b.number for b in func.blocks]
    if len(set(numbers)) != len(numbers):
        raise ValueError(f"function {func.name!r} has duplicate block numbers: {numbers}")

    frame = func.frame
    return MachineFunction(
        name=func.name,
        number=func.number,
        operand=func.operand,
        has_instr_info=func.has_instr_info,
        module=module,
        frame=FrameSummary(
            has_stack_objects=frame.has_stack_objects,
            has_var_sized_objects=frame.has_var_sized_objects,
            frame_address_taken=frame.frame_address_taken,
            return_address_taken=frame.return_address_taken,
            num_objects=frame.num_objects,
            num_fixed_objects=frame.num_fixed_objects,
            stack_size=frame.stack_size,
            adjusts_stack=frame.adjusts_stack,
            save_point=_point(frame.save_point),
            restore_point=_point(frame.restore_point),
        ),
        blocks=tuple(_convert_block(b, func.number) for b in func.blocks),
    )


def parse_dump(data: object) -> list[MachineFunction]:
    """Validate an already-decoded dump document and convert it."""
    try:
        doc = DumpDocument.model_validate(data or {})
        module = (
            ModuleInfo(name=doc.module.name, source_file_name=doc.module.source_file_name)
            if doc.module is not None
            else None
        )
        return [_convert_function(f, module) for f in doc.functions]
    except (ValidationError, ValueError) as exc:
        raise DumpLoadError(f"invalid machine-function dump: {exc}") from exc


def load_dump(path: Path) -> list[MachineFunction]:
    """Read a ``.json``, ``.yaml`` or ``.yml`` dump from disk."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DumpLoadError(f"cannot read {path}: {exc}") from exc

    try:
        data = json.loads(text) if path.suffix == ".json" else yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise DumpLoadError(f"cannot parse {path}: {exc}") from exc

    functions = parse_dump(data)
    log.info("dump_loaded", path=str(path), functions=len(functions))
    return functions
