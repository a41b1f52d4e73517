"""Tests for prologue/epilogue insertion-site classification."""

from wedlock.analysis.frame_classifier import (
    is_epilogue_insertion_block,
    is_prologue_insertion_block,
)
from wedlock.extraction.machine_function import (
    Absent,
    FrameSummary,
    MachineBasicBlock,
    MachineFunction,
    Present,
)


def _epilogues(function):
    return [b.number for b in function.blocks if is_epilogue_insertion_block(function.frame, b)]


def _prologues(function):
    return [
        b.number
        for b in function.blocks
        if is_prologue_insertion_block(function.frame, function, b)
    ]


def test_fallback_epilogue_is_every_return_block(diamond_function):
    assert _epilogues(diamond_function) == [3]


def test_fallback_prologue_is_entry_block(diamond_function):
    assert _prologues(diamond_function) == [0]


def test_fallback_multiple_returns(shrink_wrapped_function):
    unwrapped = MachineFunction(
        name=shrink_wrapped_function.name,
        number=0,
        blocks=shrink_wrapped_function.blocks,
    )
    assert _epilogues(unwrapped) == [2, 3]
    assert _prologues(unwrapped) == [0]


def test_restore_point_is_the_only_epilogue_block(shrink_wrapped_function):
    # Blocks 2 and 3 both return, but only the restore point counts.
    assert _epilogues(shrink_wrapped_function) == [1]


def test_save_point_is_the_only_prologue_block(shrink_wrapped_function):
    assert _prologues(shrink_wrapped_function) == [1]


def test_restore_point_without_save_point(diamond_function):
    frame = FrameSummary(restore_point=Present(2))
    assert [b.number for b in diamond_function.blocks if is_epilogue_insertion_block(frame, b)] == [2]
    assert [
        b.number
        for b in diamond_function.blocks
        if is_prologue_insertion_block(frame, diamond_function, b)
    ] == [0]


def test_entry_block_follows_layout_not_number():
    blocks = (
        MachineBasicBlock(number=5, symbol=".LBB0_5"),
        MachineBasicBlock(number=0, symbol=".LBB0_0"),
    )
    function = MachineFunction(name="f", number=0, blocks=blocks)
    assert _prologues(function) == [5]


def test_empty_block_is_not_a_return_block():
    block = MachineBasicBlock(number=0, symbol=".LBB0_0")
    assert is_epilogue_insertion_block(FrameSummary(), block) is False


def test_absent_points_are_default():
    frame = FrameSummary()
    assert isinstance(frame.save_point, Absent)
    assert isinstance(frame.restore_point, Absent)
