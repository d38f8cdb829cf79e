"""
Instruction set shared by both notations and the interpreter.
"""

from enum import auto
from typing import Iterable, Mapping, Tuple

from ..common.enum import IntEnum2


class Instruction(IntEnum2):
    """The closed set of tape machine operations"""
    MOVE_RIGHT = auto()
    MOVE_LEFT = auto()
    INCREMENT = auto()
    DECREMENT = auto()
    OUTPUT = auto()
    INPUT = auto()
    LOOP_START = auto()
    LOOP_END = auto()
    NOP = auto()     # catch-all for anything unrecognized


# Programs are immutable while they execute
Program = Tuple[Instruction, ...]


def make_program(instructions: Iterable[Instruction]) -> Program:
    """Freeze a sequence of instructions into a Program"""
    return tuple(instructions)


def require_exhaustive(table: Mapping, name: str):
    """Fail at import time if a per-instruction table misses an operation"""
    missing = set(Instruction) - set(table)
    if missing:
        raise TypeError(f"{name} does not cover: {', '.join(sorted(m.name for m in missing))}")
