"""
Glyph notation codec: one character per instruction.

Decoding is total over any character; everything outside the eight canonical
glyphs reads as NOP, and NOP is written back out as a newline.
"""

from typing import Dict

from ..isa import Instruction, require_exhaustive

NOP_GLYPH = '\n'

_ENCODE: Dict[Instruction, str] = {
    Instruction.MOVE_RIGHT: '>',
    Instruction.MOVE_LEFT: '<',
    Instruction.INCREMENT: '+',
    Instruction.DECREMENT: '-',
    Instruction.OUTPUT: '.',
    Instruction.INPUT: ',',
    Instruction.LOOP_START: '[',
    Instruction.LOOP_END: ']',
    Instruction.NOP: NOP_GLYPH,
}

require_exhaustive(_ENCODE, 'glyph codec')

_DECODE: Dict[str, Instruction] = {
    glyph: instr for instr, glyph in _ENCODE.items() if instr is not Instruction.NOP
}


def encode(instruction: Instruction) -> str:
    return _ENCODE[instruction]


def decode(glyph: str) -> Instruction:
    return _DECODE.get(glyph, Instruction.NOP)
