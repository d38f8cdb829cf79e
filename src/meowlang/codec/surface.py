"""
Surface notation codec.

Each instruction is spelled as an ordered pair of the three base symbols
``Meow``, ``Mrrp`` and ``Mrowp``; the nine pairs map one-to-one onto the nine
instructions.
"""

from dataclasses import dataclass
from enum import auto
from typing import Dict

from ..common.enum import IntEnum2
from ..errors import MalformedSurfaceToken
from ..isa import Instruction, require_exhaustive


class SurfaceSymbol(IntEnum2):
    """Base symbols of the surface notation"""
    MEOW = auto()
    MRRP = auto()
    MROWP = auto()

    @property
    def text(self) -> str:
        return _SYMBOL_TEXT[self]

    @classmethod
    def from_text(cls, token: str) -> 'SurfaceSymbol':
        """Look up a symbol by its spelling (case-sensitive)"""
        try:
            return _TEXT_SYMBOL[token]
        except KeyError:
            raise MalformedSurfaceToken(f'unknown surface symbol {token!r}', token) from None


_SYMBOL_TEXT: Dict[SurfaceSymbol, str] = {
    SurfaceSymbol.MEOW: 'Meow',
    SurfaceSymbol.MRRP: 'Mrrp',
    SurfaceSymbol.MROWP: 'Mrowp',
}

_TEXT_SYMBOL: Dict[str, SurfaceSymbol] = {text: symbol for symbol, text in _SYMBOL_TEXT.items()}


@dataclass(frozen=True)
class SurfacePair:
    """Two base symbols spelling exactly one instruction"""
    first: SurfaceSymbol
    second: SurfaceSymbol

    def __str__(self):
        return f'{self.first.text} {self.second.text}'

    @classmethod
    def from_tokens(cls, first: str, second: str) -> 'SurfacePair':
        return cls(SurfaceSymbol.from_text(first), SurfaceSymbol.from_text(second))


M, R, W = SurfaceSymbol.MEOW, SurfaceSymbol.MRRP, SurfaceSymbol.MROWP

_ENCODE: Dict[Instruction, SurfacePair] = {
    Instruction.MOVE_RIGHT: SurfacePair(M, M),
    Instruction.MOVE_LEFT:  SurfacePair(M, R),
    Instruction.INCREMENT:  SurfacePair(M, W),
    Instruction.DECREMENT:  SurfacePair(R, M),
    Instruction.OUTPUT:     SurfacePair(R, R),
    Instruction.INPUT:      SurfacePair(R, W),
    Instruction.LOOP_START: SurfacePair(W, M),
    Instruction.LOOP_END:   SurfacePair(W, R),
    Instruction.NOP:        SurfacePair(W, W),
}

del M, R, W

require_exhaustive(_ENCODE, 'surface codec')

_DECODE: Dict[SurfacePair, Instruction] = {pair: instr for instr, pair in _ENCODE.items()}

if len(_DECODE) != len(_ENCODE):
    raise TypeError('surface codec maps two instructions onto one pair')


def encode(instruction: Instruction) -> SurfacePair:
    """Spell an instruction as a surface pair"""
    return _ENCODE[instruction]


def decode(pair: SurfacePair) -> Instruction:
    """Read the instruction a surface pair spells"""
    if not isinstance(pair.first, SurfaceSymbol) or not isinstance(pair.second, SurfaceSymbol):
        raise MalformedSurfaceToken(f'not a surface pair: {pair!r}')
    return _DECODE[pair]
