"""
Text-level translation between glyph notation and surface notation.

glyph text --GlyphCodec.decode--> Program --SurfaceCodec.encode--> surface text
surface text --SurfaceCodec.decode--> Program --GlyphCodec.encode--> glyph text
"""

import logging
from typing import Iterator, List

from ..codec import glyph, surface
from ..codec.surface import SurfacePair
from ..errors import InvalidMode, TruncatedSurfaceStream
from ..isa import Program, make_program

logger = logging.getLogger(__name__)


def iter_surface_pairs(text: str) -> Iterator[SurfacePair]:
    """Split surface text on whitespace and group the symbols two at a time"""
    tokens = text.split()
    if len(tokens) % 2:
        raise TruncatedSurfaceStream(len(tokens))

    for i in range(0, len(tokens), 2):
        yield SurfacePair.from_tokens(tokens[i], tokens[i + 1])


def parse_surface_text(text: str) -> Program:
    """Decode surface text into a Program"""
    program = make_program(surface.decode(pair) for pair in iter_surface_pairs(text))
    logger.debug('decoded %d instructions from surface text', len(program))
    return program


def parse_glyph_text(text: str) -> Program:
    """Decode glyph text into a Program; unknown characters become NOP"""
    program = make_program(glyph.decode(ch) for ch in text)
    logger.debug('decoded %d instructions from glyph text', len(program))
    return program


def render_surface_text(program: Program) -> str:
    return ' '.join(str(surface.encode(instr)) for instr in program)


def render_glyph_text(program: Program) -> str:
    return ''.join(glyph.encode(instr) for instr in program)


def glyph_text_to_surface_text(text: str) -> str:
    """Transpile glyph notation into surface notation"""
    return render_surface_text(parse_glyph_text(text))


def surface_text_to_glyph_text(text: str) -> str:
    """Compile surface notation back into glyph notation"""
    return render_glyph_text(parse_surface_text(text))


class Transpiler:
    """Mode dispatcher over the two text directions"""

    COMPILE = 'compile'
    TRANSPILE = 'transpile'

    MODES: List[str] = [COMPILE, TRANSPILE]

    def translate(self, mode: str, text: str) -> str:
        mode = mode.lower()
        if mode == self.COMPILE:
            return surface_text_to_glyph_text(text)
        if mode == self.TRANSPILE:
            return glyph_text_to_surface_text(text)
        raise InvalidMode(mode)
