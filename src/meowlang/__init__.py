"""
meowlang: transpiler, compiler and tape interpreter for the Meow notation
"""

__version__ = "0.1.0"

from .isa import Instruction, Program
from .codec import SurfacePair, SurfaceSymbol
from .pipeline import glyph_text_to_surface_text, surface_text_to_glyph_text, parse_glyph_text, parse_surface_text
from .vm import Interpreter, Tape, run_program
from .errors import (
    MeowError, UsageError, InvalidMode, MalformedSurfaceToken, TruncatedSurfaceStream,
    FileUnreadable, InputExhausted, UnmatchedLoopEnd,
)

__all__ = [
    "Instruction", "Program", "SurfacePair", "SurfaceSymbol",
    "glyph_text_to_surface_text", "surface_text_to_glyph_text", "parse_glyph_text", "parse_surface_text",
    "Interpreter", "Tape", "run_program",
    "MeowError", "UsageError", "InvalidMode", "MalformedSurfaceToken", "TruncatedSurfaceStream",
    "FileUnreadable", "InputExhausted", "UnmatchedLoopEnd",
]
