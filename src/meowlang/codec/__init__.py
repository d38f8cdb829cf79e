from . import glyph, surface
from .surface import SurfacePair, SurfaceSymbol
from .glyph import NOP_GLYPH
