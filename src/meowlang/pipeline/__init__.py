from .transpiler import (
    Transpiler,
    glyph_text_to_surface_text,
    surface_text_to_glyph_text,
    parse_glyph_text,
    parse_surface_text,
    render_glyph_text,
    render_surface_text,
)
