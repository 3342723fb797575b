"""fontgen - Compile scalable fonts into 1bpp bitmap tables for small displays."""

from .compiler import compile_font, write_font
from .emitter import render_c_header, render_c_source, symbol_prefix
from .errors import (FontgenError, GlyphTooWide, InputReadFailure,
                     OutputWriteFailure, UnsupportedGlyphGeometry)
from .frame import FontFrame, compute_frame
from .glyph import (END_CHAR, MAX_GLYPH_WIDTH, PRINTABLE_ASCII, START_CHAR,
                    GlyphMetrics, Rasterization)
from .packer import (COVERAGE_THRESHOLD, PackedGlyph, bitmap_row_index,
                     pack_glyph, pack_row)
from .preview import draw_text, render_preview
from .rasterizer import PillowRasterizer, Rasterizer, rasterize_printable_ascii
from .render_buffer import RenderBuffer
from .table import FontTable, GlyphDescriptor, build_font_table

__all__ = [
    "compile_font",
    "write_font",
    "render_c_source",
    "render_c_header",
    "symbol_prefix",
    "FontgenError",
    "InputReadFailure",
    "OutputWriteFailure",
    "UnsupportedGlyphGeometry",
    "GlyphTooWide",
    "FontFrame",
    "compute_frame",
    "GlyphMetrics",
    "Rasterization",
    "PRINTABLE_ASCII",
    "START_CHAR",
    "END_CHAR",
    "MAX_GLYPH_WIDTH",
    "COVERAGE_THRESHOLD",
    "PackedGlyph",
    "bitmap_row_index",
    "pack_glyph",
    "pack_row",
    "Rasterizer",
    "PillowRasterizer",
    "rasterize_printable_ascii",
    "RenderBuffer",
    "draw_text",
    "render_preview",
    "FontTable",
    "GlyphDescriptor",
    "build_font_table",
]
