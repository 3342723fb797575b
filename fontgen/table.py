"""Font table: packed bitmaps plus per-glyph descriptors."""

import logging
from dataclasses import dataclass
from functools import cached_property
from typing import List, Sequence

from .frame import FontFrame
from .glyph import END_CHAR, MAX_GLYPH_WIDTH, START_CHAR, Rasterization
from .packer import PackedGlyph, pack_glyph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GlyphDescriptor:
    advance_width: int
    bitmap_offset: int


@dataclass(frozen=True)
class FontTable:
    """Everything the display library needs to draw the font."""

    shared_height: int
    descriptors: List[GlyphDescriptor]
    glyphs: List[PackedGlyph]
    start_char: int = START_CHAR
    end_char: int = END_CHAR

    @cached_property
    def bitmap(self) -> bytes:
        """All packed rows, glyph after glyph."""
        return b"".join(glyph.rows for glyph in self.glyphs)

    def index_of(self, character: str) -> int:
        code = ord(character)
        if not self.start_char <= code <= self.end_char:
            raise KeyError(f"Character {character!r} is not in the table")
        return code - self.start_char

    def descriptor_for(self, character: str) -> GlyphDescriptor:
        return self.descriptors[self.index_of(character)]

    def glyph_rows(self, character: str) -> bytes:
        """Rows of a glyph, read back through its descriptor offset."""
        offset = self.descriptor_for(character).bitmap_offset
        return self.bitmap[offset:offset + self.shared_height]


def advance_to_pixels(advance_width: float) -> int:
    # Sub-pixel advance is dropped, never rounded up
    return max(int(advance_width), 0)


def build_font_table(rasterizations: Sequence[Rasterization], frame: FontFrame) -> FontTable:
    """Pack every glyph and lay out descriptors in rasterization order."""
    descriptors = []
    glyphs = []
    for index, glyph in enumerate(rasterizations):
        packed = pack_glyph(glyph, frame)
        glyphs.append(packed)
        descriptors.append(GlyphDescriptor(
            advance_width=advance_to_pixels(glyph.metrics.advance_width),
            bitmap_offset=frame.shared_height * index,
        ))
        if descriptors[-1].advance_width > MAX_GLYPH_WIDTH:
            logger.warning(
                f"Glyph {glyph.character!r} advances {descriptors[-1].advance_width} pixels; "
                f"the display reads past its {MAX_GLYPH_WIDTH}-pixel row byte"
            )

    table = FontTable(
        shared_height=frame.shared_height,
        descriptors=descriptors,
        glyphs=glyphs,
    )
    logger.info(f"Built table: {len(glyphs)} glyphs, {len(table.bitmap)} bitmap bytes")
    return table
