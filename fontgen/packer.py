"""Pack coverage bitmaps into one byte per row."""

from dataclasses import dataclass

import numpy as np

from .frame import FontFrame
from .glyph import GlyphMetrics, Rasterization

# Coverage strictly above this value sets a bit.
COVERAGE_THRESHOLD = 128


@dataclass(frozen=True)
class PackedGlyph:
    """
    Monochrome rows of one glyph, top row first.

    Bit x of each row is column x counted from the glyph's left edge.
    """

    character: str
    width: int
    rows: bytes

    def __len__(self) -> int:
        return len(self.rows)

    def pixel_art(self, row: int) -> str:
        """Row as '#' for set bits and ' ' otherwise, trailing blanks dropped."""
        byte = self.rows[row]
        return "".join("#" if byte & (1 << x) else " " for x in range(self.width)).rstrip()


def bitmap_row_index(y: int, metrics: GlyphMetrics) -> int:
    """
    Map frame row y (y up) to the glyph's bitmap row (top down).

    The result is outside [0, height) when y is not covered by the glyph.
    """
    return (metrics.height - 1) - (y - metrics.y_min)


def pack_row(coverage_row: np.ndarray) -> int:
    """Pack up to 8 coverage values into a byte, column 0 in bit 0."""
    bits = np.asarray(coverage_row) > COVERAGE_THRESHOLD
    if bits.size == 0:
        return 0
    return int(np.packbits(bits, bitorder="little")[0])


def pack_glyph(glyph: Rasterization, frame: FontFrame) -> PackedGlyph:
    """Pack a glyph into exactly frame.shared_height rows."""
    metrics = glyph.metrics
    rows = bytearray()
    for y in frame.rows():
        y_offset = bitmap_row_index(y, metrics)
        if y_offset < 0 or y_offset >= metrics.height:
            rows.append(0x00)
            continue
        rows.append(pack_row(glyph.coverage[y_offset, :metrics.width]))
    return PackedGlyph(glyph.character, metrics.width, bytes(rows))
