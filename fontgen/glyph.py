"""Glyph metrics and rasterization results."""

from dataclasses import dataclass

import numpy as np

# Printable ASCII, ' ' to '~'. Consumers index tables by code - START_CHAR.
START_CHAR = 0x20
END_CHAR = 0x7E
PRINTABLE_ASCII = range(START_CHAR, END_CHAR + 1)

# A packed row is a single byte.
MAX_GLYPH_WIDTH = 8


@dataclass(frozen=True)
class GlyphMetrics:
    """
    Placement of a rasterized glyph relative to the pen origin.

    The y axis points up: y_min is the bottom edge of the bitmap measured
    from the baseline, so a descender has a negative y_min.
    """

    x_min: int
    y_min: int
    width: int
    height: int
    advance_width: float

    @property
    def y_max(self) -> int:
        return self.y_min + self.height


@dataclass(frozen=True)
class Rasterization:
    """One glyph as produced by a rasterizer."""

    character: str
    metrics: GlyphMetrics
    coverage: np.ndarray  # (height, width) uint8, top row first

    @property
    def code(self) -> int:
        return ord(self.character)


def blank_coverage(width: int = 0, height: int = 0) -> np.ndarray:
    """Coverage bitmap with no ink."""
    return np.zeros((height, width), dtype=np.uint8)


def as_coverage(data, metrics: GlyphMetrics) -> np.ndarray:
    """
    Coerce rasterizer output into a (height, width) uint8 array.

    Accepts flat sequences (indexed y * width + x) as well as 2D arrays.
    """
    coverage = np.asarray(data, dtype=np.uint8)
    expected = metrics.width * metrics.height
    if coverage.size != expected:
        raise ValueError(
            f"Coverage has {coverage.size} values, metrics describe "
            f"{metrics.width}x{metrics.height} = {expected}"
        )
    return coverage.reshape((metrics.height, metrics.width))
