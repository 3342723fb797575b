"""Shared vertical frame for every glyph of a font table."""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from .errors import GlyphTooWide, UnsupportedGlyphGeometry
from .glyph import MAX_GLYPH_WIDTH, GlyphMetrics

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FontFrame:
    """Vertical extent (y up, half-open [min_y, max_y)) and widest glyph."""

    min_y: int
    max_y: int
    max_width: int

    @property
    def shared_height(self) -> int:
        return self.max_y - self.min_y

    def rows(self) -> range:
        """Row coordinates from the top of the cell to the bottom."""
        return range(self.max_y - 1, self.min_y - 1, -1)


def compute_frame(
    metrics: Sequence[GlyphMetrics],
    characters: Optional[Sequence[str]] = None,
) -> FontFrame:
    """
    Derive the shared frame and validate the glyph set.

    Args:
        metrics: Metrics of every glyph, in table order
        characters: Optional characters matching metrics, used in messages

    Raises:
        UnsupportedGlyphGeometry: If any glyph has a negative x_min
        GlyphTooWide: If the widest glyph exceeds MAX_GLYPH_WIDTH
    """
    if not metrics:
        raise ValueError("Cannot compute a frame for an empty glyph set")

    for i, m in enumerate(metrics):
        if m.x_min < 0:
            label = repr(characters[i]) if characters is not None else f"#{i}"
            raise UnsupportedGlyphGeometry(
                f"Glyph {label} renders at negative x offset {m.x_min}; "
                f"fonts that render left of the origin are not supported"
            )

    frame = FontFrame(
        min_y=min(m.y_min for m in metrics),
        max_y=max(m.y_max for m in metrics),
        max_width=max(m.width for m in metrics),
    )

    if frame.max_width > MAX_GLYPH_WIDTH:
        widest = max(range(len(metrics)), key=lambda i: metrics[i].width)
        label = repr(characters[widest]) if characters is not None else f"#{widest}"
        raise GlyphTooWide(
            f"Glyph {label} is {frame.max_width} pixels wide; "
            f"cannot generate a font wider than {MAX_GLYPH_WIDTH} pixels"
        )

    logger.info(
        f"Frame: y in [{frame.min_y}, {frame.max_y}), height {frame.shared_height}, "
        f"max width {frame.max_width}"
    )
    return frame
