"""Rasterization adapter: turns characters into metrics and coverage."""

import io
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Tuple

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from .errors import InputReadFailure
from .glyph import (PRINTABLE_ASCII, GlyphMetrics, Rasterization,
                    as_coverage, blank_coverage)

logger = logging.getLogger(__name__)


class Rasterizer(ABC):
    """
    Abstract rasterization engine.

    Implementations must be deterministic: the same character and point
    size always produce the same metrics and coverage.
    """

    @abstractmethod
    def rasterize(self, character: str, point_size: float) -> Tuple[GlyphMetrics, np.ndarray]:
        """
        Rasterize a single character.

        Args:
            character: One-character string
            point_size: Rendering size in points (pixels per em)

        Returns:
            (metrics, coverage) where coverage is a (height, width) array
            of 0-255 values, top row first
        """
        pass


class PillowRasterizer(Rasterizer):
    """Rasterizer backed by Pillow's FreeType binding."""

    # Size used only to check that the font parses at load time
    PROBE_SIZE = 16

    def __init__(self, font_data: bytes, index: int = 0):
        """
        Initialize PillowRasterizer.

        Args:
            font_data: Raw TTF/OTF bytes
            index: Face index inside a font collection

        Raises:
            InputReadFailure: If the bytes are not a font FreeType can open
        """
        self.font_data = bytes(font_data)
        self.index = index
        self._fonts: Dict[float, ImageFont.FreeTypeFont] = {}
        self._load(self.PROBE_SIZE)

    @classmethod
    def from_path(cls, path: str | Path, index: int = 0) -> "PillowRasterizer":
        """Load a font file from disk."""
        path = Path(path)
        try:
            data = path.read_bytes()
        except OSError as e:
            raise InputReadFailure(f"Cannot read font file {path}: {e}") from e
        logger.info(f"Loaded {len(data)} bytes from {path}")
        return cls(data, index=index)

    def _load(self, point_size: float) -> ImageFont.FreeTypeFont:
        font = self._fonts.get(point_size)
        if font is None:
            try:
                font = ImageFont.truetype(io.BytesIO(self.font_data), point_size, index=self.index)
            except (OSError, ValueError) as e:
                raise InputReadFailure(f"Cannot parse font data: {e}") from e
            self._fonts[point_size] = font
        return font

    def rasterize(self, character: str, point_size: float) -> Tuple[GlyphMetrics, np.ndarray]:
        font = self._load(point_size)
        advance_width = font.getlength(character)

        # Bounding box relative to the baseline-left origin, y pointing down
        left, top, right, bottom = font.getbbox(character, anchor="ls")
        if right <= left or bottom <= top:
            return GlyphMetrics(0, 0, 0, 0, advance_width), blank_coverage()

        image = Image.new("L", (right - left, bottom - top), 0)
        ImageDraw.Draw(image).text((-left, -top), character, font=font, fill=255, anchor="ls")

        ink = image.getbbox()
        if ink is None:
            return GlyphMetrics(0, 0, 0, 0, advance_width), blank_coverage()

        ink_left, ink_top, ink_right, ink_bottom = ink
        metrics = GlyphMetrics(
            x_min=left + ink_left,
            y_min=-(top + ink_bottom),
            width=ink_right - ink_left,
            height=ink_bottom - ink_top,
            advance_width=advance_width,
        )
        coverage = np.array(image.crop(ink), dtype=np.uint8)
        return metrics, coverage


def rasterize_printable_ascii(rasterizer: Rasterizer, point_size: float) -> List[Rasterization]:
    """
    Rasterize every printable ASCII character, lowest code point first.

    No geometry is validated here; see frame.compute_frame.
    """
    if point_size <= 0:
        raise ValueError(f"Point size must be positive, got {point_size}")

    rasterizations = []
    for code in PRINTABLE_ASCII:
        character = chr(code)
        metrics, coverage = rasterizer.rasterize(character, point_size)
        rasterizations.append(Rasterization(character, metrics, as_coverage(coverage, metrics)))
        logger.debug(
            f"Rasterized {character!r}: {metrics.width}x{metrics.height} "
            f"at ({metrics.x_min}, {metrics.y_min}), advance {metrics.advance_width:.2f}"
        )

    logger.info(f"Rasterized {len(rasterizations)} glyphs at {point_size}pt")
    return rasterizations
