"""Shared fixtures: an in-memory rasterizer for hand-built glyph sets."""

import os
import sys

import numpy as np
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from fontgen import GlyphMetrics, Rasterizer


class FakeRasterizer(Rasterizer):
    """Serves fixed glyphs; characters it doesn't know come back blank."""

    def __init__(self, glyphs=None, blank_advance=4.0):
        self.glyphs = dict(glyphs or {})
        self.blank_advance = blank_advance
        self.calls = []

    def rasterize(self, character, point_size):
        self.calls.append((character, point_size))
        if character in self.glyphs:
            metrics, coverage = self.glyphs[character]
            return metrics, list(coverage)
        return GlyphMetrics(0, 0, 0, 0, self.blank_advance), []


def block_a():
    """5x7 'A' whose top row is empty and rows 1-6 are solid."""
    metrics = GlyphMetrics(x_min=0, y_min=0, width=5, height=7, advance_width=6.0)
    coverage = np.zeros((7, 5), dtype=np.uint8)
    coverage[1:, :] = 255
    return metrics, coverage.flatten()


@pytest.fixture
def fake_rasterizer():
    return FakeRasterizer({'A': block_a()})
