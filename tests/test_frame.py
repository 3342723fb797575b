#!/usr/bin/env python3
"""
Tests for frame normalization and geometry validation.

What matters:
1. min_y / max_y / max_width / shared_height over the whole set
2. Negative x_min aborts with UnsupportedGlyphGeometry
3. Width above 8 aborts with GlyphTooWide, width of exactly 8 passes
4. Zero-width glyphs are accepted
"""

import pytest

from fontgen import (FontFrame, GlyphMetrics, GlyphTooWide,
                     UnsupportedGlyphGeometry, compute_frame)


def m(x_min=0, y_min=0, width=3, height=5, advance=4.0):
    return GlyphMetrics(x_min, y_min, width, height, advance)


def test_frame_spans_all_glyphs():
    frame = compute_frame([
        m(y_min=0, height=7),
        m(y_min=-2, height=4, width=5),
        m(y_min=3, height=6, width=1),
    ])

    assert frame == FontFrame(min_y=-2, max_y=9, max_width=5)
    assert frame.shared_height == 11


def test_rows_run_top_to_bottom():
    frame = FontFrame(min_y=-1, max_y=3, max_width=1)
    assert list(frame.rows()) == [2, 1, 0, -1]


def test_negative_x_min_rejected():
    with pytest.raises(UnsupportedGlyphGeometry, match="'j'"):
        compute_frame([m(), m(x_min=-1)], characters=['i', 'j'])


def test_negative_x_min_checked_before_width():
    with pytest.raises(UnsupportedGlyphGeometry):
        compute_frame([m(width=12), m(x_min=-1)])


def test_too_wide_rejected():
    with pytest.raises(GlyphTooWide, match="9 pixels"):
        compute_frame([m(width=3), m(width=9)], characters=['a', 'W'])


def test_width_eight_allowed():
    assert compute_frame([m(width=8)]).max_width == 8


def test_zero_width_glyphs_allowed():
    frame = compute_frame([m(width=0, height=0), m(width=0, height=0)])

    assert frame.max_width == 0
    assert frame.shared_height == 0


def test_empty_glyph_set_is_a_programming_error():
    with pytest.raises(ValueError):
        compute_frame([])
