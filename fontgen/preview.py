"""Draw text from a compiled FontTable the way the display library does."""

from typing import Tuple

from .render_buffer import RenderBuffer
from .table import FontTable


def draw_char(buffer: RenderBuffer, table: FontTable, origin: Tuple[int, int], character: str) -> int:
    """
    Draw one character with its top-left corner at origin.

    Mirrors the firmware's byte walk: the cell is advance_width columns
    wide, column c reads bit (c % 8), and the read position steps to the
    next byte of the bitmap at every multiple of 8 columns. A glyph
    advancing more than 8 pixels therefore consumes several bytes per row
    and reads into later rows (and glyphs). Bytes past the end of the
    bitmap read as 0.

    Returns:
        The advance width in pixels
    """
    x0, y0 = origin
    descriptor = table.descriptor_for(character)
    bitmap = table.bitmap
    position = descriptor.bitmap_offset
    for row in range(table.shared_height):
        for column in range(descriptor.advance_width):
            bit = column % 8
            if bit == 0:
                position += 1
            byte = bitmap[position - 1] if position <= len(bitmap) else 0
            buffer.set_pixel(x0 + column, y0 + row, bool(byte & (1 << bit)))
    return descriptor.advance_width


def draw_text(buffer: RenderBuffer, table: FontTable, origin: Tuple[int, int], text: str) -> int:
    """
    Draw text left to right, stopping before a glyph that would not fit.

    Returns:
        Number of characters drawn
    """
    x, y = origin
    count = 0
    for character in text:
        width = table.descriptor_for(character).advance_width
        if x + width > buffer.width:
            break
        x += draw_char(buffer, table, (x, y), character)
        count += 1
    return count


def text_width(table: FontTable, text: str) -> int:
    return sum(table.descriptor_for(character).advance_width for character in text)


def render_preview(table: FontTable, text: str) -> RenderBuffer:
    """Render text onto a buffer sized to fit it exactly."""
    buffer = RenderBuffer(text_width(table, text), table.shared_height)
    draw_text(buffer, table, (0, 0), text)
    return buffer
