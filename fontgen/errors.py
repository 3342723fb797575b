"""Exceptions raised while compiling a font table."""


class FontgenError(Exception):
    """Base class for every fatal compilation failure."""


class InputReadFailure(FontgenError):
    """The font resource could not be read or parsed."""


class UnsupportedGlyphGeometry(FontgenError):
    """A glyph starts left of its origin (negative x offset)."""


class GlyphTooWide(FontgenError):
    """A glyph is wider than one packed byte row can hold."""


class OutputWriteFailure(FontgenError):
    """A generated file could not be written."""
