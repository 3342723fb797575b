"""Emit a compiled FontTable as C source for the display library."""

import re
from typing import List

from .table import FontTable


def lower_camel_case(name: str) -> str:
    """'Lucida Console' -> 'lucidaConsole', 'm3x6' -> 'm3x6'."""
    words = []
    for chunk in re.split(r"[^0-9A-Za-z]+", name):
        words.extend(re.findall(r"[A-Z]?[a-z0-9]+|[A-Z]+(?![a-z])", chunk))
    if not words:
        return ""
    return words[0].lower() + "".join(word.capitalize() for word in words[1:])


def format_point_size(point_size: float) -> str:
    # 16.0 -> '16', 8.5 -> '8.5'
    return f"{point_size:g}"


def symbol_prefix(font_name: str, point_size: float) -> str:
    """Common prefix of the three generated symbols, e.g. 'm3x6_16pt'."""
    return f"{lower_camel_case(font_name)}_{format_point_size(point_size)}pt"


def render_c_source(table: FontTable, font_name: str, point_size: float) -> str:
    """
    Render the bitmap array, descriptor array and Font record.

    Every glyph block is annotated with its character and advance width,
    and every row with a '#' rendering of its bits.
    """
    prefix = symbol_prefix(font_name, point_size)
    label = f"{font_name} {format_point_size(point_size)}pt"
    lines: List[str] = []

    lines.append("#include <font.h>")
    lines.append(f"// Character bitmaps for {label}")
    lines.append(f"const unsigned char {prefix}Bitmaps[] = {{")

    for index, (glyph, descriptor) in enumerate(zip(table.glyphs, table.descriptors)):
        if index != 0:
            lines.append("")
        code = table.start_char + index
        lines.append(f"    // @{code} '{chr(code)}' ({descriptor.advance_width} pixels wide)")
        for row, byte in enumerate(glyph.rows):
            lines.append(f"    0x{byte:02x},  // {glyph.pixel_art(row)}".rstrip())

    lines.append("};")
    lines.append("")
    lines.append(f"// Character descriptors for {label}")
    lines.append(f"const FontCharInfo {prefix}Descriptors[] = {{")
    for index, descriptor in enumerate(table.descriptors):
        code = table.start_char + index
        lines.append(
            f"    {{ {descriptor.advance_width}, {descriptor.bitmap_offset} }},  // '{chr(code)}'"
        )
    lines.append("};")
    lines.append("")
    lines.append(f"// Font information for {label}")
    lines.append(f"const Font {prefix}Font = {{")
    lines.append(f"    {table.shared_height},  //  Character height")
    lines.append(f"    '{chr(table.start_char)}',  //  Start character")
    lines.append(f"    '{chr(table.end_char)}',  //  End character")
    lines.append(f"    {prefix}Descriptors,  //  Character descriptor array")
    lines.append(f"    {prefix}Bitmaps,  //  Character bitmap array")
    lines.append("};")
    lines.append("")
    return "\n".join(lines)


def include_guard(font_name: str, point_size: float) -> str:
    guard = re.sub(r"[^0-9A-Z]", "_", symbol_prefix(font_name, point_size).upper()).strip("_")
    if not guard or not guard[0].isalpha():
        guard = f"FONT_{guard}"
    return f"{guard}_H_"


def render_c_header(font_name: str, point_size: float) -> str:
    """Render extern declarations for the symbols in render_c_source."""
    prefix = symbol_prefix(font_name, point_size)
    guard = include_guard(font_name, point_size)
    return "\n".join([
        f"#ifndef {guard}",
        f"#define {guard}",
        "",
        "#ifdef __cplusplus",
        'extern "C" {',
        "#endif",
        "",
        "#include <stdint.h>",
        "",
        '#include "font.h"',
        "",
        f"// Font data for {font_name} {format_point_size(point_size)}pt",
        f"extern const unsigned char {prefix}Bitmaps[];",
        f"extern const Font {prefix}Font;",
        f"extern const FontCharInfo {prefix}Descriptors[];",
        "",
        "#ifdef __cplusplus",
        "}",
        "#endif",
        "",
        f"#endif /* {guard} */",
        "",
    ])
