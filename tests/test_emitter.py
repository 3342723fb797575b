#!/usr/bin/env python3
"""
Tests for C source emission.

What matters:
1. Symbol names: lowerCamelCase display name + point size
2. Section order: bitmaps, descriptors, Font record
3. Row annotations and descriptor pairs match the table
4. Header declares the same symbols
"""

from conftest import FakeRasterizer, block_a
from fontgen import GlyphMetrics, compile_font, render_c_header, render_c_source
from fontgen.emitter import format_point_size, include_guard, lower_camel_case, symbol_prefix


def compiled():
    rasterizer = FakeRasterizer({
        'A': block_a(),
        ' ': (GlyphMetrics(0, 0, 0, 0, 3.0), []),
    })
    return compile_font(rasterizer, 8)


def test_lower_camel_case():
    assert lower_camel_case("m3x6") == "m3x6"
    assert lower_camel_case("Lucida Console") == "lucidaConsole"
    assert lower_camel_case("lucida-console") == "lucidaConsole"
    assert lower_camel_case("PixelOperatorMono") == "pixelOperatorMono"
    assert lower_camel_case("IBM 3270") == "ibm3270"
    assert lower_camel_case("") == ""


def test_point_size_format():
    assert format_point_size(16.0) == "16"
    assert format_point_size(8.5) == "8.5"
    assert symbol_prefix("m3x6", 16.0) == "m3x6_16pt"


def test_sections_in_order():
    source = render_c_source(compiled(), "Test Font", 8)

    bitmaps = source.index("const unsigned char testFont_8ptBitmaps[] = {")
    descriptors = source.index("const FontCharInfo testFont_8ptDescriptors[] = {")
    record = source.index("const Font testFont_8ptFont = {")
    assert source.startswith("#include <font.h>\n")
    assert bitmaps < descriptors < record
    assert "// Character bitmaps for Test Font 8pt" in source


def test_glyph_block_annotations():
    source = render_c_source(compiled(), "Test Font", 8)
    lines = source.splitlines()

    start = lines.index("    // @65 'A' (6 pixels wide)")
    assert lines[start + 1] == "    0x00,  //"
    assert lines[start + 2] == "    0x1f,  // #####"
    assert lines[start + 7] == "    0x1f,  // #####"
    assert lines[start + 8] == ""
    assert lines[start + 9] == "    // @66 'B' (4 pixels wide)"


def test_descriptor_pairs():
    table = compiled()
    source = render_c_source(table, "Test Font", 8)

    assert "    { 3, 0 },  // ' '" in source
    assert f"    {{ 6, {7 * 33} }},  // 'A'" in source
    assert "    { 4, 658 },  // '~'" in source


def test_font_record():
    source = render_c_source(compiled(), "Test Font", 8)
    record = source[source.index("const Font testFont_8ptFont"):]

    assert "    7,  //  Character height" in record
    assert "    ' ',  //  Start character" in record
    assert "    '~',  //  End character" in record
    assert "testFont_8ptDescriptors,  //  Character descriptor array" in record
    assert "testFont_8ptBitmaps,  //  Character bitmap array" in record
    assert record.rstrip().endswith("};")


def test_no_trailing_whitespace():
    source = render_c_source(compiled(), "Test Font", 8)
    assert all(line == line.rstrip() for line in source.splitlines())


def test_header_declares_symbols():
    header = render_c_header("m3x6", 16)

    assert header.startswith("#ifndef M3X6_16PT_H_\n#define M3X6_16PT_H_\n")
    assert "extern const unsigned char m3x6_16ptBitmaps[];" in header
    assert "extern const Font m3x6_16ptFont;" in header
    assert "extern const FontCharInfo m3x6_16ptDescriptors[];" in header
    assert header.rstrip().endswith("#endif /* M3X6_16PT_H_ */")


def test_include_guard_without_name():
    assert include_guard("", 16) == "FONT_16PT_H_"
    assert include_guard("Big Font", 12.5) == "BIGFONT_12_5PT_H_"
