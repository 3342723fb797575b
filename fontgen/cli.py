"""Command-line entry point: compile a font file into a C font table."""

from __future__ import annotations

import argparse
import logging
import math
import sys
from pathlib import Path
from typing import List, Optional

from .compiler import compile_font, write_font
from .errors import FontgenError
from .glyph import END_CHAR, START_CHAR
from .preview import render_preview
from .rasterizer import PillowRasterizer

logger = logging.getLogger(__name__)


def positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not a number")
    if not math.isfinite(number) or number <= 0:
        raise argparse.ArgumentTypeError(f"font size must be a positive finite number, got {value}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="fontgen",
        description="Rasterize printable ASCII from a TTF/OTF font into a 1bpp C font table.",
    )
    parser.add_argument("font", help="Path to the TTF/OTF font file.")
    parser.add_argument(
        "--font-size",
        type=positive_float,
        default=16.0,
        help="Point size to rasterize at (default: 16).",
    )
    parser.add_argument(
        "--font-name",
        default="",
        help="Display name used in comments and symbol names.",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Write the C source here instead of stdout.",
    )
    parser.add_argument(
        "--header",
        type=Path,
        default=None,
        help="Also write a C header declaring the generated symbols.",
    )
    parser.add_argument(
        "--preview",
        metavar="TEXT",
        default=None,
        help="Print TEXT rendered with the compiled table to stderr.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log per-glyph details.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Compile the font; returns the process exit status."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if args.preview is not None:
        bad = sorted({c for c in args.preview if not START_CHAR <= ord(c) <= END_CHAR})
        if bad:
            logger.error(f"Preview text contains unsupported characters: {''.join(bad)!r}")
            return 1

    try:
        rasterizer = PillowRasterizer.from_path(args.font)
        table = compile_font(rasterizer, args.font_size)
        source = write_font(
            table,
            args.font_name,
            args.font_size,
            source_path=args.output,
            header_path=args.header,
        )
    except FontgenError as e:
        logger.error(str(e))
        return 1

    if args.output is None:
        sys.stdout.write(source)
        sys.stdout.flush()

    if args.preview is not None:
        print(render_preview(table, args.preview).to_text(), file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
