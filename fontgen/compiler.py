"""Two-phase pipeline: compile a FontTable, then write it out."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from .emitter import render_c_header, render_c_source
from .errors import OutputWriteFailure
from .frame import compute_frame
from .rasterizer import Rasterizer, rasterize_printable_ascii
from .table import FontTable, build_font_table

logger = logging.getLogger(__name__)


def compile_font(rasterizer: Rasterizer, point_size: float) -> FontTable:
    """
    Rasterize, validate and pack the printable ASCII range.

    Pure apart from calling the rasterizer. Any FontgenError raised here
    means nothing should be written.
    """
    rasterizations = rasterize_printable_ascii(rasterizer, point_size)
    frame = compute_frame(
        [r.metrics for r in rasterizations],
        [r.character for r in rasterizations],
    )
    return build_font_table(rasterizations, frame)


def _stage(path: Path, text: str) -> Path:
    """Write text to a temporary file next to path."""
    f = tempfile.NamedTemporaryFile(
        "w", dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
    )
    try:
        with f:
            f.write(text)
    except OSError:
        os.unlink(f.name)
        raise
    return Path(f.name)


def write_font(
    table: FontTable,
    font_name: str,
    point_size: float,
    source_path: Optional[Path] = None,
    header_path: Optional[Path] = None,
) -> str:
    """
    Render and write the C source (and optionally its header).

    Both texts are rendered and staged in temporary files before either
    target is replaced, so a failed write leaves no output behind.
    Returns the C source so callers can print it when no source_path
    is given.

    Raises:
        OutputWriteFailure: If either file cannot be written
    """
    source = render_c_source(table, font_name, point_size)
    outputs = []
    if source_path is not None:
        outputs.append((Path(source_path), source))
    if header_path is not None:
        outputs.append((Path(header_path), render_c_header(font_name, point_size)))

    staged = []
    try:
        for path, text in outputs:
            staged.append((_stage(path, text), path))
        for temp_path, path in staged:
            os.replace(temp_path, path)
            logger.info(f"Wrote {path}")
    except OSError as e:
        for temp_path, _ in staged:
            temp_path.unlink(missing_ok=True)
        raise OutputWriteFailure(f"Cannot write output: {e}") from e
    return source
