"""Frame rendering to a text stream.

Rows are produced one at a time, top to bottom, each scanned left to right.
Only the row being built is held in memory.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import TextIO

from mandeltext.config import DEFAULT_CONFIG, RenderConfig, View
from mandeltext.mandelbrot import Color, escape_time, get_color, pixel_to_complex

INSIDE_GLYPH = " "
OUTSIDE_GLYPH = "*"

ANSI_RESET = "\033[0m"


def ansi_foreground(color: Color) -> str:
    """24-bit ANSI escape that sets the foreground color."""
    return f"\033[38;2;{color.r};{color.g};{color.b}m"


def glyph_for(iterations: int, config: RenderConfig = DEFAULT_CONFIG) -> str:
    """Character for a pixel: blank inside the set, asterisk outside."""
    if iterations == config.max_iterations:
        return INSIDE_GLYPH
    return OUTSIDE_GLYPH


def render_rows(
    view: View, config: RenderConfig = DEFAULT_CONFIG, color: bool = False
) -> Iterator[str]:
    """Yield the rows of one frame, without line terminators.

    Args:
        view: Zoom and pan for the frame.
        config: Grid size, iteration cap and escape radius.
        color: Prefix escaped pixels with their ANSI color and end each row
            with a reset. Plain rows are exactly config.width characters.

    Yields:
        One string per pixel row.
    """
    for y in range(config.height):
        cells = []
        for x in range(config.width):
            c = pixel_to_complex(x, y, view, config)
            iterations = escape_time(c, config)
            glyph = glyph_for(iterations, config)
            if color and glyph == OUTSIDE_GLYPH:
                cells.append(ansi_foreground(get_color(iterations, config)) + glyph)
            else:
                cells.append(glyph)
        if color:
            cells.append(ANSI_RESET)
        yield "".join(cells)


def render_frame(
    view: View,
    config: RenderConfig = DEFAULT_CONFIG,
    out: TextIO | None = None,
    color: bool = False,
) -> None:
    """Write one frame to `out` (stdout by default), one line per pixel row."""
    if out is None:
        out = sys.stdout
    for row in render_rows(view, config, color=color):
        out.write(row)
        out.write("\n")
