"""The explorer walkthrough: a banner, each labelled frame, a farewell."""

from __future__ import annotations

import sys
from typing import TextIO

from mandeltext.config import DEFAULT_TOUR, Tour
from mandeltext.render import render_frame

BANNER = (
    "Welcome to the Mandelbrot Fractal Explorer Tutorial!\n"
    "This program will generate a textual representation of the Mandelbrot set.\n"
    "Pay attention to the comments explaining complex numbers and the iteration process.\n"
)

FAREWELL = "Tutorial finished. Happy exploring!\n"


def run_tour(
    tour: Tour = DEFAULT_TOUR, out: TextIO | None = None, color: bool = False
) -> None:
    """Render every stop of a tour, separated by blank lines.

    Args:
        tour: Render configuration and labelled views.
        out: Output stream (default: stdout).
        color: Render escaped pixels with ANSI colors.
    """
    if out is None:
        out = sys.stdout

    out.write(BANNER)
    out.write("\n")

    for index, stop in enumerate(tour.stops):
        if index > 0:
            out.write("\n")
        out.write(f"{stop.label}\n")
        render_frame(stop.view, tour.config, out=out, color=color)

    out.write("\n")
    out.write(FAREWELL)
