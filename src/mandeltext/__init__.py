"""mandeltext: text-mode Mandelbrot set explorer."""

from __future__ import annotations

from mandeltext.config import (
    DEFAULT_CONFIG,
    DEFAULT_TOUR,
    RenderConfig,
    Tour,
    TourStop,
    View,
    load_config,
)
from mandeltext.mandelbrot import Color, escape_time, get_color, in_set, pixel_to_complex
from mandeltext.render import render_frame, render_rows
from mandeltext.tour import run_tour

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_TOUR",
    "Color",
    "RenderConfig",
    "Tour",
    "TourStop",
    "View",
    "escape_time",
    "get_color",
    "in_set",
    "load_config",
    "pixel_to_complex",
    "render_frame",
    "render_rows",
    "run_tour",
]
