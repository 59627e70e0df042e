"""Per-pixel Mandelbrot math: coordinate mapping, escape time, coloring."""

from __future__ import annotations

from typing import NamedTuple

from mandeltext.config import DEFAULT_CONFIG, RenderConfig, View


class Color(NamedTuple):
    r: int
    g: int
    b: int


BLACK = Color(0, 0, 0)


def pixel_to_complex(
    x: int, y: int, view: View, config: RenderConfig = DEFAULT_CONFIG
) -> complex:
    """Map a pixel to a point in the complex plane.

    Both axes are first spread over [-2, 2] across the grid, then divided by
    the zoom and shifted by the view offset.

    Args:
        x: Pixel column.
        y: Pixel row.
        view: Zoom and pan.
        config: Grid dimensions.

    Returns:
        The complex coordinate of the pixel.
    """
    real = (x / config.width * 4.0 - 2.0) / view.zoom + view.offset_x
    imag = (y / config.height * 4.0 - 2.0) / view.zoom + view.offset_y
    return complex(real, imag)


def escape_time(c: complex, config: RenderConfig = DEFAULT_CONFIG) -> int:
    """Count iterations of z = z*z + c before |z| exceeds the escape radius.

    Args:
        c: The point to test.
        config: Iteration cap and escape radius.

    Returns:
        The 0-based index of the iteration whose result escaped, or
        config.max_iterations if the orbit stayed bounded.
    """
    z = 0j
    for i in range(config.max_iterations):
        z = z * z + c
        if abs(z) > config.escape_radius:
            return i
    return config.max_iterations


def in_set(c: complex, config: RenderConfig = DEFAULT_CONFIG) -> bool:
    """Whether c is presumed inside the set at this iteration cap."""
    return escape_time(c, config) == config.max_iterations


def get_color(iterations: int, config: RenderConfig = DEFAULT_CONFIG) -> Color:
    """Pick an RGB color for an escape time.

    Points that never escaped are black. Escaped points get a banded ramp:
    red is (iterations * 10) mod 256, green half of it, blue a quarter.
    """
    if iterations == config.max_iterations:
        return BLACK
    hue = (iterations * 10) % 256
    return Color(hue, hue // 2, hue // 4)
