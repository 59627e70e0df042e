"""Render parameters and tour configuration.

A render is parameterized by two value objects:
- RenderConfig: pixel grid, iteration cap and escape radius
- View: zoom factor and pan offset for one frame

A Tour is a RenderConfig plus a sequence of labelled views, and can be
loaded from YAML.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path

import yaml


@dataclass(frozen=True)
class RenderConfig:
    """Fixed parameters shared by every frame of a render.

    Attributes:
        width: Number of pixel columns.
        height: Number of pixel rows.
        max_iterations: Iteration cap; reaching it means "presumed inside".
        escape_radius: Orbit magnitude beyond which a point has escaped.
    """

    width: int = 800
    height: int = 600
    max_iterations: int = 100
    escape_radius: float = 2.0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            msg = f"grid size must be positive, got {self.width}x{self.height}"
            raise ValueError(msg)
        if self.max_iterations < 0:
            msg = f"max_iterations must be >= 0, got {self.max_iterations}"
            raise ValueError(msg)
        if not (math.isfinite(self.escape_radius) and self.escape_radius > 0):
            msg = f"escape_radius must be a positive number, got {self.escape_radius!r}"
            raise ValueError(msg)


@dataclass(frozen=True)
class View:
    """Zoom and pan for one frame.

    Attributes:
        zoom: Divisor applied to the base [-2, 2] range. Must be non-zero.
        offset_x: Added to the real part after zooming.
        offset_y: Added to the imaginary part after zooming.
    """

    zoom: float = 1.0
    offset_x: float = 0.0
    offset_y: float = 0.0

    def __post_init__(self) -> None:
        if not math.isfinite(self.zoom) or self.zoom == 0:
            msg = f"zoom must be a finite non-zero number, got {self.zoom!r}"
            raise ValueError(msg)
        if not (math.isfinite(self.offset_x) and math.isfinite(self.offset_y)):
            msg = f"offsets must be finite, got ({self.offset_x!r}, {self.offset_y!r})"
            raise ValueError(msg)


@dataclass(frozen=True)
class TourStop:
    """A labelled view within a tour."""

    label: str
    view: View


@dataclass(frozen=True)
class Tour:
    """A render configuration and the views rendered with it, in order."""

    config: RenderConfig
    stops: tuple[TourStop, ...]


DEFAULT_CONFIG = RenderConfig()

DEFAULT_STOPS = (
    TourStop("Rendering default view...", View(1.0, 0.0, 0.0)),
    TourStop("Rendering a zoomed-in view...", View(30.0, -0.75, 0.0)),
)

DEFAULT_TOUR = Tour(config=DEFAULT_CONFIG, stops=DEFAULT_STOPS)


def _float_field(data: dict, key: str, default: float, source: Path | str) -> float:
    value = data.get(key, default)
    if isinstance(value, bool):
        msg = f"{source}: '{key}' must be a number, got {value!r}"
        raise ValueError(msg)
    try:
        return float(value)
    except (TypeError, ValueError):
        msg = f"{source}: '{key}' must be a number, got {value!r}"
        raise ValueError(msg) from None


def _int_field(data: dict, key: str, default: int, source: Path | str) -> int:
    value = data.get(key, default)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    msg = f"{source}: '{key}' must be an integer, got {value!r}"
    raise ValueError(msg)


def load_config(config_path: Path | str) -> Tour:
    """Load a tour from YAML.

    Every key is optional; missing grid settings fall back to the
    RenderConfig defaults and a missing `stops` list to the default tour.

    Args:
        config_path: Path to a YAML file.

    Returns:
        Tour built from the file.

    Raises:
        ValueError: If the document or one of its values is malformed.
    """
    with Path(config_path).open() as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        msg = f"{config_path}: expected a mapping at top level"
        raise ValueError(msg)

    defaults = DEFAULT_CONFIG
    config = RenderConfig(
        width=_int_field(data, "width", defaults.width, config_path),
        height=_int_field(data, "height", defaults.height, config_path),
        max_iterations=_int_field(
            data, "max_iterations", defaults.max_iterations, config_path
        ),
        escape_radius=_float_field(
            data, "escape_radius", defaults.escape_radius, config_path
        ),
    )

    if "stops" not in data:
        return Tour(config=config, stops=DEFAULT_STOPS)

    stops_data = data["stops"]
    if not isinstance(stops_data, list):
        msg = f"{config_path}: 'stops' must be a list"
        raise ValueError(msg)

    stops = []
    for index, stop_data in enumerate(stops_data):
        if not isinstance(stop_data, dict) or "label" not in stop_data:
            msg = f"{config_path}: stop #{index + 1} needs a 'label'"
            raise ValueError(msg)
        view = View(
            zoom=_float_field(stop_data, "zoom", 1.0, config_path),
            offset_x=_float_field(stop_data, "offset_x", 0.0, config_path),
            offset_y=_float_field(stop_data, "offset_y", 0.0, config_path),
        )
        stops.append(TourStop(label=str(stop_data["label"]), view=view))

    return Tour(config=config, stops=tuple(stops))
