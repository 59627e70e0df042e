"""Command-line interface.

Provides the `mandeltext` command. Without a subcommand it runs the default
tour. Subcommands:
- tour: run the default tour or one loaded from YAML
- render: print a single frame
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

import yaml

from mandeltext.config import DEFAULT_CONFIG, DEFAULT_TOUR, RenderConfig, View, load_config
from mandeltext.render import render_frame
from mandeltext.tour import run_tour


def _error(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1


def _view_and_config(args: argparse.Namespace) -> tuple[View, RenderConfig]:
    view = View(zoom=args.zoom, offset_x=args.offset_x, offset_y=args.offset_y)
    config = RenderConfig(
        width=args.width,
        height=args.height,
        max_iterations=args.max_iterations,
        escape_radius=DEFAULT_CONFIG.escape_radius,
    )
    return view, config


def cmd_tour(args: argparse.Namespace) -> int:
    """Run a tour."""
    tour = DEFAULT_TOUR
    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            return _error(f"Tour configuration not found: {config_path}")
        try:
            tour = load_config(config_path)
        except (OSError, yaml.YAMLError, ValueError) as e:
            return _error(f"loading tour configuration: {e}")

    run_tour(tour, out=sys.stdout, color=args.color)
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    """Render a single frame."""
    try:
        view, config = _view_and_config(args)
    except ValueError as e:
        return _error(str(e))

    render_frame(view, config, out=sys.stdout, color=args.color)
    return 0


def _add_view_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--zoom",
        type=float,
        default=1.0,
        help="Zoom factor, non-zero (default: 1.0)",
    )
    parser.add_argument(
        "--offset-x",
        type=float,
        default=0.0,
        help="Horizontal pan added to the real part (default: 0.0)",
    )
    parser.add_argument(
        "--offset-y",
        type=float,
        default=0.0,
        help="Vertical pan added to the imaginary part (default: 0.0)",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=DEFAULT_CONFIG.width,
        help=f"Columns per row (default: {DEFAULT_CONFIG.width})",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=DEFAULT_CONFIG.height,
        help=f"Number of rows (default: {DEFAULT_CONFIG.height})",
    )
    parser.add_argument(
        "--max-iterations",
        type=int,
        default=DEFAULT_CONFIG.max_iterations,
        help=f"Iteration cap (default: {DEFAULT_CONFIG.max_iterations})",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="mandeltext",
        description="Text-mode Mandelbrot set explorer",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # tour command
    tour_parser = subparsers.add_parser("tour", help="Run the explorer tour")
    tour_parser.add_argument(
        "--config",
        help="Path to a tour YAML file (default: built-in tour)",
    )
    tour_parser.add_argument(
        "--color",
        action="store_true",
        help="Color escaped points with ANSI escape codes",
    )
    tour_parser.set_defaults(func=cmd_tour)

    # render command
    render_parser = subparsers.add_parser("render", help="Render a single frame")
    _add_view_arguments(render_parser)
    render_parser.add_argument(
        "--color",
        action="store_true",
        help="Color escaped points with ANSI escape codes",
    )
    render_parser.set_defaults(func=cmd_render)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        run_tour(DEFAULT_TOUR, out=sys.stdout)
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
