"""Integration tests rendering full-size frames.

These render the default 800x600 grid and are the slowest tests in the suite.
"""

from __future__ import annotations

import pytest

from mandeltext.config import DEFAULT_CONFIG, View
from mandeltext.render import render_rows


@pytest.fixture(scope="module")
def full_view_rows() -> list[str]:
    return list(render_rows(View(1.0, 0.0, 0.0), DEFAULT_CONFIG))


class TestFullView:
    """The zoom=1.0, offset=(0, 0) frame."""

    def test_dimensions(self, full_view_rows: list[str]) -> None:
        assert len(full_view_rows) == DEFAULT_CONFIG.height
        assert all(len(row) == DEFAULT_CONFIG.width for row in full_view_rows)

    def test_alphabet(self, full_view_rows: list[str]) -> None:
        glyphs = set().union(*full_view_rows)
        assert glyphs == {" ", "*"}

    def test_center_inside(self, full_view_rows: list[str]) -> None:
        center = full_view_rows[DEFAULT_CONFIG.height // 2][DEFAULT_CONFIG.width // 2]
        assert center == " "

    def test_corners_outside(self, full_view_rows: list[str]) -> None:
        assert full_view_rows[0][0] == "*"
        assert full_view_rows[-1][-1] == "*"

    def test_idempotent(self, full_view_rows: list[str]) -> None:
        assert list(render_rows(View(1.0, 0.0, 0.0), DEFAULT_CONFIG)) == full_view_rows


class TestZoomedView:
    """The zoom=30, offset=(-0.75, 0) frame."""

    def test_dimensions_and_both_glyphs(self) -> None:
        rows = list(render_rows(View(30.0, -0.75, 0.0), DEFAULT_CONFIG))

        assert len(rows) == DEFAULT_CONFIG.height
        assert all(len(row) == DEFAULT_CONFIG.width for row in rows)
        assert set().union(*rows) == {" ", "*"}
