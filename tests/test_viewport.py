"""
Tests for viewport bounds and cursor positioning.
"""

from __future__ import annotations

import io
from typing import Optional, get_type_hints

from hypothesis import given, strategies as st

from models.line import Line
from models.viewport import Viewport
from terminal.session import Terminal
from utils.errors import BoundaryError, CollectingErrorHandler


def test_default_viewport_is_80_by_24() -> None:
    assert Viewport().get_viewport() == (80, 24)


def test_optional_dimensions_are_annotated() -> None:
    viewport_hints = get_type_hints(Viewport.__init__)
    assert viewport_hints["width"] == Optional[int]
    assert viewport_hints["height"] == Optional[int]

    line_hints = get_type_hints(Line.__init__)
    for name in ("x", "y", "length"):
        assert line_hints[name] == Optional[int]


def test_set_viewport_replaces_bounds(term) -> None:
    term.set_viewport(40, 10)
    assert term.get_viewport() == (40, 10)
    assert term.viewport.contains(40, 10)
    assert not term.viewport.contains(41, 10)
    assert not term.viewport.contains(40, 11)


def test_positions_are_one_based() -> None:
    vp = Viewport(5, 5)
    assert vp.contains(1, 1)
    assert not vp.contains(0, 1)
    assert not vp.contains(1, 0)


def test_zero_viewport_rejects_everything() -> None:
    vp = Viewport(0, 0)
    assert not vp.contains(1, 1)
    assert not vp.contains(0, 0)


@given(
    width=st.integers(min_value=1, max_value=300),
    height=st.integers(min_value=1, max_value=120),
    x=st.integers(min_value=-5, max_value=320),
    y=st.integers(min_value=-5, max_value=140),
)
def test_cursor_move_succeeds_exactly_inside_viewport(width, height, x, y) -> None:
    out = io.StringIO()
    handler = CollectingErrorHandler()
    term = Terminal(stream=out, viewport=Viewport(width, height), error_handler=handler)

    ok = term.move_cursor_to(x, y)

    if 1 <= x <= width and 1 <= y <= height:
        assert ok
        assert out.getvalue() == f"\x1b[{y};{x}H"
        assert handler.errors == []
    else:
        assert not ok
        assert out.getvalue() == ""
        assert len(handler.errors) == 1
        assert isinstance(handler.errors[0], BoundaryError)
        assert handler.errors[0].position == (x, y)
