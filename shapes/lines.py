"""
Free-standing line primitives.

This module provides:
    • horizontal_line(terminal, x, y, size, style)
    • vertical_line(terminal, x, y, size, style)
    • diagonal_line(terminal, x, y, size, direction)
    • draw_line(terminal, glyph, x1, y1, x2, y2)       Bresenham segment
    • emit_horizontal / emit_vertical                 unchecked runs, shared
                                                      with the box composer

Every drawing call returns True when it ran to completion and False when
it was aborted (the error has already gone to the terminal's handler).
The one unreported False is diagonal_line given a cardinal direction,
which has nothing to draw. Failure is not atomic: glyphs emitted before
an abort stay on screen.
"""

from models.direction import Direction
from models.line import GEOMETRIC_DIAGONAL_GLYPHS
from utils.bresenham_utils import bres_line
from utils.glyphs import (
    HorizontalLineStyle,
    VerticalLineStyle,
    get_horizontal_line_char,
    get_vertical_line_char,
)


# -----------------------------------------------------------
#   Unchecked runs
# -----------------------------------------------------------

def emit_horizontal(terminal, x: int, y: int, count: int, glyph: str) -> bool:
    """count glyphs left-to-right from (x, y); no bounds checks."""
    if count <= 0:
        return True
    if not terminal.place(x, y, glyph):
        return False
    for _ in range(count - 1):
        if not terminal.put_char(glyph):
            return False
    return True


def emit_vertical(terminal, x: int, y: int, count: int, glyph: str) -> bool:
    """count glyphs top-to-bottom from (x, y); no bounds checks."""
    for i in range(count):
        if not terminal.place(x, y + i, glyph):
            return False
    return True


# -----------------------------------------------------------
#   Straight lines
# -----------------------------------------------------------

def horizontal_line(
    terminal,
    x: int,
    y: int,
    size: int,
    style: HorizontalLineStyle = HorizontalLineStyle.LIGHT,
) -> bool:
    """
    Draws size glyphs to the right of (x, y). Both the start and the last
    cell must be inside the viewport.
    """
    viewport = terminal.viewport
    if not viewport.contains(x, y):
        return terminal.report_boundary_error(
            "Line start position is outside viewport", (x, y)
        )
    if x + size - 1 > viewport.width:
        return terminal.report_boundary_error(
            "Line extends beyond viewport width", (x + size - 1, y)
        )

    return emit_horizontal(terminal, x, y, size, get_horizontal_line_char(style))


def vertical_line(
    terminal,
    x: int,
    y: int,
    size: int,
    style: VerticalLineStyle = VerticalLineStyle.LIGHT,
) -> bool:
    """
    Draws size glyphs downward from (x, y). Both the start and the last
    cell must be inside the viewport.
    """
    viewport = terminal.viewport
    if not viewport.contains(x, y):
        return terminal.report_boundary_error(
            "Line start position is outside viewport", (x, y)
        )
    if y + size - 1 > viewport.height:
        return terminal.report_boundary_error(
            "Line extends beyond viewport height", (x, y + size - 1)
        )

    return emit_vertical(terminal, x, y, size, get_vertical_line_char(style))


# -----------------------------------------------------------
#   Directional diagonal
# -----------------------------------------------------------

def diagonal_line(terminal, x: int, y: int, size: int, direction: Direction) -> bool:
    """
    Unit-step diagonal run of size glyphs from (x, y). The glyph follows
    the slope of the run: ╱ for NORTH_EAST and SOUTH_WEST, ╲ for
    NORTH_WEST and SOUTH_EAST.

    Cardinal directions draw nothing and return False without a report.
    The run aborts with a BoundaryError at the first step that leaves the
    viewport.
    """
    if not direction.is_diagonal:
        return False

    viewport = terminal.viewport
    if not viewport.contains(x, y):
        return terminal.report_boundary_error(
            "Line start position is outside viewport", (x, y)
        )

    glyph = GEOMETRIC_DIAGONAL_GLYPHS[direction]
    for i in range(size):
        nx, ny = direction.step(x, y, i)
        if not viewport.contains(nx, ny):
            return terminal.report_boundary_error(
                "Line extends beyond viewport", (nx, ny)
            )
        if not terminal.place(nx, ny, glyph):
            return False
    return True


# -----------------------------------------------------------
#   Two-point segment (Bresenham)
# -----------------------------------------------------------

def draw_line(terminal, glyph: str, x1: int, y1: int, x2: int, y2: int) -> bool:
    """
    Draws glyph on every Bresenham point from (x1, y1) to (x2, y2).

    Both endpoints must be inside the viewport when the call starts,
    otherwise nothing is drawn. Each rasterized point is then checked
    against the viewport as it is at that moment; points outside it are
    skipped without error and the rest of the segment is still drawn.
    """
    viewport = terminal.viewport
    if not (viewport.contains(x1, y1) and viewport.contains(x2, y2)):
        return terminal.report_boundary_error(
            "Line coordinates are outside viewport", ((x1, y1), (x2, y2))
        )

    for x, y in bres_line(x1, y1, x2, y2):
        if not terminal.viewport.contains(x, y):
            continue
        if not terminal.place(x, y, glyph):
            return False
    return True
