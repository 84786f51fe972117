"""
Box / rectangle composer.

This module provides:
    • draw_box(terminal, x, y, width, height, style)
    • draw_shaded_rectangle(terminal, x, y, width, height, shade)
    • hide_box(terminal, x, y, width, height)

All three reject a region whose far edge passes the viewport
(x + width > W or y + height > H) before writing anything. After that
check the glyphs are emitted with unchecked positioned writes.
"""

from shapes.lines import emit_horizontal, emit_vertical
from utils.glyphs import BoxStyle, ShadeStyle, get_edge_glyph_set, get_shade_char


# -------------------------------------------------------------------------
#  EXTENT CHECK
# -------------------------------------------------------------------------

def _check_extent(terminal, x: int, y: int, width: int, height: int, what: str) -> bool:
    viewport = terminal.viewport
    if x + width > viewport.width or y + height > viewport.height:
        return terminal.report_boundary_error(
            f"{what} extends beyond viewport", (x, y, width, height)
        )
    return True


def _fill(terminal, x: int, y: int, width: int, height: int, glyph: str) -> bool:
    for dy in range(height):
        if not emit_horizontal(terminal, x, y + dy, width, glyph):
            return False
    return True


# -------------------------------------------------------------------------
#  OUTLINED BOX
# -------------------------------------------------------------------------

def draw_box(
    terminal,
    x: int,
    y: int,
    width: int,
    height: int,
    style: BoxStyle = BoxStyle.SINGLE,
) -> bool:
    """
    Draws a rectangle outline:

        top / bottom edges    width - 2 glyphs starting at x + 1
        left / right edges    height - 2 glyphs starting at y + 1
        four corners          drawn last, over the edge ends

    A box needs at least 2×2 cells; smaller sizes are reported as a
    BoundaryError instead of producing negative edge lengths.
    """
    if not _check_extent(terminal, x, y, width, height, "Box"):
        return False
    if width < 2 or height < 2:
        return terminal.report_boundary_error(
            f"Box must be at least 2x2, got {width}x{height}", (x, y, width, height)
        )

    glyphs = get_edge_glyph_set(style)
    right = x + width - 1
    bottom = y + height - 1

    # edges
    edges_ok = (
        emit_horizontal(terminal, x + 1, y, width - 2, glyphs.horizontal)
        and emit_horizontal(terminal, x + 1, bottom, width - 2, glyphs.horizontal)
        and emit_vertical(terminal, x, y + 1, height - 2, glyphs.vertical)
        and emit_vertical(terminal, right, y + 1, height - 2, glyphs.vertical)
    )
    if not edges_ok:
        return False

    # corners
    corners = zip(
        ((x, y), (right, y), (x, bottom), (right, bottom)),
        glyphs.corners(),
    )
    for (cx, cy), glyph in corners:
        if not terminal.place(cx, cy, glyph):
            return False
    return True


# -------------------------------------------------------------------------
#  FILLED REGIONS
# -------------------------------------------------------------------------

def draw_shaded_rectangle(
    terminal,
    x: int,
    y: int,
    width: int,
    height: int,
    shade: ShadeStyle = ShadeStyle.SOLID,
) -> bool:
    """Fills the whole width × height region with one shade glyph."""
    if not _check_extent(terminal, x, y, width, height, "Rectangle"):
        return False
    return _fill(terminal, x, y, width, height, get_shade_char(shade))


def hide_box(terminal, x: int, y: int, width: int, height: int) -> bool:
    """
    Overwrites the whole region with spaces, interior included.
    """
    if not _check_extent(terminal, x, y, width, height, "Box"):
        return False
    return _fill(terminal, x, y, width, height, " ")
