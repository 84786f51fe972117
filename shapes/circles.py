"""
Circle outlines on the character grid.

This module provides:
    • circle_points(cx, cy, radius)
    • draw_circle(terminal, glyph, cx, cy, radius)
"""

from typing import List, Tuple

from utils.bresenham_utils import bres_circle


def circle_points(cx: int, cy: int, radius: int) -> List[Tuple[int, int]]:
    """
    Outline cells of a circle, sorted row-major so the output is
    drawn top-to-bottom.
    """
    return sorted(bres_circle(cx, cy, radius), key=lambda p: (p[1], p[0]))


def draw_circle(terminal, glyph: str, cx: int, cy: int, radius: int) -> bool:
    """
    Draws the outline of a circle centred on (cx, cy).

    The centre must be inside the viewport; outline cells that fall
    outside it are skipped, the same leniency as draw_line.
    """
    if not terminal.viewport.contains(cx, cy):
        return terminal.report_boundary_error(
            "Circle centre is outside viewport", (cx, cy)
        )

    for x, y in circle_points(cx, cy, radius):
        if not terminal.viewport.contains(x, y):
            continue
        if not terminal.place(x, y, glyph):
            return False
    return True
