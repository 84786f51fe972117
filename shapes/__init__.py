"""
Shape Drawing

Contains the composite drawing routines:
- Straight, diagonal and Bresenham lines
- Boxes, shaded rectangles and region erase
- Circle outlines
"""

from .lines import horizontal_line, vertical_line, diagonal_line, draw_line
from .boxes import draw_box, draw_shaded_rectangle, hide_box
from .circles import draw_circle, circle_points

__all__ = [
    "horizontal_line",
    "vertical_line",
    "diagonal_line",
    "draw_line",
    "draw_box",
    "draw_shaded_rectangle",
    "hide_box",
    "draw_circle",
    "circle_points",
]
