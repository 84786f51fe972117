"""
Bresenham rasterization helpers.

This module provides:
    • bres_line(x1, y1, x2, y2)   lazy generator, integer-only 8-connected line
    • bres_circle(cx, cy, r)      outline points, via the pybresenham library

Coordinates are plain (x, y) integer tuples; no viewport logic lives here.
"""

from typing import Iterator, List, Tuple

import pybresenham as bres


# -----------------------------------------------------------
#   Line rasterizer
# -----------------------------------------------------------

def bres_line(x1: int, y1: int, x2: int, y2: int) -> Iterator[Tuple[int, int]]:
    """
    Yields the grid points from (x1, y1) to (x2, y2) inclusive.

    Standard error-accumulating form:

        dx = |x2 - x1|,  dy = -|y2 - y1|,  err = dx + dy
        e2 = 2 * err
        e2 >= dy  → step x
        e2 <= dx  → step y

    Every point is produced exactly once. The generator is single-use.
    """
    dx = abs(x2 - x1)
    dy = -abs(y2 - y1)
    sx = 1 if x1 < x2 else -1
    sy = 1 if y1 < y2 else -1
    err = dx + dy

    x, y = x1, y1
    while True:
        yield (x, y)
        if x == x2 and y == y2:
            return

        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy


# -----------------------------------------------------------
#   Circle wrapper
# -----------------------------------------------------------

def bres_circle(cx: int, cy: int, r: int) -> List[Tuple[int, int]]:
    """
    Returns the integer outline points of a circle, in the order produced
    by pybresenham, with duplicates removed.
    """
    if r < 0:
        return []
    if r == 0:
        return [(cx, cy)]

    seen = set()
    points = []
    for x, y in bres.circle(cx, cy, r):
        pt = (int(x), int(y))
        if pt in seen:
            continue
        seen.add(pt)
        points.append(pt)
    return points
