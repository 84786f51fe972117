from typing import Optional, Tuple

from config import get_active_params


class Viewport:
    """
    Logical terminal dimensions that every drawing call is bounds-checked
    against.

    Positions are 1-based and inclusive: (x, y) is valid iff
    1 <= x <= width and 1 <= y <= height. Width/height are not validated;
    a zero dimension simply makes every position out of bounds.

    A Viewport is owned by a Terminal session and read before every bounds
    check, so changing it mid-draw affects the remaining steps.
    """

    def __init__(self, width: Optional[int] = None, height: Optional[int] = None):
        params = get_active_params()
        self.width: int = params["VIEWPORT_WIDTH"] if width is None else width
        self.height: int = params["VIEWPORT_HEIGHT"] if height is None else height

    def set_viewport(self, width: int, height: int):
        self.width = width
        self.height = height

    def get_viewport(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def contains(self, x: int, y: int) -> bool:
        return 1 <= x <= self.width and 1 <= y <= self.height

    def __repr__(self):
        return f"Viewport(width={self.width}, height={self.height})"
