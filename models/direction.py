from enum import Enum
from typing import Tuple


class Direction(Enum):
    """
    The eight compass directions a Line can be drawn in.

    Each value is the per-step (dx, dy) delta on screen, where y grows
    downward: cardinal directions move one axis by 1, diagonal directions
    move both axes at once.
    """

    NORTH = (0, -1)
    SOUTH = (0, 1)
    EAST = (1, 0)
    WEST = (-1, 0)
    NORTH_EAST = (1, -1)
    NORTH_WEST = (-1, -1)
    SOUTH_EAST = (1, 1)
    SOUTH_WEST = (-1, 1)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.EAST, Direction.WEST)

    @property
    def is_vertical(self) -> bool:
        return self in (Direction.NORTH, Direction.SOUTH)

    @property
    def is_diagonal(self) -> bool:
        dx, dy = self.value
        return dx != 0 and dy != 0

    def step(self, x: int, y: int, n: int = 1) -> Tuple[int, int]:
        """Position reached after n unit steps from (x, y)."""
        dx, dy = self.value
        return (x + dx * n, y + dy * n)
