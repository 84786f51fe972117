from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union

from config import get_active_params
from models.direction import Direction
from models.shape import Shape
from utils.glyphs import (
    CircleSymbol,
    DiagonalLineStyle,
    HorizontalLineStyle,
    StarSymbol,
    VerticalLineStyle,
    circle_symbol_to_char,
    get_diagonal_line_char,
    get_horizontal_line_char,
    get_vertical_line_char,
    star_symbol_to_char,
)


# ------------------------------------------------------------
# Diagonal glyph mappings
# ------------------------------------------------------------

FORWARD = get_diagonal_line_char(DiagonalLineStyle.FORWARD_DIAGONAL)     # ╱
BACKWARD = get_diagonal_line_char(DiagonalLineStyle.BACKWARD_DIAGONAL)   # ╲

# Historical mapping: only NW gets the forward glyph.
REFERENCE_DIAGONAL_GLYPHS = {
    Direction.NORTH_WEST: FORWARD,
    Direction.NORTH_EAST: BACKWARD,
    Direction.SOUTH_WEST: BACKWARD,
    Direction.SOUTH_EAST: BACKWARD,
}

# Slope-matching mapping: rising lines ╱, falling lines ╲.
GEOMETRIC_DIAGONAL_GLYPHS = {
    Direction.NORTH_EAST: FORWARD,
    Direction.SOUTH_WEST: FORWARD,
    Direction.NORTH_WEST: BACKWARD,
    Direction.SOUTH_EAST: BACKWARD,
}


class DiagonalMapping(Enum):
    REFERENCE = "reference"
    GEOMETRIC = "geometric"

    @property
    def glyphs(self):
        if self is DiagonalMapping.GEOMETRIC:
            return GEOMETRIC_DIAGONAL_GLYPHS
        return REFERENCE_DIAGONAL_GLYPHS


# ------------------------------------------------------------
# Vertex & line styles
# ------------------------------------------------------------

@dataclass(frozen=True)
class VertexStyle:
    """
    Glyph substituted at a line end: Star(symbol), Circle(symbol) or Blank.
    """

    kind: str = "blank"
    symbol: Optional[Union[StarSymbol, CircleSymbol]] = None

    @classmethod
    def star(cls, symbol: StarSymbol) -> "VertexStyle":
        return cls("star", symbol)

    @classmethod
    def circle(cls, symbol: CircleSymbol) -> "VertexStyle":
        return cls("circle", symbol)

    @classmethod
    def blank(cls) -> "VertexStyle":
        return cls("blank")

    def glyph(self) -> str:
        match self.kind:
            case "star":
                return star_symbol_to_char(self.symbol)
            case "circle":
                return circle_symbol_to_char(self.symbol)
            case _:
                return " "


def _filled_circle() -> VertexStyle:
    return VertexStyle.circle(CircleSymbol.FILLED_CIRCLE)


@dataclass
class LineStyle:
    """
    Everything that decides which glyph lands where:

      horizontal / vertical   glyph tables for E/W and N/S
      diagonal                False → diagonal directions draw nothing
      start_vertex/end_vertex glyphs substituted at the two ends
      *_vertex_enabled        per-end substitution switches
      diagonal_glyphs         which direction → ╱/╲ mapping to use
    """

    horizontal: HorizontalLineStyle = HorizontalLineStyle.LIGHT
    vertical: VerticalLineStyle = VerticalLineStyle.LIGHT
    diagonal: bool = True
    start_vertex: VertexStyle = field(default_factory=_filled_circle)
    end_vertex: VertexStyle = field(default_factory=_filled_circle)
    start_vertex_enabled: bool = True
    end_vertex_enabled: bool = True
    diagonal_glyphs: DiagonalMapping = DiagonalMapping.REFERENCE

    def line_glyph(self, direction: Direction) -> Optional[str]:
        if direction.is_horizontal:
            return get_horizontal_line_char(self.horizontal)
        if direction.is_vertical:
            return get_vertical_line_char(self.vertical)
        if not self.diagonal:
            return None
        return self.diagonal_glyphs.glyphs[direction]


# ------------------------------------------------------------
# Line
# ------------------------------------------------------------

class Line(Shape):
    """
    Direction-based line, drawn by unit-stepping a cursor `length` times
    from its origin.

    Supports:
      - 8 directions (cardinal: one axis moves; diagonal: both move)
      - per-end vertex glyph substitution
      - show / hide / move_to; fields may be changed between draws and
        every draw reads them at call time
      - steps outside the terminal's current viewport are skipped
    """

    def __init__(
        self,
        terminal,
        x: Optional[int] = None,
        y: Optional[int] = None,
        length: Optional[int] = None,
        style: Optional[LineStyle] = None,
        direction: Direction = Direction.EAST,
    ):
        params = get_active_params()
        origin_x, origin_y = params["LINE_ORIGIN"]

        self.terminal = terminal
        self.x: int = origin_x if x is None else x
        self.y: int = origin_y if y is None else y
        self.length: int = params["LINE_LENGTH"] if length is None else length
        self.style: LineStyle = style if style is not None else LineStyle()
        self.direction: Direction = direction

        self.blank: str = params["BLANK_GLYPH"]

    # ------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------
    @property
    def origin(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def end(self) -> Tuple[int, int]:
        """Position of the last step (equal to origin for length <= 1)."""
        return self.direction.step(self.x, self.y, max(self.length - 1, 0))

    def points(self) -> List[Tuple[int, int]]:
        """Every step position, in drawing order, unclipped."""
        return [self.direction.step(self.x, self.y, i) for i in range(self.length)]

    # ------------------------------------------------------------
    # Glyph resolution
    # ------------------------------------------------------------
    def glyph_for_step(self, i: int, visible: bool = True) -> str:
        """
        Glyph drawn at step i. The start vertex wins over the end vertex
        when both apply (length 1).
        """
        style = self.style
        if i == 0 and style.start_vertex_enabled:
            return style.start_vertex.glyph() if visible else self.blank
        if i == self.length - 1 and style.end_vertex_enabled:
            return style.end_vertex.glyph() if visible else self.blank
        if not visible:
            return self.blank
        return style.line_glyph(self.direction)

    def glyphs(self, visible: bool = True) -> List[Tuple[Tuple[int, int], str]]:
        """
        (position, glyph) pairs for one pass; empty when the direction is
        diagonal and diagonal rendering is disabled.
        """
        if self.style.line_glyph(self.direction) is None:
            return []
        return [
            (pos, self.glyph_for_step(i, visible))
            for i, pos in enumerate(self.points())
        ]

    # ------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------
    def draw(self, visible: bool = True) -> int:
        """
        One full rasterization pass. Returns the number of glyphs emitted.
        Stops early if the terminal reports a write failure.
        """
        viewport = self.terminal.viewport
        emitted = 0
        for (x, y), glyph in self.glyphs(visible):
            if not viewport.contains(x, y):
                continue
            if not self.terminal.place(x, y, glyph):
                break
            emitted += 1
        return emitted

    def show(self, duration: Optional[float] = None):
        """
        Draw the line. With a duration (seconds) block for that long,
        then erase it.
        """
        self.draw(True)
        if duration is not None:
            self.terminal.wait_for_seconds(duration)
            self.hide()

    def hide(self):
        self.draw(False)

    def move_to(self, x: int, y: int):
        self.x = x
        self.y = y

    # ------------------------------------------------------------
    # Repr
    # ------------------------------------------------------------
    def __repr__(self):
        return (
            f"Line(origin={self.origin}, length={self.length}, "
            f"direction={self.direction.name})"
        )
