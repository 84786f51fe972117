"""
Glyph tables used by the line and shape engine.

This module provides:
    • HorizontalLineStyle / VerticalLineStyle / DiagonalLineStyle + lookups
    • BlockChar, ShadeStyle + lookups
    • CircleSymbol, StarSymbol (vertex markers) + lookups
    • GlyphSet records and BoxStyle → GlyphSet table
    • get_box_glyph(style, part), get_corner_glyph(style, corner)

Every lookup is a pure dictionary access.
"""

from enum import Enum, auto
from typing import NamedTuple, Optional, Union


# -------------------------------------------------------------------------
#  STRAIGHT LINE STYLES
# -------------------------------------------------------------------------

class HorizontalLineStyle(Enum):
    LIGHT = auto()
    HEAVY = auto()
    DOUBLE = auto()
    LIGHT_TRIPLE_DASH = auto()
    HEAVY_TRIPLE_DASH = auto()
    LIGHT_QUADRUPLE_DASH = auto()
    HEAVY_QUADRUPLE_DASH = auto()
    DOTTED = auto()
    LIGHT_DOUBLE_DASH = auto()
    HEAVY_DOUBLE_DASH = auto()
    WAVY = auto()
    SPACE = auto()


HORIZONTAL_LINE_CHARS = {
    HorizontalLineStyle.LIGHT: "─",
    HorizontalLineStyle.HEAVY: "━",
    HorizontalLineStyle.DOUBLE: "═",
    HorizontalLineStyle.LIGHT_TRIPLE_DASH: "┄",
    HorizontalLineStyle.HEAVY_TRIPLE_DASH: "┅",
    HorizontalLineStyle.LIGHT_QUADRUPLE_DASH: "┈",
    HorizontalLineStyle.HEAVY_QUADRUPLE_DASH: "┉",
    HorizontalLineStyle.DOTTED: "·",
    HorizontalLineStyle.LIGHT_DOUBLE_DASH: "╌",
    HorizontalLineStyle.HEAVY_DOUBLE_DASH: "╍",
    HorizontalLineStyle.WAVY: "﹉",
    HorizontalLineStyle.SPACE: " ",
}


class VerticalLineStyle(Enum):
    LIGHT = auto()
    HEAVY = auto()
    DOUBLE = auto()
    LIGHT_TRIPLE_DASH = auto()
    HEAVY_TRIPLE_DASH = auto()
    LIGHT_QUADRUPLE_DASH = auto()
    HEAVY_QUADRUPLE_DASH = auto()
    DOTTED = auto()
    LIGHT_DOUBLE_DASH = auto()
    HEAVY_DOUBLE_DASH = auto()
    SPACE = auto()


VERTICAL_LINE_CHARS = {
    VerticalLineStyle.LIGHT: "│",
    VerticalLineStyle.HEAVY: "┃",
    VerticalLineStyle.DOUBLE: "║",
    VerticalLineStyle.LIGHT_TRIPLE_DASH: "┆",
    VerticalLineStyle.HEAVY_TRIPLE_DASH: "┇",
    VerticalLineStyle.LIGHT_QUADRUPLE_DASH: "┊",
    VerticalLineStyle.HEAVY_QUADRUPLE_DASH: "┋",
    VerticalLineStyle.DOTTED: "·",
    VerticalLineStyle.LIGHT_DOUBLE_DASH: "╎",
    VerticalLineStyle.HEAVY_DOUBLE_DASH: "╏",
    VerticalLineStyle.SPACE: " ",
}


class DiagonalLineStyle(Enum):
    FORWARD_DIAGONAL = auto()     # U+2571
    BACKWARD_DIAGONAL = auto()    # U+2572
    FORWARD_SLASH = auto()
    BACKWARD_SLASH = auto()
    SPACE = auto()


DIAGONAL_LINE_CHARS = {
    DiagonalLineStyle.FORWARD_DIAGONAL: "╱",
    DiagonalLineStyle.BACKWARD_DIAGONAL: "╲",
    DiagonalLineStyle.FORWARD_SLASH: "/",
    DiagonalLineStyle.BACKWARD_SLASH: "\\",
    DiagonalLineStyle.SPACE: " ",
}


def get_horizontal_line_char(style: HorizontalLineStyle) -> str:
    return HORIZONTAL_LINE_CHARS[style]


def get_vertical_line_char(style: VerticalLineStyle) -> str:
    return VERTICAL_LINE_CHARS[style]


def get_diagonal_line_char(style: DiagonalLineStyle) -> str:
    return DIAGONAL_LINE_CHARS[style]


# -------------------------------------------------------------------------
#  BLOCKS & SHADES
# -------------------------------------------------------------------------

class BlockChar(Enum):
    FULL = auto()
    UPPER_HALF = auto()
    LOWER_HALF = auto()
    LEFT_HALF = auto()
    RIGHT_HALF = auto()
    LIGHT_SHADE = auto()
    MEDIUM_SHADE = auto()
    DARK_SHADE = auto()


BLOCK_CHARS = {
    BlockChar.FULL: "█",
    BlockChar.UPPER_HALF: "▀",
    BlockChar.LOWER_HALF: "▄",
    BlockChar.LEFT_HALF: "▌",
    BlockChar.RIGHT_HALF: "▐",
    BlockChar.LIGHT_SHADE: "░",
    BlockChar.MEDIUM_SHADE: "▒",
    BlockChar.DARK_SHADE: "▓",
}


class ShadeStyle(Enum):
    LIGHT = auto()
    MEDIUM = auto()
    DARK = auto()
    SOLID = auto()


SHADE_BLOCKS = {
    ShadeStyle.LIGHT: BlockChar.LIGHT_SHADE,
    ShadeStyle.MEDIUM: BlockChar.MEDIUM_SHADE,
    ShadeStyle.DARK: BlockChar.DARK_SHADE,
    ShadeStyle.SOLID: BlockChar.FULL,
}


def block_char_to_char(block: BlockChar) -> str:
    return BLOCK_CHARS[block]


def get_shade_char(shade: ShadeStyle) -> str:
    return block_char_to_char(SHADE_BLOCKS[shade])


# -------------------------------------------------------------------------
#  VERTEX MARKERS (circles & stars)
# -------------------------------------------------------------------------

class CircleSymbol(Enum):
    CIRCLE = auto()
    FILLED_CIRCLE = auto()
    LARGE_CIRCLE = auto()
    MEDIUM_FILLED_CIRCLE = auto()
    DOTTED_CIRCLE = auto()
    CIRCLE_WITH_LEFT_HALF_BLACK = auto()
    CIRCLE_WITH_RIGHT_HALF_BLACK = auto()
    CIRCLED_DOT = auto()
    CIRCLE_WITH_VERTICAL_FILL = auto()
    CIRCLE_WITH_HORIZONTAL_FILL = auto()
    BULLSEYE = auto()
    SUN_SYMBOL = auto()
    FISH_EYE = auto()
    CIRCLE_WITH_TWO_DOTS_INSIDE = auto()
    FILLED_CIRCLE_WITH_TWO_DOTS_INSIDE = auto()
    RED_CIRCLE = auto()
    BLUE_CIRCLE = auto()
    CIRCLED_PLUS = auto()
    CIRCLED_MINUS = auto()
    CIRCLED_TIMES = auto()


CIRCLE_CHARS = {
    CircleSymbol.CIRCLE: "○",
    CircleSymbol.FILLED_CIRCLE: "●",
    CircleSymbol.LARGE_CIRCLE: "◯",
    CircleSymbol.MEDIUM_FILLED_CIRCLE: "⬤",
    CircleSymbol.DOTTED_CIRCLE: "◌",
    CircleSymbol.CIRCLE_WITH_LEFT_HALF_BLACK: "◐",
    CircleSymbol.CIRCLE_WITH_RIGHT_HALF_BLACK: "◑",
    CircleSymbol.CIRCLED_DOT: "◍",
    CircleSymbol.CIRCLE_WITH_VERTICAL_FILL: "◓",
    CircleSymbol.CIRCLE_WITH_HORIZONTAL_FILL: "◒",
    CircleSymbol.BULLSEYE: "◎",
    CircleSymbol.SUN_SYMBOL: "☉",
    CircleSymbol.FISH_EYE: "◉",
    CircleSymbol.CIRCLE_WITH_TWO_DOTS_INSIDE: "⚇",
    CircleSymbol.FILLED_CIRCLE_WITH_TWO_DOTS_INSIDE: "⚉",
    CircleSymbol.RED_CIRCLE: "🔴",
    CircleSymbol.BLUE_CIRCLE: "🔵",
    CircleSymbol.CIRCLED_PLUS: "⊕",
    CircleSymbol.CIRCLED_MINUS: "⊖",
    CircleSymbol.CIRCLED_TIMES: "⊗",
}


class StarSymbol(Enum):
    BLACK_STAR = auto()
    WHITE_STAR = auto()
    FOUR_POINTED_BLACK_STAR = auto()
    FOUR_POINTED_WHITE_STAR = auto()
    FIVE_POINTED_BLACK_STAR = auto()
    FIVE_POINTED_WHITE_STAR = auto()
    SIX_POINTED_BLACK_STAR = auto()
    SIX_POINTED_WHITE_STAR = auto()
    EIGHT_POINTED_BLACK_STAR = auto()
    EIGHT_POINTED_WHITE_STAR = auto()
    CIRCLED_WHITE_STAR = auto()
    CIRCLED_BLACK_STAR = auto()
    OPEN_CENTER_BLACK_STAR = auto()
    HEAVY_EIGHT_POINTED_STAR = auto()
    SPARKLING_STAR = auto()
    SUN_STAR = auto()
    ASTERISK = auto()
    BOLD_FIVE_POINTED_BLACK_STAR = auto()
    OUTLINED_BLACK_STAR = auto()
    HEAVY_FOUR_BALLOON_STAR = auto()


STAR_CHARS = {
    StarSymbol.BLACK_STAR: "★",
    StarSymbol.WHITE_STAR: "☆",
    StarSymbol.FOUR_POINTED_BLACK_STAR: "✦",
    StarSymbol.FOUR_POINTED_WHITE_STAR: "✧",
    StarSymbol.FIVE_POINTED_BLACK_STAR: "✭",
    StarSymbol.FIVE_POINTED_WHITE_STAR: "✮",
    StarSymbol.SIX_POINTED_BLACK_STAR: "✶",
    StarSymbol.SIX_POINTED_WHITE_STAR: "✴",
    StarSymbol.EIGHT_POINTED_BLACK_STAR: "✴",   # shares U+2734 with the six-pointed white star
    StarSymbol.EIGHT_POINTED_WHITE_STAR: "✵",
    StarSymbol.CIRCLED_WHITE_STAR: "✪",
    StarSymbol.CIRCLED_BLACK_STAR: "✫",
    StarSymbol.OPEN_CENTER_BLACK_STAR: "✯",
    StarSymbol.HEAVY_EIGHT_POINTED_STAR: "✷",
    StarSymbol.SPARKLING_STAR: "❈",
    StarSymbol.SUN_STAR: "☀",
    StarSymbol.ASTERISK: "✱",
    StarSymbol.BOLD_FIVE_POINTED_BLACK_STAR: "⭐",
    StarSymbol.OUTLINED_BLACK_STAR: "✰",
    StarSymbol.HEAVY_FOUR_BALLOON_STAR: "✣",
}


def circle_symbol_to_char(symbol: CircleSymbol) -> str:
    return CIRCLE_CHARS[symbol]


def star_symbol_to_char(symbol: StarSymbol) -> str:
    return STAR_CHARS[symbol]


# -------------------------------------------------------------------------
#  BOX GLYPH SETS
# -------------------------------------------------------------------------

class GlyphSet(NamedTuple):
    """
    One row of the box-drawing table: every element kind a box or
    grid needs, for a single visual style.
    """
    horizontal: str
    vertical: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    vertical_left: str
    vertical_right: str
    horizontal_down: str
    horizontal_up: str
    vertical_horizontal: str

    def corners(self):
        """(top_left, top_right, bottom_left, bottom_right)"""
        return (self.top_left, self.top_right, self.bottom_left, self.bottom_right)


SINGLE = GlyphSet("─", "│", "┌", "┐", "└", "┘", "├", "┤", "┬", "┴", "┼")
DOUBLE = GlyphSet("═", "║", "╔", "╗", "╚", "╝", "╠", "╣", "╦", "╩", "╬")
SINGLE_ROUNDED = GlyphSet("─", "│", "╭", "╮", "╰", "╯", "├", "┤", "┬", "┴", "┼")
DOUBLE_ROUNDED = GlyphSet("═", "║", "╒", "╕", "╘", "╛", "╞", "╡", "╤", "╧", "╪")

# dotted / dashed boxes are drawn with these edge strokes; their corners,
# junctions and part lookups stay single-line
DOTTED_EDGES = SINGLE._replace(horizontal="┄", vertical="┆")
DASHED_EDGES = SINGLE._replace(horizontal="┈", vertical="┊")


class BoxStyle(Enum):
    SINGLE = auto()
    DOUBLE = auto()
    SINGLE_ROUNDED = auto()
    DOUBLE_ROUNDED = auto()
    DOTTED = auto()
    DASHED = auto()


BOX_GLYPH_SETS = {
    BoxStyle.SINGLE: SINGLE,
    BoxStyle.DOUBLE: DOUBLE,
    BoxStyle.SINGLE_ROUNDED: SINGLE_ROUNDED,
    BoxStyle.DOUBLE_ROUNDED: DOUBLE_ROUNDED,
    BoxStyle.DOTTED: SINGLE,
    BoxStyle.DASHED: SINGLE,
}

BOX_EDGE_SETS = dict(BOX_GLYPH_SETS)
BOX_EDGE_SETS.update({
    BoxStyle.DOTTED: DOTTED_EDGES,
    BoxStyle.DASHED: DASHED_EDGES,
})


class BoxPart(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"
    VERTICAL_LEFT = "vertical_left"
    VERTICAL_RIGHT = "vertical_right"
    HORIZONTAL_DOWN = "horizontal_down"
    HORIZONTAL_UP = "horizontal_up"
    VERTICAL_HORIZONTAL = "vertical_horizontal"


CORNER_PARTS = (
    BoxPart.TOP_LEFT,
    BoxPart.TOP_RIGHT,
    BoxPart.BOTTOM_LEFT,
    BoxPart.BOTTOM_RIGHT,
)


def get_glyph_set(style: BoxStyle) -> GlyphSet:
    """Lookup table row for a style, as get_box_glyph reads it."""
    return BOX_GLYPH_SETS[style]


def get_edge_glyph_set(style: BoxStyle) -> GlyphSet:
    """Glyphs draw_box emits for a style, dotted / dashed strokes included."""
    return BOX_EDGE_SETS[style]


def _resolve_part(part: Union[BoxPart, str]) -> Optional[BoxPart]:
    """
    Accepts a BoxPart or its name in either spelling
    ('TopLeft', 'top_left', 'TOP_LEFT'). Unknown names give None.
    """
    if isinstance(part, BoxPart):
        return part

    if "_" in part or part.isupper() or part.islower():
        snake = part.lower()
    else:
        # CamelCase → snake_case
        snake = "".join(
            ("_" + c.lower()) if c.isupper() and i > 0 else c.lower()
            for i, c in enumerate(part)
        )
    try:
        return BoxPart(snake)
    except ValueError:
        return None


def get_box_glyph(style: BoxStyle, part: Union[BoxPart, str]) -> Optional[str]:
    """
    Returns the glyph for one element of a box style, or None when the
    element name is unknown.
    """
    resolved = _resolve_part(part)
    if resolved is None:
        return None
    return getattr(BOX_GLYPH_SETS[style], resolved.value)


def get_corner_glyph(style: BoxStyle, corner: Union[BoxPart, str]) -> Optional[str]:
    """
    Same as get_box_glyph, restricted to the four corners.
    """
    resolved = _resolve_part(corner)
    if resolved not in CORNER_PARTS:
        return None
    return getattr(BOX_GLYPH_SETS[style], resolved.value)
