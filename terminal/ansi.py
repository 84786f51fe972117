"""
ANSI escape sequences emitted by the toolkit.

This module provides:
    • Color, Attribute           (8-color table, SGR attributes)
    • cursor_position(x, y)      ESC[{row};{col}H, 1-based
    • foreground(color), background(color), attribute(attr)
    • fixed sequences for clearing, cursor save/restore and visibility

Only sequence construction lives here; writing is done by the Terminal.
"""

from enum import IntEnum


ESC = "\x1b"
CSI = ESC + "["


# ---------------------------------------------------------------------
#  COLORS & ATTRIBUTES
# ---------------------------------------------------------------------

class Color(IntEnum):
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


class Attribute(IntEnum):
    RESET = 0
    BRIGHT = 1
    DIM = 2
    UNDERSCORE = 4
    BLINK = 5
    REVERSE = 7
    HIDDEN = 8


# ---------------------------------------------------------------------
#  FIXED SEQUENCES
# ---------------------------------------------------------------------

CLEAR_SCREEN = CSI + "2J"
CLEAR_TO_SCREEN_START = CSI + "1J"
CLEAR_TO_SCREEN_END = CSI + "J"

CLEAR_LINE = CSI + "2K"
CLEAR_TO_LINE_START = CSI + "1K"
CLEAR_TO_LINE_END = CSI + "K"

SAVE_CURSOR = CSI + "s"
RESTORE_CURSOR = CSI + "u"
SHOW_CURSOR = CSI + "?25h"
HIDE_CURSOR = CSI + "?25l"

RESET = CSI + "0m"


# ---------------------------------------------------------------------
#  PARAMETERISED SEQUENCES
# ---------------------------------------------------------------------

def cursor_position(x: int, y: int) -> str:
    """Row comes first on the wire: (x=col, y=row) → ESC[y;xH."""
    return f"{CSI}{y};{x}H"


def foreground(color: Color) -> str:
    return f"{CSI}3{int(color)}m"


def background(color: Color) -> str:
    return f"{CSI}4{int(color)}m"


def attribute(attr: Attribute) -> str:
    return f"{CSI}{int(attr)}m"
