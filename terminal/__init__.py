"""
Terminal I/O

Contains the output side of the toolkit:
- ANSI sequence construction
- The Terminal session every drawing call writes through
- ScreenBuffer, an in-memory stand-in for a real terminal
"""

from .ansi import Color, Attribute
from .session import Terminal
from .screen_buffer import ScreenBuffer

__all__ = [
    "Color",
    "Attribute",
    "Terminal",
    "ScreenBuffer",
]
