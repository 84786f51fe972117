"""
Terminal Drawing Package

This package provides a small terminal rendering toolkit, including:

- ANSI cursor / color / clearing sequences
- A Terminal session (output sink, input, viewport, error handler)
- Direction-based Line shapes with vertex styling
- Bresenham two-point segments and circle outlines
- Box, shaded-rectangle and erase composers
- An in-memory ScreenBuffer for headless rendering
"""
__all__ = [
    "config",
    "main",
    "models",
    "shapes",
    "terminal",
    "utils",
]
