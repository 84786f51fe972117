"""
Data Models

Defines the core drawing entities:
- Viewport
- Direction
- Shape
- Line, LineStyle, VertexStyle, DiagonalMapping
"""

from .viewport import Viewport
from .direction import Direction
from .shape import Shape
from .line import Line, LineStyle, VertexStyle, DiagonalMapping

__all__ = [
    "Viewport",
    "Direction",
    "Shape",
    "Line",
    "LineStyle",
    "VertexStyle",
    "DiagonalMapping",
]
