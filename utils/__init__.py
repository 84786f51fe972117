"""
Utility Functions

Provides the Bresenham rasterizer, glyph tables, error types and
handlers, blocking waits and snapshot I/O used across the toolkit.
"""

from .bresenham_utils import bres_line, bres_circle
from .errors import (
    TerminalError,
    BoundaryError,
    TerminalIOError,
    ErrorHandler,
    DefaultErrorHandler,
    RaisingErrorHandler,
    CollectingErrorHandler,
)
from .glyphs import (
    BoxStyle,
    BoxPart,
    ShadeStyle,
    GlyphSet,
    get_box_glyph,
    get_corner_glyph,
    get_glyph_set,
    get_edge_glyph_set,
)
from .timing import wait_for_seconds, wait_for_millis, wait_for_micros
from .snapshot_io import ensure_output_dir, save_snapshot, snapshot_name

__all__ = [
    "bres_line",
    "bres_circle",
    "TerminalError",
    "BoundaryError",
    "TerminalIOError",
    "ErrorHandler",
    "DefaultErrorHandler",
    "RaisingErrorHandler",
    "CollectingErrorHandler",
    "BoxStyle",
    "BoxPart",
    "ShadeStyle",
    "GlyphSet",
    "get_box_glyph",
    "get_corner_glyph",
    "get_glyph_set",
    "get_edge_glyph_set",
    "wait_for_seconds",
    "wait_for_millis",
    "wait_for_micros",
    "ensure_output_dir",
    "save_snapshot",
    "snapshot_name",
]
