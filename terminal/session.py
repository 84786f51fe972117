"""
Terminal session: the output sink and input collaborator every drawing
call goes through.

A Terminal owns
    - the output stream (stdout unless given; a ScreenBuffer works too)
    - the input stream (stdin unless given)
    - the Viewport used for bounds checks
    - the ErrorHandler strategy that receives failures

Every write is flushed immediately unless the caller opens a batch().
Operations that can fail return False after reporting to the handler:

    move_cursor_to, put_glyph          BoundaryError, TerminalIOError
    write / print / println / put_char TerminalIOError
    every sequence helper              TerminalIOError
    read_line / read_key               TerminalIOError (returns "" / NULL_KEY)
"""

import sys
from contextlib import contextmanager
from typing import Optional, Tuple

from config import get_active_params
from models.viewport import Viewport
from terminal import ansi
from terminal.ansi import Attribute, Color
from utils import timing
from utils.errors import (
    BoundaryError,
    DefaultErrorHandler,
    ErrorHandler,
    TerminalIOError,
)


# closed streams raise ValueError, unencodable glyphs UnicodeEncodeError
STREAM_ERRORS = (OSError, ValueError)


class Terminal:

    def __init__(
        self,
        stream=None,
        input_stream=None,
        viewport: Optional[Viewport] = None,
        error_handler: Optional[ErrorHandler] = None,
        auto_flush: Optional[bool] = None,
    ):
        params = get_active_params()

        # None → resolve sys.stdout / sys.stdin lazily (they may be swapped)
        self._stream = stream
        self._input = input_stream

        self.viewport: Viewport = viewport if viewport is not None else Viewport()
        self.error_handler: ErrorHandler = (
            error_handler if error_handler is not None else DefaultErrorHandler()
        )
        self.auto_flush: bool = params["AUTO_FLUSH"] if auto_flush is None else auto_flush
        self.null_key: str = params["NULL_KEY"]

        self._batch_depth = 0

    # ------------------------------------------------------------------
    # Streams
    # ------------------------------------------------------------------

    @property
    def stream(self):
        return self._stream if self._stream is not None else sys.stdout

    @property
    def input_stream(self):
        return self._input if self._input is not None else sys.stdin

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_viewport(self, width: int, height: int):
        self.viewport.set_viewport(width, height)

    def get_viewport(self) -> Tuple[int, int]:
        return self.viewport.get_viewport()

    def set_error_handler(self, handler: ErrorHandler):
        self.error_handler = handler

    # ------------------------------------------------------------------
    # Error routing
    # ------------------------------------------------------------------

    def report_boundary_error(self, message: str, position=None) -> bool:
        """Hand a BoundaryError to the handler. Always returns False."""
        self.error_handler.handle_boundary_error(BoundaryError(message, position))
        return False

    def report_io_error(self, error: Exception) -> bool:
        self.error_handler.handle_io_error(TerminalIOError(error))
        return False

    # ------------------------------------------------------------------
    # Raw output
    # ------------------------------------------------------------------

    def write(self, text: str) -> bool:
        try:
            out = self.stream
            out.write(text)
            if self.auto_flush and self._batch_depth == 0:
                out.flush()
        except STREAM_ERRORS as e:
            return self.report_io_error(e)
        return True

    def flush(self) -> bool:
        try:
            self.stream.flush()
        except STREAM_ERRORS as e:
            return self.report_io_error(e)
        return True

    @contextmanager
    def batch(self):
        """
        Defer flushing until the outermost batch exits. The stream is
        flushed before the with-block returns, even on error.
        """
        self._batch_depth += 1
        try:
            yield self
        finally:
            self._batch_depth -= 1
            if self._batch_depth == 0:
                self.flush()

    def print(self, text: str) -> bool:
        return self.write(text)

    def println(self, text: str) -> bool:
        return self.write(text + "\n")

    def put_char(self, ch: str) -> bool:
        return self.write(ch)

    # ------------------------------------------------------------------
    # Cursor positioning
    # ------------------------------------------------------------------

    def move_cursor_to(self, x: int, y: int) -> bool:
        """
        Moves the cursor to (x, y). Out-of-viewport targets are reported
        as BoundaryError and nothing is written.
        """
        if not self.viewport.contains(x, y):
            return self.report_boundary_error(
                f"Cursor position ({x}, {y}) is outside viewport "
                f"{self.viewport.width}x{self.viewport.height}",
                (x, y),
            )
        return self.write(ansi.cursor_position(x, y))

    def put_glyph(self, x: int, y: int, glyph: str) -> bool:
        """Bounds-checked move followed by the glyph, as one write."""
        if not self.viewport.contains(x, y):
            return self.report_boundary_error(
                f"Glyph position ({x}, {y}) is outside viewport", (x, y)
            )
        return self.write(ansi.cursor_position(x, y) + glyph)

    def place(self, x: int, y: int, text: str) -> bool:
        """
        Unchecked positioned write, for composers that have already
        validated the extent of the whole shape.
        """
        return self.write(ansi.cursor_position(x, y) + text)

    def save_cursor_location(self) -> bool:
        return self.write(ansi.SAVE_CURSOR)

    def restore_cursor_location(self) -> bool:
        return self.write(ansi.RESTORE_CURSOR)

    def show_cursor(self) -> bool:
        return self.write(ansi.SHOW_CURSOR)

    def hide_cursor(self) -> bool:
        return self.write(ansi.HIDE_CURSOR)

    # ------------------------------------------------------------------
    # Clearing
    # ------------------------------------------------------------------

    def clear_screen(self) -> bool:
        """ESC[2J, then home the cursor to (1, 1)."""
        if not self.write(ansi.CLEAR_SCREEN):
            return False
        return self.move_cursor_to(1, 1)

    def clear_to_screen_start(self) -> bool:
        return self.write(ansi.CLEAR_TO_SCREEN_START)

    def clear_to_screen_end(self) -> bool:
        return self.write(ansi.CLEAR_TO_SCREEN_END)

    def clear_line(self) -> bool:
        return self.write(ansi.CLEAR_LINE)

    def clear_to_line_start(self) -> bool:
        return self.write(ansi.CLEAR_TO_LINE_START)

    def clear_to_line_end(self) -> bool:
        return self.write(ansi.CLEAR_TO_LINE_END)

    # ------------------------------------------------------------------
    # Colors & attributes
    # ------------------------------------------------------------------

    def set_foreground_color(self, color: Color) -> bool:
        return self.write(ansi.foreground(color))

    def set_background_color(self, color: Color) -> bool:
        return self.write(ansi.background(color))

    def reset_color(self) -> bool:
        return self.write(ansi.RESET)

    def set_attribute(self, attr: Attribute) -> bool:
        return self.write(ansi.attribute(attr))

    def reset_attributes(self) -> bool:
        return self.set_attribute(Attribute.RESET)

    # ------------------------------------------------------------------
    # Input (line-buffered)
    # ------------------------------------------------------------------

    def read_line(self) -> str:
        """Reads one input line, stripped. Returns "" on failure."""
        try:
            line = self.input_stream.readline()
        except STREAM_ERRORS as e:
            self.report_io_error(e)
            return ""
        return line.strip()

    def read_key(self) -> str:
        """
        Reads a whole line and returns its first character; the rest of
        the line is discarded. An empty line or EOF gives NULL_KEY.

        This is not a raw single-keystroke read: the user still has to
        press Enter.
        """
        try:
            line = self.input_stream.readline()
        except STREAM_ERRORS as e:
            self.report_io_error(e)
            return self.null_key

        self.flush()
        line = line.rstrip("\r\n")
        return line[0] if line else self.null_key

    # ------------------------------------------------------------------
    # Blocking waits
    # ------------------------------------------------------------------

    def wait_for_seconds(self, seconds: float):
        timing.wait_for_seconds(seconds)

    def wait_for_millis(self, milliseconds: float):
        timing.wait_for_millis(milliseconds)

    def wait_for_micros(self, microseconds: float):
        timing.wait_for_micros(microseconds)

    def __repr__(self):
        return f"Terminal(viewport={self.viewport!r})"
