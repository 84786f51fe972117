"""
In-memory screen: a write target that interprets the byte stream a
Terminal produces and keeps the result in a numpy character grid.

This module provides:
    • ScreenBuffer(width, height)
        - write(text) / flush()     stream interface used by Terminal
        - glyph_at(x, y)            1-based lookup
        - writes                    every glyph emission as (x, y, ch)
        - to_text()                 plain-text rendering

Recognised sequences are exactly the ones terminal.ansi emits:
cursor position (H), erase in display (J), erase in line (K), save /
restore cursor (s / u), cursor visibility (?25h / ?25l). SGR (m) is
accepted and ignored. Coordinates are taken literally: a write addressed
to row or column 0 is logged but lands outside the grid.
"""

import re
from typing import List, Tuple

import numpy as np


CSI_PATTERN = re.compile(r"\x1b\[([0-9;?]*)([A-Za-z])")


class ScreenBuffer:

    def __init__(self, width: int = 80, height: int = 24, fill: str = " "):
        self.width = width
        self.height = height
        self.fill = fill
        self.cells = np.full((height, width), fill, dtype="<U1")

        # cursor is 1-based (x=column, y=row)
        self.cursor: Tuple[int, int] = (1, 1)
        self.saved_cursor: Tuple[int, int] = (1, 1)
        self.cursor_visible = True

        self.writes: List[Tuple[int, int, str]] = []
        self.sequences: List[str] = []
        self.flush_count = 0
        self.closed = False

    # ------------------------------------------------------------------
    # Stream interface
    # ------------------------------------------------------------------

    def write(self, text: str) -> int:
        if self.closed:
            raise OSError("write to closed ScreenBuffer")

        pos = 0
        for match in CSI_PATTERN.finditer(text):
            self._put_text(text[pos:match.start()])
            self._apply_sequence(match.group(1), match.group(2))
            self.sequences.append(match.group(0))
            pos = match.end()
        self._put_text(text[pos:])
        return len(text)

    def flush(self):
        if self.closed:
            raise OSError("flush of closed ScreenBuffer")
        self.flush_count += 1

    def close(self):
        self.closed = True

    # ------------------------------------------------------------------
    # Text & control handling
    # ------------------------------------------------------------------

    def _put_text(self, text: str):
        for ch in text:
            x, y = self.cursor
            if ch == "\n":
                self.cursor = (1, y + 1)
            elif ch == "\r":
                self.cursor = (1, y)
            else:
                self.writes.append((x, y, ch))
                if self.in_grid(x, y):
                    self.cells[y - 1, x - 1] = ch
                self.cursor = (x + 1, y)

    def _apply_sequence(self, params: str, final: str):
        x, y = self.cursor

        if final == "H":
            parts = params.split(";") if params else []
            row = int(parts[0]) if len(parts) > 0 and parts[0] else 1
            col = int(parts[1]) if len(parts) > 1 and parts[1] else 1
            self.cursor = (col, row)

        elif final == "J":
            if params == "2":
                self.cells[:, :] = self.fill
            elif params == "1":
                self._clear_rows(0, y - 1)
                self._clear_span(y, 1, x)
            else:
                self._clear_span(y, x, self.width)
                self._clear_rows(y, self.height)

        elif final == "K":
            if params == "2":
                self._clear_span(y, 1, self.width)
            elif params == "1":
                self._clear_span(y, 1, x)
            else:
                self._clear_span(y, x, self.width)

        elif final == "s":
            self.saved_cursor = self.cursor
        elif final == "u":
            self.cursor = self.saved_cursor

        elif final == "h" and params == "?25":
            self.cursor_visible = True
        elif final == "l" and params == "?25":
            self.cursor_visible = False

        # "m" (colors / attributes) does not change cell contents

    def _clear_rows(self, start: int, stop: int):
        """Clear rows [start, stop) given as 0-based indices."""
        start = max(start, 0)
        stop = min(stop, self.height)
        if start < stop:
            self.cells[start:stop, :] = self.fill

    def _clear_span(self, y: int, x1: int, x2: int):
        """Clear columns x1..x2 (1-based, inclusive) of row y."""
        if not 1 <= y <= self.height:
            return
        x1 = max(x1, 1)
        x2 = min(x2, self.width)
        if x1 <= x2:
            self.cells[y - 1, x1 - 1:x2] = self.fill

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def in_grid(self, x: int, y: int) -> bool:
        return 1 <= x <= self.width and 1 <= y <= self.height

    def glyph_at(self, x: int, y: int) -> str:
        if not self.in_grid(x, y):
            return self.fill
        return str(self.cells[y - 1, x - 1])

    def region(self, x: int, y: int, width: int, height: int) -> np.ndarray:
        """Copy of the width × height block whose top-left cell is (x, y)."""
        return self.cells[y - 1:y - 1 + height, x - 1:x - 1 + width].copy()

    def count(self, glyph: str) -> int:
        return int(np.count_nonzero(self.cells == glyph))

    def positions_of(self, glyph: str) -> List[Tuple[int, int]]:
        """1-based (x, y) of every cell holding glyph, row-major."""
        rows, cols = np.nonzero(self.cells == glyph)
        return [(int(c) + 1, int(r) + 1) for r, c in zip(rows, cols)]

    def written_positions(self) -> set:
        return {(x, y) for x, y, _ in self.writes}

    def reset_writes(self):
        self.writes.clear()
        self.sequences.clear()

    def to_text(self) -> str:
        return "\n".join("".join(row).rstrip() for row in self.cells)

    def __repr__(self):
        return f"ScreenBuffer(width={self.width}, height={self.height})"
