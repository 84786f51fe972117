"""
Error types and error-handling strategies for the drawing API.

This module provides:
    • TerminalError, BoundaryError, TerminalIOError
    • ErrorHandler                (strategy interface)
    • DefaultErrorHandler         (reports to stderr, operation aborts)
    • RaisingErrorHandler         (re-raises, conventional exception shape)
    • CollectingErrorHandler      (records errors, used by tests and headless runs)

A handler is injected into each Terminal session; drawing calls route their
failures through it and return False instead of propagating.
"""

import sys
from typing import List, Optional

from config import TAG_ERROR


# ---------------------------------------------------------------------
#  ERROR TYPES
# ---------------------------------------------------------------------

class TerminalError(Exception):
    """Base class for every error reported by the toolkit."""


class BoundaryError(TerminalError):
    """
    Raised/reported when an operation's coordinates fall outside the
    current viewport.
    """

    def __init__(self, message: str, position=None):
        super().__init__(message)
        self.message = message
        self.position = position


class TerminalIOError(TerminalError):
    """
    Wraps the exception raised by the underlying stream on write or read:
    an OSError, or a ValueError from a closed stream or a glyph the
    stream encoding cannot represent (UnicodeEncodeError).
    """

    def __init__(self, error: Exception):
        super().__init__(str(error))
        self.error = error


# ---------------------------------------------------------------------
#  HANDLER STRATEGIES
# ---------------------------------------------------------------------

class ErrorHandler:
    """
    Receives either error kind and decides the side effect
    (log, abort, ignore). Subclasses override both methods.
    """

    def handle_boundary_error(self, error: BoundaryError) -> None:
        raise NotImplementedError

    def handle_io_error(self, error: TerminalIOError) -> None:
        raise NotImplementedError


class DefaultErrorHandler(ErrorHandler):
    """
    Prints a tagged report line to an error stream (stderr by default).
    The triggering operation aborts; the process keeps running.
    """

    def __init__(self, stream=None):
        self.stream = stream

    def _report(self, kind: str, message: str):
        stream = self.stream if self.stream is not None else sys.stderr
        print(f"{TAG_ERROR} {kind}: {message}", file=stream)

    def handle_boundary_error(self, error: BoundaryError) -> None:
        self._report("Boundary error", error.message)

    def handle_io_error(self, error: TerminalIOError) -> None:
        self._report("I/O error", str(error.error))


class RaisingErrorHandler(ErrorHandler):
    """Re-raises every error so callers can use try/except."""

    def handle_boundary_error(self, error: BoundaryError) -> None:
        raise error

    def handle_io_error(self, error: TerminalIOError) -> None:
        raise error from error.error


class CollectingErrorHandler(ErrorHandler):
    """Keeps every reported error in `errors`, in order."""

    def __init__(self):
        self.errors: List[TerminalError] = []

    def handle_boundary_error(self, error: BoundaryError) -> None:
        self.errors.append(error)

    def handle_io_error(self, error: TerminalIOError) -> None:
        self.errors.append(error)

    @property
    def boundary_errors(self) -> List[BoundaryError]:
        return [e for e in self.errors if isinstance(e, BoundaryError)]

    @property
    def io_errors(self) -> List[TerminalIOError]:
        return [e for e in self.errors if isinstance(e, TerminalIOError)]

    def last(self) -> Optional[TerminalError]:
        return self.errors[-1] if self.errors else None

    def clear(self):
        self.errors.clear()
