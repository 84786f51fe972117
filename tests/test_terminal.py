"""
Tests for the Terminal session: ANSI output, flushing, error routing and input.
"""

from __future__ import annotations

import io

import pytest

from shapes.boxes import draw_box
from terminal.ansi import Attribute, Color
from terminal.screen_buffer import ScreenBuffer
from terminal.session import Terminal
from utils.errors import (
    BoundaryError,
    CollectingErrorHandler,
    DefaultErrorHandler,
    RaisingErrorHandler,
    TerminalIOError,
)


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def raw(out, handler):
    """Terminal over a plain StringIO, to check bytes on the wire."""
    return Terminal(stream=out, error_handler=handler)


class FailingInput:
    def readline(self):
        raise OSError("stdin closed")


# ---------------------------------------------------------------------
#  Escape sequences
# ---------------------------------------------------------------------

@pytest.mark.parametrize("call,expected", [
    (lambda t: t.move_cursor_to(5, 3), "\x1b[3;5H"),
    (lambda t: t.clear_screen(), "\x1b[2J\x1b[1;1H"),
    (lambda t: t.clear_to_line_end(), "\x1b[K"),
    (lambda t: t.clear_to_line_start(), "\x1b[1K"),
    (lambda t: t.clear_line(), "\x1b[2K"),
    (lambda t: t.clear_to_screen_start(), "\x1b[1J"),
    (lambda t: t.clear_to_screen_end(), "\x1b[J"),
    (lambda t: t.set_foreground_color(Color.RED), "\x1b[31m"),
    (lambda t: t.set_background_color(Color.WHITE), "\x1b[47m"),
    (lambda t: t.reset_color(), "\x1b[0m"),
    (lambda t: t.save_cursor_location(), "\x1b[s"),
    (lambda t: t.restore_cursor_location(), "\x1b[u"),
    (lambda t: t.show_cursor(), "\x1b[?25h"),
    (lambda t: t.hide_cursor(), "\x1b[?25l"),
    (lambda t: t.println("hi"), "hi\n"),
    (lambda t: t.put_char("x"), "x"),
])
def test_sequences(raw, out, call, expected) -> None:
    assert call(raw)
    assert out.getvalue() == expected


@pytest.mark.parametrize("attr,code", [
    (Attribute.RESET, 0),
    (Attribute.BRIGHT, 1),
    (Attribute.DIM, 2),
    (Attribute.UNDERSCORE, 4),
    (Attribute.BLINK, 5),
    (Attribute.REVERSE, 7),
    (Attribute.HIDDEN, 8),
])
def test_attributes(raw, out, attr, code) -> None:
    raw.set_attribute(attr)
    assert out.getvalue() == f"\x1b[{code}m"


def test_color_table_order() -> None:
    assert [int(c) for c in Color] == list(range(8))
    assert Color.BLACK == 0 and Color.WHITE == 7


def test_default_stream_is_stdout(capsys) -> None:
    Terminal().print("hello")
    assert capsys.readouterr().out == "hello"


# ---------------------------------------------------------------------
#  Flushing
# ---------------------------------------------------------------------

def test_every_write_is_flushed(term, screen) -> None:
    term.print("a")
    term.put_glyph(3, 3, "b")
    assert screen.flush_count == 2


def test_batch_flushes_once_on_exit(term, screen) -> None:
    with term.batch():
        for x in range(1, 6):
            term.put_glyph(x, 1, "#")
        assert screen.flush_count == 0
    assert screen.flush_count == 1
    assert screen.count("#") == 5


def test_nested_batches_flush_at_outermost(term, screen) -> None:
    with term.batch():
        with term.batch():
            term.print("x")
        assert screen.flush_count == 0
    assert screen.flush_count == 1


# ---------------------------------------------------------------------
#  Error routing
# ---------------------------------------------------------------------

def test_put_glyph_outside_viewport(term, screen, handler) -> None:
    assert not term.put_glyph(81, 1, "x")
    assert screen.writes == []
    assert isinstance(handler.last(), BoundaryError)


def test_write_failure_goes_to_handler(term, screen, handler) -> None:
    screen.close()

    assert not term.print("x")
    assert len(handler.io_errors) == 1
    assert isinstance(handler.io_errors[0].error, OSError)


def test_closed_stream_goes_to_handler(handler) -> None:
    out = io.StringIO()
    out.close()
    term = Terminal(stream=out, error_handler=handler)

    assert not term.print("x")
    assert not term.flush()
    assert len(handler.io_errors) == 2
    assert isinstance(handler.io_errors[0].error, ValueError)


def test_unencodable_glyph_goes_to_handler(handler) -> None:
    ascii_out = io.TextIOWrapper(io.BytesIO(), encoding="ascii")
    term = Terminal(stream=ascii_out, error_handler=handler)

    assert not draw_box(term, 1, 1, 4, 4)
    assert len(handler.io_errors) == 1
    assert isinstance(handler.io_errors[0].error, UnicodeEncodeError)
    # plain ASCII still gets through the same stream
    assert term.print("ok")


def test_default_handler_reports_and_continues() -> None:
    err = io.StringIO()
    term = Terminal(stream=io.StringIO(), error_handler=DefaultErrorHandler(err))

    assert not term.move_cursor_to(100, 1)
    assert term.move_cursor_to(1, 1)
    assert err.getvalue().startswith("[ERROR] Boundary error: Cursor position (100, 1)")


def test_default_handler_writes_to_stderr(capsys) -> None:
    term = Terminal(stream=io.StringIO())
    term.move_cursor_to(0, 0)
    captured = capsys.readouterr()
    assert "[ERROR] Boundary error" in captured.err
    assert captured.out == ""


def test_raising_handler_propagates() -> None:
    term = Terminal(stream=io.StringIO(), error_handler=RaisingErrorHandler())
    with pytest.raises(BoundaryError):
        term.move_cursor_to(0, 5)

    closed = ScreenBuffer()
    closed.close()
    term = Terminal(stream=closed, error_handler=RaisingErrorHandler())
    with pytest.raises(TerminalIOError):
        term.print("x")


def test_handler_can_be_replaced(term) -> None:
    replacement = CollectingErrorHandler()
    term.set_error_handler(replacement)
    term.move_cursor_to(0, 0)
    assert len(replacement.errors) == 1


# ---------------------------------------------------------------------
#  Input
# ---------------------------------------------------------------------

def test_read_line_strips(handler) -> None:
    term = Terminal(stream=io.StringIO(), input_stream=io.StringIO("  Ada \nnext\n"),
                    error_handler=handler)
    assert term.read_line() == "Ada"
    assert term.read_line() == "next"
    assert term.read_line() == ""


def test_read_key_takes_first_character_of_the_line(handler) -> None:
    term = Terminal(stream=io.StringIO(), input_stream=io.StringIO("yes please\nq\n"),
                    error_handler=handler)
    assert term.read_key() == "y"
    assert term.read_key() == "q"


def test_read_key_on_empty_line_or_eof(handler) -> None:
    term = Terminal(stream=io.StringIO(), input_stream=io.StringIO("\n"),
                    error_handler=handler)
    assert term.read_key() == "\0"
    assert term.read_key() == "\0"
    assert handler.errors == []


def test_read_failures_go_to_handler(handler) -> None:
    term = Terminal(stream=io.StringIO(), input_stream=FailingInput(),
                    error_handler=handler)
    assert term.read_line() == ""
    assert term.read_key() == "\0"
    assert len(handler.io_errors) == 2
