"""
Pytest configuration and fixtures.
"""

import pytest

from terminal.screen_buffer import ScreenBuffer
from terminal.session import Terminal
from utils.errors import CollectingErrorHandler


@pytest.fixture
def screen():
    """80×24 in-memory screen, same size as the default viewport."""
    return ScreenBuffer(80, 24)


@pytest.fixture
def handler():
    return CollectingErrorHandler()


@pytest.fixture
def term(screen, handler):
    """Terminal writing into `screen`, reporting into `handler`."""
    return Terminal(stream=screen, error_handler=handler)
