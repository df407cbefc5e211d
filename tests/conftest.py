"""
Pytest configuration for the string exercise tests.
"""

import io
import logging

import pytest
from rich.console import Console

from display.console import ConsoleDisplay


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging() replaces root handlers; put the originals back after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def console():
    """A plain-text console writing into a buffer."""
    return Console(file=io.StringIO(), width=120, color_system=None, legacy_windows=False)


@pytest.fixture
def display(console):
    return ConsoleDisplay(console=console)
