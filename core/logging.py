"""
core/logging.py

Logging setup. Records are rendered through rich so they match the rest of the
console output.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING", console: Optional[Console] = None) -> None:
    """
    Configure the root logger with a RichHandler.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        console: Console to log to (stderr if None)
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
