"""Process-wide logging setup for the command line."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Route the ``npuzzle`` loggers to stderr through a Rich handler.

    Unknown level names fall back to ``WARNING``.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    return logging.getLogger("npuzzle")
