"""Logging setup."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from npuzzle.log import setup_logging


def test_setup_logging_installs_rich_handler() -> None:
    log = setup_logging("debug")

    root = logging.getLogger()
    assert log.name == "npuzzle"
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], RichHandler)
    assert root.handlers[0].formatter._fmt == "%(message)s"


def test_unknown_level_falls_back_to_warning() -> None:
    setup_logging("chatty")

    assert logging.getLogger().level == logging.WARNING
