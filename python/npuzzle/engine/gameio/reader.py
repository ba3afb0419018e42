"""Parses the puzzle input format: ``k`` followed by ``k*k`` tile values."""

from __future__ import annotations

from typing import TextIO

from npuzzle.models.board import Board


class InputError(ValueError):
    """Raised when puzzle input text is malformed."""


def parse_board(text: str) -> Board:
    """Parse whitespace-separated input into a validated ``Board``.

    Example::

        parse_board("3\\n1 2 3\\n4 5 6\\n7 8 0\\n")
    """
    tokens = text.split()
    if not tokens:
        raise InputError("Input is empty; expected the board size first.")

    try:
        values = [int(tok) for tok in tokens]
    except ValueError as exc:
        raise InputError(f"Input must contain only integers ({exc}).") from exc

    size, flat = values[0], values[1:]
    try:
        return Board.from_flat(size, flat)
    except ValueError as exc:
        raise InputError(str(exc)) from exc


def read_board(stream: TextIO) -> Board:
    return parse_board(stream.read())
