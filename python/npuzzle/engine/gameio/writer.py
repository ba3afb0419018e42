"""Formats solver results in the plain output format."""

from __future__ import annotations

from npuzzle.engine.gamesolver import Solution
from npuzzle.models.board import Board

NO_SOLUTION = "NO SOLUTION"


def format_solution(solution: Solution | None) -> str:
    """Cost on the first line, then one move label per line.

    A failed search renders as the single ``NO_SOLUTION`` line.
    """
    if solution is None:
        return NO_SOLUTION + "\n"
    lines = [str(solution.cost), *(move.value for move in solution.moves)]
    return "\n".join(lines) + "\n"


def format_board(board: Board) -> str:
    """Render *board* back into the input format."""
    lines = [str(board.size)]
    lines.extend(" ".join(str(v) for v in row) for row in board.rows())
    return "\n".join(lines) + "\n"
