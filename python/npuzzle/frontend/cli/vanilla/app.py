"""Vanilla terminal frontend: plain text, no third-party dependencies.

Prints the cost and one move per line, or the failure marker.
"""

from __future__ import annotations

import sys
from typing import TextIO

from npuzzle.engine.gameio import format_solution
from npuzzle.engine.gamesolver import Solution, Solver
from npuzzle.models.board import Board


def run(board: Board, out: TextIO | None = None) -> Solution | None:
    """Solve *board* and write the result in the plain output format."""
    solution = Solver.solve(board)
    stream = out if out is not None else sys.stdout
    stream.write(format_solution(solution))
    stream.flush()
    return solution
