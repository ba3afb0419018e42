#!/usr/bin/env python3
"""N-Puzzle Solver.

Usage::

    python main.py board.txt               # plain output: cost, then moves
    python main.py -f rich < board.txt     # Rich rendering
    python main.py --scramble 20 -s 3      # solve a generated 3×3 board
"""

import importlib
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

from npuzzle.engine.gamegenerator import GameGenerator
from npuzzle.engine.gameio import InputError, format_board, parse_board
from npuzzle.log import setup_logging

# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "npuzzle.frontend.cli.vanilla.app",
    Frontend.rich: "npuzzle.frontend.cli.rich.app",
}

EXIT_NO_SOLUTION = 1
EXIT_BAD_INPUT = 2


# -- helpers ------------------------------------------------------------------


def _read_input(path: Optional[Path]) -> str:
    if path is None or str(path) == "-":
        return sys.stdin.read()
    return path.read_text()


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    path: Optional[Path] = typer.Argument(
        None,
        help="Board file (k, then k*k tiles). Reads stdin when omitted or '-'.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Output frontend.",
    ),
    scramble: Optional[int] = typer.Option(
        None, "--scramble",
        min=0,
        help="Solve a board scrambled by this many random moves.",
    ),
    size: int = typer.Option(
        3, "-s", "--size",
        min=1,
        help="Grid size for --scramble.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Random seed for --scramble.",
    ),
    show_input: bool = typer.Option(
        False, "--show-input",
        help="Print the generated board to stderr (with --scramble).",
    ),
    log_level: str = typer.Option(
        "WARNING", "--log-level",
        envvar="LOGLEVEL",
        help="Logging level for diagnostics on stderr.",
    ),
) -> None:
    """Solve an N-puzzle board with best-first search."""
    log = setup_logging(log_level)

    if scramble is not None:
        board = GameGenerator.scramble(size, scramble, seed=seed)
        if show_input:
            typer.echo(format_board(board), err=True, nl=False)
    else:
        try:
            board = parse_board(_read_input(path))
        except (InputError, OSError) as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(EXIT_BAD_INPUT)

    log.debug("Solving %s with the %s frontend", board.tiles, frontend.value)
    mod = importlib.import_module(_RUNNERS[frontend])
    solution = mod.run(board)

    if solution is None:
        raise typer.Exit(EXIT_NO_SOLUTION)


if __name__ == "__main__":
    app()
