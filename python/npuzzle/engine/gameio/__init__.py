from npuzzle.engine.gameio.reader import InputError, parse_board, read_board
from npuzzle.engine.gameio.writer import NO_SOLUTION, format_board, format_solution

__all__ = [
    "NO_SOLUTION",
    "InputError",
    "format_board",
    "format_solution",
    "parse_board",
    "read_board",
]
