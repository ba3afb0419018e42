from npuzzle.models.board import (
    MOVE_ORDER,
    Board,
    BoardState,
    Direction,
    blank_target,
    heuristic,
    legal_moves,
)

__all__ = [
    "MOVE_ORDER",
    "Board",
    "BoardState",
    "Direction",
    "blank_target",
    "heuristic",
    "legal_moves",
]
