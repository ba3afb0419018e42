"""Applies blank moves to a board and checks the win condition."""

from __future__ import annotations

from npuzzle.models.board import Board, Direction, blank_target


class GamePlay:
    """Replays a move sequence on a mutable copy of a board."""

    def __init__(self, board: Board) -> None:
        self.size = board.size
        self._tiles = list(board.tiles)
        self._blank = board.blank_index
        self.moves: int = 0

    # -- movement (direction = where the *blank* moves) -----------------------

    def move(self, direction: Direction) -> bool:
        """Swap the blank with its neighbour in *direction*.

        Returns True if the move was valid.
        """
        target = blank_target(self._blank, direction, self.size)
        if target is None:
            return False

        self._tiles[self._blank], self._tiles[target] = self._tiles[target], 0
        self._blank = target
        self.moves += 1
        return True

    def play(self, moves: list[Direction] | tuple[Direction, ...]) -> bool:
        """Apply *moves* in order, stopping at the first invalid one."""
        return all(self.move(direction) for direction in moves)

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Board:
        return Board(size=self.size, tiles=tuple(self._tiles))

    @property
    def is_won(self) -> bool:
        return all(i == t for i, t in enumerate(self._tiles))
