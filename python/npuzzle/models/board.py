"""Board model for the N-puzzle solver.

Boards are flat, row-major tuples.  ``0`` is the blank and the solved board
is ``tiles[i] == i`` for every index, so the blank ends up in the top-left
corner.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class Direction(StrEnum):
    """Direction the *blank* travels (not the tile it swaps with)."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def inverse(self) -> Direction:
        return _INVERSE[self]

    def offset(self, size: int) -> int:
        """Flat-index delta the blank travels on a ``size``×``size`` board."""
        return {
            Direction.UP: -size,
            Direction.DOWN: size,
            Direction.LEFT: -1,
            Direction.RIGHT: 1,
        }[self]


_INVERSE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

# Successor generation order.
MOVE_ORDER = (Direction.UP, Direction.DOWN, Direction.RIGHT, Direction.LEFT)


# -- free helpers -------------------------------------------------------------


def heuristic(tiles: tuple[int, ...]) -> int:
    """Sum of ``|i - tiles[i]|`` over the flattened board.

    This is L1 distance in flat index space, not 2D Manhattan distance.  It
    is zero only on the solved board and it overestimates the remaining
    moves: a board one vertical move from solved already scores ``2 * size``.
    """
    return sum(abs(i - t) for i, t in enumerate(tiles))


def blank_target(blank_index: int, direction: Direction, size: int) -> int | None:
    """Index the blank lands on after *direction*, or ``None`` if off-board."""
    row, col = divmod(blank_index, size)
    if direction is Direction.UP and row == 0:
        return None
    if direction is Direction.DOWN and row == size - 1:
        return None
    if direction is Direction.RIGHT and col == size - 1:
        return None
    if direction is Direction.LEFT and col == 0:
        return None
    return blank_index + direction.offset(size)


def legal_moves(blank_index: int, size: int) -> list[tuple[Direction, int]]:
    """Return ``(direction, target_index)`` for each legal blank move."""
    moves: list[tuple[Direction, int]] = []
    for direction in MOVE_ORDER:
        target = blank_target(blank_index, direction, size)
        if target is not None:
            moves.append((direction, target))
    return moves


# -- validated input board ----------------------------------------------------


@dataclass(frozen=True)
class Board:
    """A validated puzzle board of ``size``×``size`` flat tiles."""

    size: int
    tiles: tuple[int, ...]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: list[int] | tuple[int, ...]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 8, 0])
        """
        if size < 1:
            raise ValueError(f"Board size must be at least 1, got {size}.")
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(size * size)):
            raise ValueError(
                f"Tiles must be a permutation of 0..{size * size - 1}."
            )
        return cls(size=size, tiles=tuple(flat))

    @classmethod
    def solved(cls, size: int) -> Board:
        return cls(size=size, tiles=tuple(range(size * size)))

    # -- queries --------------------------------------------------------------

    @property
    def blank_index(self) -> int:
        return self.tiles.index(0)

    def rows(self) -> list[tuple[int, ...]]:
        n = self.size
        return [self.tiles[r * n : (r + 1) * n] for r in range(n)]

    def is_solved(self) -> bool:
        return all(i == t for i, t in enumerate(self.tiles))

    def is_tile_correct(self, index: int) -> bool:
        return self.tiles[index] == index


# -- search node --------------------------------------------------------------


@dataclass(frozen=True, eq=False)
class BoardState:
    """One node of the search graph.

    Identity is the tile layout only: two states with the same ``tiles``
    compare equal whatever their depth, heuristic or parent.  ``parent`` is
    an integer handle into the solver's state arena.
    """

    tiles: tuple[int, ...]
    blank_index: int
    depth: int = 0
    parent: int | None = None
    move: Direction | None = None
    heuristic: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "heuristic", heuristic(self.tiles))

    @classmethod
    def initial(cls, tiles: tuple[int, ...]) -> BoardState:
        return cls(tiles=tiles, blank_index=tiles.index(0))

    @property
    def estimate(self) -> int:
        """Total estimate ``depth + heuristic``."""
        return self.depth + self.heuristic

    def successor(self, direction: Direction, size: int, handle: int) -> BoardState:
        """Move the blank one step; *handle* is this state's arena slot."""
        target = blank_target(self.blank_index, direction, size)
        if target is None:
            raise ValueError(
                f"Blank at index {self.blank_index} cannot move "
                f"{direction.value} on a {size}×{size} board."
            )
        tiles = list(self.tiles)
        tiles[self.blank_index], tiles[target] = tiles[target], 0
        return BoardState(
            tiles=tuple(tiles),
            blank_index=target,
            depth=self.depth + 1,
            parent=handle,
            move=direction,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return self.tiles == other.tiles

    def __hash__(self) -> int:
        return hash(self.tiles)
