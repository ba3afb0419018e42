"""Board model tests: validation, legal moves and state identity."""

from __future__ import annotations

import pytest

from npuzzle.models.board import (
    Board,
    BoardState,
    Direction,
    blank_target,
    legal_moves,
)


# -- Board --------------------------------------------------------------------


def test_from_flat_rows_and_blank() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 8, 0])

    assert board.rows() == [(1, 2, 3), (4, 5, 6), (7, 8, 0)]
    assert board.blank_index == 8
    assert not board.is_solved()
    assert board.is_tile_correct(0) is False


def test_solved_board() -> None:
    board = Board.solved(3)

    assert board.tiles == tuple(range(9))
    assert board.is_solved()
    assert all(board.is_tile_correct(i) for i in range(9))


@pytest.mark.parametrize(
    "size, flat",
    [
        (0, []),
        (2, [0, 1, 2]),
        (2, [0, 1, 2, 3, 4]),
        (2, [0, 1, 1, 3]),
        (2, [1, 2, 3, 4]),
    ],
)
def test_from_flat_rejects_invalid(size: int, flat: list[int]) -> None:
    with pytest.raises(ValueError):
        Board.from_flat(size, flat)


# -- moves --------------------------------------------------------------------


def test_legal_moves_in_corner_and_centre() -> None:
    assert legal_moves(0, 3) == [(Direction.DOWN, 3), (Direction.RIGHT, 1)]
    assert legal_moves(8, 3) == [(Direction.UP, 5), (Direction.LEFT, 7)]
    assert legal_moves(4, 3) == [
        (Direction.UP, 1),
        (Direction.DOWN, 7),
        (Direction.RIGHT, 5),
        (Direction.LEFT, 3),
    ]


def test_single_cell_board_has_no_moves() -> None:
    assert legal_moves(0, 1) == []


def test_blank_target_respects_row_edges() -> None:
    # Index 2 is the end of the first row; RIGHT must not wrap to index 3.
    assert blank_target(2, Direction.RIGHT, 3) is None
    assert blank_target(3, Direction.LEFT, 3) is None
    assert blank_target(3, Direction.RIGHT, 3) == 4


def test_inverse() -> None:
    for direction in Direction:
        assert direction.inverse.inverse is direction
        assert direction.inverse is not direction


# -- BoardState ---------------------------------------------------------------


def test_initial_state() -> None:
    state = BoardState.initial((1, 0, 2, 3))

    assert state.blank_index == 1
    assert state.depth == 0
    assert state.parent is None
    assert state.move is None
    assert state.heuristic == 2
    assert state.estimate == 2


def test_successor_swaps_blank_and_links_parent() -> None:
    state = BoardState.initial((0, 1, 2, 3, 4, 5, 6, 7, 8))

    child = state.successor(Direction.DOWN, 3, handle=7)

    assert child.tiles == (3, 1, 2, 0, 4, 5, 6, 7, 8)
    assert child.blank_index == 3
    assert child.depth == 1
    assert child.parent == 7
    assert child.move is Direction.DOWN
    assert child.heuristic == 6
    assert state.tiles == (0, 1, 2, 3, 4, 5, 6, 7, 8)


def test_successor_rejects_off_board_move() -> None:
    state = BoardState.initial((0, 1, 2, 3))

    with pytest.raises(ValueError):
        state.successor(Direction.UP, 2, handle=0)


def test_state_identity_is_tiles_only() -> None:
    a = BoardState(tiles=(1, 0, 2, 3), blank_index=1, depth=0)
    b = BoardState(tiles=(1, 0, 2, 3), blank_index=1, depth=5, parent=2, move=Direction.LEFT)
    c = BoardState(tiles=(0, 1, 2, 3), blank_index=0)

    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert len({a, b, c}) == 2


def test_state_is_immutable() -> None:
    state = BoardState.initial((0, 1, 2, 3))

    with pytest.raises(AttributeError):
        state.depth = 3  # type: ignore[misc]


@pytest.mark.parametrize("size", [2, 3, 5])
def test_offset_is_flat_index_delta(size: int) -> None:
    assert Direction.UP.offset(size) == -size
    assert Direction.DOWN.offset(size) == size
    assert Direction.LEFT.offset(size) == -1
    assert Direction.RIGHT.offset(size) == 1
    for direction in Direction:
        assert direction.offset(size) == -direction.inverse.offset(size)


def test_blank_target_follows_offset_inside_board() -> None:
    centre = 4
    for direction in Direction:
        assert blank_target(centre, direction, 3) == centre + direction.offset(3)
