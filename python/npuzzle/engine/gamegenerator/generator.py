"""Generates solvable N-puzzle boards."""

from __future__ import annotations

import random

from npuzzle.models.board import Board, legal_moves


class GameGenerator:
    """Creates solvable puzzles by walking the blank away from the solved state."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (``tiles[i] == i``, blank top-left)."""
        return Board.solved(size)

    @staticmethod
    def scramble(size: int, steps: int, seed: int | None = None) -> Board:
        """Return the board reached by *steps* random blank moves from solved.

        The walk never immediately undoes its previous move, so every board
        it produces is reachable and therefore solvable.
        """
        rng = random.Random(seed)
        tiles = list(range(size * size))
        blank = 0
        prev: int | None = None

        for _ in range(steps):
            targets = [t for _, t in legal_moves(blank, size)]
            if prev in targets and len(targets) > 1:
                targets.remove(prev)
            if not targets:
                break
            target = rng.choice(targets)
            tiles[blank], tiles[target] = tiles[target], 0
            prev, blank = blank, target

        return Board(size=size, tiles=tuple(tiles))
