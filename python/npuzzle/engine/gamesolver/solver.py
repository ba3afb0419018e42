"""N-puzzle solver — best-first (A*-style) search over flat boards.

States live in a flat arena and refer to their parent by integer handle,
so the search tree never holds recursive references and the path is
rebuilt with a plain loop.  The frontier is a ``heapq`` ordered by
``depth + heuristic``; equal estimates pop in insertion order, which is an
implementation detail rather than part of the result.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import math
from dataclasses import dataclass

from npuzzle.models.board import Board, BoardState, Direction, legal_moves

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchStats:
    expanded: int
    generated: int
    pushed: int
    peak_frontier: int
    visited: int


@dataclass(frozen=True)
class Solution:
    """A solved search: total cost and the blank moves that reach the goal."""

    cost: int
    moves: tuple[Direction, ...]
    stats: SearchStats


class _Search:
    """State for one ``Solver.solve`` call."""

    def __init__(self, board: Board) -> None:
        self.size = board.size
        self.arena: list[BoardState] = [BoardState.initial(board.tiles)]
        self.frontier: list[tuple[int, int, int]] = []
        self.visited: set[BoardState] = set()
        self._counter = itertools.count()

        self.expanded = 0
        self.generated = 0
        self.pushed = 0
        self.peak_frontier = 0

    def _push(self, handle: int) -> None:
        state = self.arena[handle]
        heapq.heappush(self.frontier, (state.estimate, next(self._counter), handle))
        self.pushed += 1
        self.peak_frontier = max(self.peak_frontier, len(self.frontier))

    def _expand(self, handle: int) -> None:
        state = self.arena[handle]
        self.expanded += 1
        for direction, _ in legal_moves(state.blank_index, self.size):
            child = state.successor(direction, self.size, handle)
            self.generated += 1
            if child in self.visited:
                continue
            self.arena.append(child)
            self._push(len(self.arena) - 1)

    def run(self) -> int | None:
        """Search and return the arena handle of the best goal, if any."""
        best: int | None = None
        best_cost: float = math.inf

        self._push(0)
        while self.frontier and self.frontier[0][0] < best_cost:
            estimate, _, handle = heapq.heappop(self.frontier)
            state = self.arena[handle]

            # Stale duplicate: the same board was already processed with an
            # estimate no larger than this one.
            if state in self.visited:
                continue

            if state.heuristic == 0:
                if estimate < best_cost:
                    best = handle
                    best_cost = estimate
            else:
                self._expand(handle)

            self.visited.add(state)

        return best

    def path(self, handle: int) -> tuple[Direction, ...]:
        moves: list[Direction] = []
        node: int | None = handle
        while node is not None:
            state = self.arena[node]
            if state.move is not None:
                moves.append(state.move)
            node = state.parent
        moves.reverse()
        return tuple(moves)

    def stats(self) -> SearchStats:
        return SearchStats(
            expanded=self.expanded,
            generated=self.generated,
            pushed=self.pushed,
            peak_frontier=self.peak_frontier,
            visited=len(self.visited),
        )


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(board: Board) -> Solution | None:
        """Return the cheapest solution found for *board*, or ``None``.

        ``None`` means the search space was exhausted without reaching the
        solved board (e.g. a board of the wrong permutation parity).
        """
        search = _Search(board)
        goal = search.run()
        stats = search.stats()

        if goal is None:
            log.debug("No solution for %s (%s)", board.tiles, stats)
            return None

        state = search.arena[goal]
        log.debug("Solved %s in %d moves (%s)", board.tiles, state.estimate, stats)
        return Solution(cost=state.estimate, moves=search.path(goal), stats=stats)

    @staticmethod
    def solve_flat(size: int, tiles: list[int] | tuple[int, ...]) -> Solution | None:
        """Validate a flat tile list and solve it."""
        return Solver.solve(Board.from_flat(size, tiles))

    @staticmethod
    def hint(board: Board) -> Direction | None:
        """Return the first move of a solution, or ``None`` if solved / unsolvable."""
        if board.is_solved():
            return None

        solution = Solver.solve(board)
        return solution.moves[0] if solution else None
