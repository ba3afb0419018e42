"""Rich terminal frontend with tables and panels.

Uses the ``rich`` library to show the starting board, the move sequence,
the replayed final board and the search statistics.  Shares the backend
with the vanilla frontend.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from npuzzle.engine.gameplay import GamePlay
from npuzzle.engine.gamesolver import SearchStats, Solution, Solver
from npuzzle.models.board import Board

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r * board.size + c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _render_moves(solution: Solution) -> Text:
    moves = Text()
    if not solution.moves:
        moves.append("Already solved.", style="green")
        return moves
    for i, direction in enumerate(solution.moves, 1):
        if i > 1:
            moves.append(" → ", style="dim")
        moves.append(direction.value, style="bold cyan")
    return moves


def _render_stats(stats: SearchStats) -> Text:
    text = Text()
    for label, value in (
        ("Expanded", stats.expanded),
        ("Generated", stats.generated),
        ("Peak frontier", stats.peak_frontier),
        ("Visited", stats.visited),
    ):
        text.append(f"  {label}: ", style="dim")
        text.append(str(value), style="bold yellow")
    return text


# -- screens ------------------------------------------------------------------


def _draw_solution(board: Board, solution: Solution, out: Console) -> None:
    game = GamePlay(board)
    game.play(solution.moves)

    boards = Table.grid(padding=(0, 4))
    boards.add_row(
        Align.center(Text("Start", style="bold")),
        Align.center(Text("Final", style="bold")),
    )
    boards.add_row(_render_board(board), _render_board(game.board))

    cost = Text()
    cost.append("  Cost: ", style="dim")
    cost.append(str(solution.cost), style="bold yellow")

    group = Group(
        Align.center(boards),
        Text(""),
        Align.center(cost),
        Align.center(_render_moves(solution)),
        Text(""),
        Align.center(_render_stats(solution.stats)),
    )

    panel = Panel(
        group,
        title=f"[bold green]N-Puzzle  {board.size}×{board.size}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )
    out.print()
    out.print(Align.center(panel))


def _draw_failure(board: Board, out: Console) -> None:
    group = Group(
        Align.center(_render_board(board)),
        Text(""),
        Align.center(Text("No solution found.", style="bold red")),
    )
    panel = Panel(
        group,
        title=f"[bold red]N-Puzzle  {board.size}×{board.size}[/bold red]",
        border_style="red",
        padding=(1, 2),
    )
    out.print()
    out.print(Align.center(panel))


# -- public API ---------------------------------------------------------------


def run(board: Board, out: Console | None = None) -> Solution | None:
    """Solve *board* and render the outcome."""
    target = out if out is not None else console
    with target.status("[cyan]Searching…[/cyan]"):
        solution = Solver.solve(board)

    if solution is None:
        _draw_failure(board, target)
    else:
        _draw_solution(board, solution, target)
    return solution
