"""Rich terminal frontend with tables and panels.

Renders the same information as the vanilla frontend using the ``rich``
library.  Tiles already in their goal cell are highlighted in green.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tilesolver.engine.solver import Solver
from tilesolver.models.board import Board

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size() - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.n):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _stats(board: Board) -> Text:
    stats = Text()
    stats.append("Hamming: ", style="dim")
    stats.append(str(board.hamming()), style="bold yellow")
    stats.append("    Manhattan: ", style="dim")
    stats.append(str(board.manhattan()), style="bold yellow")
    return stats


def _yes_no(value: bool) -> Text:
    return Text("yes", style="bold green") if value else Text("no", style="bold red")


# -- screens ------------------------------------------------------------------


def show_report(board: Board) -> None:
    checks = Text()
    checks.append("Goal: ", style="dim")
    checks.append_text(_yes_no(board.is_goal()))
    checks.append("    Solvable: ", style="dim")
    checks.append_text(_yes_no(board.is_solvable()))

    panel = Panel(
        Group(
            Align.center(_render_board(board)),
            Align.center(_stats(board)),
            Align.center(checks),
        ),
        title=f"[bold cyan]Board  {board.n}×{board.n}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print(panel)

    neighbors = Table(show_header=False, box=None, padding=(0, 2))
    boards = board.neighbors()
    for _ in boards:
        neighbors.add_column(justify="center")
    neighbors.add_row(*(_render_board(b) for b in boards))
    neighbors.add_row(*(_stats(b) for b in boards))
    console.print(
        Panel(
            neighbors,
            title=f"[bold]Neighbors ({len(boards)})[/bold]",
            border_style="dim",
        )
    )


def show_solution(solver: Solver) -> None:
    summary = Text()
    summary.append("Minimum number of moves = ", style="dim")
    summary.append(str(solver.moves()), style="bold green")
    summary.append(
        f"    ({solver.expanded} expanded, {solver.generated} generated, "
        f"{solver.elapsed:.3f}s)",
        style="dim",
    )
    console.print(summary)

    directions = [None, *solver.directions()]
    for step, (board, direction) in enumerate(zip(solver.solution(), directions)):
        title = f"Move {step}"
        if direction is not None:
            title += f"  ({direction.value})"
        style = "bold green" if board.is_goal() else "cyan"
        console.print(
            Panel.fit(
                _render_board(board),
                title=f"[{style}]{title}[/{style}]",
                border_style=style,
            )
        )


def show_unsolvable(board: Board) -> None:
    console.print(
        Panel.fit(
            _render_board(board),
            title="[bold red]Unsolvable puzzle[/bold red]",
            border_style="red",
        )
    )
