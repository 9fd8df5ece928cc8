"""Sliding-tile puzzle command line.

Usage::

    puzzle-board puzzle.txt              # heuristics + neighbors
    puzzle-solve puzzle.txt              # shortest solution
    puzzle-solve puzzle.txt -f rich      # Rich tables instead of plain text
    tilesolver solve puzzle.txt --heuristic hamming --max-expansions 100000
"""

import importlib
import logging
from enum import StrEnum
from pathlib import Path
from types import ModuleType
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from tilesolver.config import Heuristic, SolverSettings
from tilesolver.engine.solver import Solver
from tilesolver.errors import PuzzleError, ResourceExhaustedError, UnsolvableError
from tilesolver.models.board import Board
from tilesolver.models.puzzlefile import read_board

logger = logging.getLogger(__name__)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "tilesolver.frontend.cli.vanilla.app",
    Frontend.rich: "tilesolver.frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    pkg_logger = logging.getLogger("tilesolver")
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    pkg_logger.handlers[:] = [handler]
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _frontend(frontend: Frontend) -> ModuleType:
    return importlib.import_module(_RUNNERS[frontend])


def _load(path: Path) -> Board:
    try:
        return read_board(path)
    except (OSError, PuzzleError) as exc:
        typer.echo(f"Error: cannot read {path}: {exc}", err=True)
        raise typer.Exit(code=1) from exc


# -- commands -----------------------------------------------------------------

_PUZZLE = typer.Argument(..., help="Puzzle file: N followed by N² tiles.")
_FRONTEND = typer.Option(
    Frontend.vanilla, "-f", "--frontend",
    envvar="TILESOLVER_FRONTEND",
    help="Output style.",
)
_VERBOSE = typer.Option(False, "-v", "--verbose", help="Log search progress to stderr.")


def board(
    puzzle: Path = _PUZZLE,
    frontend: Frontend = _FRONTEND,
    verbose: bool = _VERBOSE,
) -> None:
    """Print heuristics, goal and solvability tests, and all neighbors."""
    _configure_logging(verbose)
    initial = _load(puzzle)
    logger.debug("Loaded %d×%d board from %s", initial.n, initial.n, puzzle)
    _frontend(frontend).show_report(initial)


def solve(
    puzzle: Path = _PUZZLE,
    frontend: Frontend = _FRONTEND,
    heuristic: Heuristic = typer.Option(
        Heuristic.manhattan, "--heuristic",
        envvar="TILESOLVER_HEURISTIC",
        help="Priority function for A*.",
    ),
    max_expansions: Optional[int] = typer.Option(
        None, "--max-expansions",
        min=0,
        envvar="TILESOLVER_MAX_EXPANSIONS",
        help="Give up after expanding this many nodes.",
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout",
        min=0,
        envvar="TILESOLVER_TIMEOUT",
        help="Give up after this many seconds.",
    ),
    verbose: bool = _VERBOSE,
) -> None:
    """Print the minimum number of moves and every board on the way."""
    _configure_logging(verbose)
    initial = _load(puzzle)
    runner = _frontend(frontend)

    if not initial.is_solvable():
        runner.show_unsolvable(initial)
        return

    settings = SolverSettings(
        heuristic=heuristic,
        max_expansions=max_expansions,
        timeout_sec=timeout,
    )
    try:
        solver = Solver(initial, settings)
    except ResourceExhaustedError as exc:
        typer.echo(
            f"Gave up: {exc} ({exc.expanded} nodes expanded, {exc.elapsed:.2f}s)",
            err=True,
        )
        raise typer.Exit(code=2) from exc
    except UnsolvableError:
        runner.show_unsolvable(initial)
        return
    runner.show_solution(solver)


# -- CLI entry points ---------------------------------------------------------

app = typer.Typer(add_completion=False, help="Sliding-tile puzzle A* solver.")
app.command("board")(board)
app.command("solve")(solve)

board_app = typer.Typer(add_completion=False)
board_app.command()(board)

solve_app = typer.Typer(add_completion=False)
solve_app.command()(solve)


if __name__ == "__main__":
    app()
