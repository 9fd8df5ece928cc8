"""Vanilla terminal frontend: plain text, no third-party dependencies.

Prints exactly the scripted output of the board printer and the solver
driver, so it can be diffed against reference transcripts.
"""

from __future__ import annotations

from tilesolver.engine.solver import Solver
from tilesolver.models.board import Board


def _flag(value: bool) -> str:
    return "true" if value else "false"


def show_report(board: Board) -> None:
    """Heuristics, goal and solvability tests, then every neighbor."""
    print(board.hamming())
    print(board.manhattan())
    print(_flag(board.is_goal()))
    print(_flag(board.is_solvable()))
    for neighbor in board.neighbors():
        print(neighbor)


def show_solution(solver: Solver) -> None:
    print(f"Minimum number of moves = {solver.moves()}")
    for board in solver.solution():
        print(board)


def show_unsolvable(board: Board) -> None:
    print("Unsolvable puzzle")
