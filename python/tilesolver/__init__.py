"""A* solver for the N×N sliding-tile puzzle."""

from tilesolver.config import Heuristic, SolverSettings
from tilesolver.engine.solver import Solver
from tilesolver.errors import (
    InvalidArgumentError,
    OutOfRangeError,
    PuzzleError,
    PuzzleFormatError,
    ResourceExhaustedError,
    UnderflowError,
    UnsolvableError,
)
from tilesolver.models import Board, Direction, SearchNode, parse_board, read_board

__all__ = [
    "Board",
    "Direction",
    "Heuristic",
    "InvalidArgumentError",
    "OutOfRangeError",
    "PuzzleError",
    "PuzzleFormatError",
    "ResourceExhaustedError",
    "SearchNode",
    "Solver",
    "SolverSettings",
    "UnderflowError",
    "UnsolvableError",
    "parse_board",
    "read_board",
]
