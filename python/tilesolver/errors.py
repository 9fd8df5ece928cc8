"""Exception hierarchy shared by the board, queue, solver and CLI."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error raised by tilesolver."""


class InvalidArgumentError(PuzzleError, ValueError):
    """A missing board or a malformed tile matrix."""


class PuzzleFormatError(InvalidArgumentError):
    """An input file that does not follow the puzzle text format."""


class OutOfRangeError(PuzzleError, IndexError):
    """A grid coordinate (or blank move) outside the board."""


class UnsolvableError(PuzzleError):
    """The board fails the parity test and can never reach the goal."""


class UnderflowError(PuzzleError, IndexError):
    """Peek or extract on an empty priority queue."""


class ResourceExhaustedError(PuzzleError, RuntimeError):
    """The search went past its node-count or wall-clock budget."""

    def __init__(self, message: str, expanded: int, elapsed: float) -> None:
        super().__init__(message)
        self.expanded = expanded
        self.elapsed = elapsed
