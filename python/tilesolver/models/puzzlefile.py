"""Reader for the whitespace-delimited puzzle text format.

A puzzle file holds one integer N followed by the N² tiles in row-major
order, 0 standing for the blank::

    3
     0  1  3
     4  2  5
     7  8  6
"""

from __future__ import annotations

from pathlib import Path

from tilesolver.errors import InvalidArgumentError, PuzzleFormatError
from tilesolver.models.board import Board


def parse_board(text: str) -> Board:
    """Build a :class:`Board` from puzzle text."""
    tokens = text.split()
    if not tokens:
        raise PuzzleFormatError("Empty puzzle: expected N followed by N² tiles.")

    try:
        values = [int(tok) for tok in tokens]
    except ValueError as exc:
        raise PuzzleFormatError(f"Non-integer token in puzzle: {exc}") from exc

    n, tiles = values[0], values[1:]
    if n < 2:
        raise PuzzleFormatError(f"Board size must be at least 2, got {n}.")
    if len(tiles) != n * n:
        raise PuzzleFormatError(
            f"Expected {n * n} tiles for a {n}×{n} board, got {len(tiles)}."
        )

    try:
        return Board.from_flat(n, tiles)
    except InvalidArgumentError as exc:
        raise PuzzleFormatError(str(exc)) from exc


def read_board(path: Path) -> Board:
    """Read and parse a puzzle file.  ``OSError`` propagates unchanged."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise PuzzleFormatError(f"Puzzle file is not UTF-8 text: {exc}") from exc
    return parse_board(text)
