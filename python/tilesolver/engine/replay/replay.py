"""Replays a move list against a board, one tile slide at a time."""

from __future__ import annotations

from tilesolver.errors import OutOfRangeError
from tilesolver.models.board import Board, Direction


class Replay:
    """Tracks the board and move count while a move list is applied."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0

    @classmethod
    def from_board(cls, board: Board) -> Replay:
        return cls(board)

    # -- movement (direction = where the *tile* moves) ------------------------

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was valid; an invalid move leaves the
        board untouched.
        """
        try:
            self.board = self.board.slide(direction)
        except OutOfRangeError:
            return False
        self.moves += 1
        return True

    def apply(self, directions: list[Direction]) -> bool:
        """Apply every move in order; stop at the first invalid one."""
        return all(self.move(d) for d in directions)

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.board.is_goal()
