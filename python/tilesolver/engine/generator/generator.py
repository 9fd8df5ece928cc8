"""Generates goal boards and random solvable boards."""

from __future__ import annotations

import random

from tilesolver.errors import InvalidArgumentError
from tilesolver.models.board import Board


class PuzzleGenerator:
    """Creates solvable puzzles by walking the blank away from the goal."""

    @staticmethod
    def solved(n: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.goal(n)

    @staticmethod
    def scramble(board: Board, steps: int, rng: random.Random) -> Board:
        """Return *board* after *steps* random moves with no immediate undo."""
        previous: Board | None = None
        for _ in range(steps):
            neighbors = board.neighbors()
            if previous in neighbors and len(neighbors) > 1:
                neighbors.remove(previous)
            previous, board = board, rng.choice(neighbors)
        return board

    @staticmethod
    def generate(n: int, steps: int | None = None, seed: int | None = None) -> Board:
        """Return a random *solvable* board of size *n* that is not the goal."""
        rng = random.Random(seed)
        if steps is None:
            steps = n * n * 100
        if steps < 1:
            raise InvalidArgumentError(f"steps must be >= 1, got {steps}.")
        board = PuzzleGenerator.scramble(PuzzleGenerator.solved(n), steps, rng)
        # A walk can close a loop back onto the goal; one more move leaves it.
        if board.is_goal():
            board = rng.choice(board.neighbors())
        return board

    @staticmethod
    def unsolvable_variant(board: Board) -> Board:
        """Swap the first two non-blank tiles, flipping solvability."""
        tiles = list(board.tiles)
        i, j = [k for k, v in enumerate(tiles) if v != 0][:2]
        tiles[i], tiles[j] = tiles[j], tiles[i]
        return Board.from_flat(board.n, tiles)
