"""Board model for the sliding-tile puzzle."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from tilesolver.errors import InvalidArgumentError, OutOfRangeError


class Direction(StrEnum):
    """Direction a *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Where the blank ends up for each tile direction.  UP moves the tile
# below the blank upward, so the blank shifts down, and so on.  The
# insertion order is the neighbor order: blank down, right, up, left.
_BLANK_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.LEFT: (0, 1),
    Direction.DOWN: (-1, 0),
    Direction.RIGHT: (0, -1),
}


@dataclass(frozen=True)
class Board:
    """An immutable N×N tile configuration.

    Tiles are stored as a flat row-major tuple of ints; 0 is the blank.
    The blank position and both heuristic scores are computed once in
    ``__post_init__`` and never change afterwards.
    """

    n: int
    tiles: tuple[int, ...]

    _blank_index: int = field(init=False, repr=False, compare=False)
    _hamming: int = field(init=False, repr=False, compare=False)
    _manhattan: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        n = self.n
        tiles = tuple(self.tiles)
        if n < 2:
            raise InvalidArgumentError(f"Board size must be at least 2, got {n}.")
        if len(tiles) != n * n:
            raise InvalidArgumentError(
                f"Expected {n * n} tiles for a {n}×{n} board, got {len(tiles)}."
            )
        if sorted(tiles) != list(range(n * n)):
            raise InvalidArgumentError(
                f"Tiles must be a permutation of 0..{n * n - 1}."
            )

        blank_index = -1
        hamming = 0
        manhattan = 0
        for idx, val in enumerate(tiles):
            if val == 0:
                blank_index = idx
            elif idx != val - 1:
                hamming += 1
                r, c = divmod(idx, n)
                gr, gc = divmod(val - 1, n)
                manhattan += abs(r - gr) + abs(c - gc)

        object.__setattr__(self, "tiles", tiles)
        object.__setattr__(self, "_blank_index", blank_index)
        object.__setattr__(self, "_hamming", hamming)
        object.__setattr__(self, "_manhattan", manhattan)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Board:
        """Create a board from an N×N matrix, ``rows[i][j]`` = tile at (i, j)."""
        n = len(rows)
        for r, row in enumerate(rows):
            if len(row) != n:
                raise InvalidArgumentError(
                    f"Row {r} has {len(row)} tiles, expected {n}."
                )
        return cls(n=n, tiles=tuple(v for row in rows for v in row))

    @classmethod
    def from_flat(cls, n: int, flat: Iterable[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        return cls(n=n, tiles=tuple(flat))

    @classmethod
    def goal(cls, n: int) -> Board:
        """Return the goal board (tiles in order, blank bottom-right)."""
        return cls(n=n, tiles=tuple(range(1, n * n)) + (0,))

    # -- queries --------------------------------------------------------------

    def size(self) -> int:
        """Total number of cells, N²."""
        return self.n * self.n

    def __len__(self) -> int:
        return self.n * self.n

    def tile_at(self, row: int, col: int) -> int:
        if not (0 <= row < self.n and 0 <= col < self.n):
            raise OutOfRangeError(
                f"({row}, {col}) is outside a {self.n}×{self.n} board."
            )
        return self.tiles[row * self.n + col]

    def rows(self) -> tuple[tuple[int, ...], ...]:
        n = self.n
        return tuple(self.tiles[r * n : (r + 1) * n] for r in range(n))

    @property
    def blank_pos(self) -> tuple[int, int]:
        return divmod(self._blank_index, self.n)

    def hamming(self) -> int:
        """Number of non-blank tiles out of place."""
        return self._hamming

    def manhattan(self) -> int:
        """Sum of grid distances from each non-blank tile to its goal cell."""
        return self._manhattan

    def is_goal(self) -> bool:
        return self._hamming == 0

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tile_at(row, col)
        if val == 0:
            return row == self.n - 1 and col == self.n - 1
        return row * self.n + col == val - 1

    def inversions(self) -> int:
        """Count out-of-order pairs in row-major order, ignoring the blank."""
        flat = [v for v in self.tiles if v != 0]
        count = 0
        for i in range(len(flat)):
            for j in range(i + 1, len(flat)):
                if flat[j] < flat[i]:
                    count += 1
        return count

    def is_solvable(self) -> bool:
        """Return True if this board can reach the goal.

        Odd N: the inversion count must be even.  Even N: inversions plus
        the blank's row (0-based from the top) must be odd.
        """
        inversions = self.inversions()
        if self.n % 2 == 1:
            return inversions % 2 == 0
        return (inversions + self.blank_pos[0]) % 2 == 1

    # -- moves ----------------------------------------------------------------

    def slide(self, direction: Direction) -> Board:
        """Return the board after sliding a tile into the blank.

        Raises :class:`OutOfRangeError` when no tile sits on that side of
        the blank.
        """
        br, bc = self.blank_pos
        dr, dc = _BLANK_OFFSETS[direction]
        tr, tc = br + dr, bc + dc
        if not (0 <= tr < self.n and 0 <= tc < self.n):
            raise OutOfRangeError(
                f"No tile can move {direction.value} with the blank at ({br}, {bc})."
            )
        return self._swap_blank(tr * self.n + tc)

    def successors(self) -> list[tuple[Direction, Board]]:
        """Every legal move paired with the board it produces."""
        br, bc = self.blank_pos
        out: list[tuple[Direction, Board]] = []
        for direction, (dr, dc) in _BLANK_OFFSETS.items():
            tr, tc = br + dr, bc + dc
            if 0 <= tr < self.n and 0 <= tc < self.n:
                out.append((direction, self._swap_blank(tr * self.n + tc)))
        return out

    def neighbors(self) -> list[Board]:
        """Boards reachable in one move (blank down, right, up, left)."""
        return [board for _, board in self.successors()]

    def _swap_blank(self, target: int) -> Board:
        grid = list(self.tiles)
        bi = self._blank_index
        grid[bi], grid[target] = grid[target], grid[bi]
        return Board(n=self.n, tiles=tuple(grid))

    # -- text form ------------------------------------------------------------

    def __str__(self) -> str:
        lines = [str(self.n)]
        for row in self.rows():
            lines.append(" ".join(f"{v:2d}" for v in row))
        return "\n".join(lines) + "\n"
