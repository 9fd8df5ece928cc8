"""A* solver for the sliding-tile puzzle."""

from __future__ import annotations

import logging
from collections.abc import Callable
from time import perf_counter

from tilesolver.config import Heuristic, SolverSettings
from tilesolver.engine.minpq import HeapMinPQ
from tilesolver.errors import (
    InvalidArgumentError,
    ResourceExhaustedError,
    UnsolvableError,
)
from tilesolver.models.board import Board, Direction
from tilesolver.models.node import SearchNode

logger = logging.getLogger(__name__)

NodeOrder = Callable[[SearchNode], tuple[int, int]]


def _hamming_key(node: SearchNode) -> tuple[int, int]:
    return (node.hamming_priority, node.depth)


def _manhattan_key(node: SearchNode) -> tuple[int, int]:
    return (node.manhattan_priority, node.depth)


_ORDERS: dict[Heuristic, NodeOrder] = {
    Heuristic.hamming: _hamming_key,
    Heuristic.manhattan: _manhattan_key,
}


class Solver:
    """Runs A* from *initial* to the goal at construction time.

    Nodes are expanded in order of ``heuristic(board) + depth``, ties going
    to the shallower node.  After construction :meth:`moves` holds the
    optimal move count and :meth:`solution` the boards from the initial
    board to the goal.

    Raises :class:`InvalidArgumentError` for a missing board,
    :class:`UnsolvableError` when the board fails the parity test and
    :class:`ResourceExhaustedError` when a budget from *settings* runs out.
    """

    def __init__(
        self, initial: Board | None, settings: SolverSettings | None = None
    ) -> None:
        if initial is None:
            raise InvalidArgumentError("Solver needs an initial board, got None.")
        settings = (settings or SolverSettings()).validate()
        if not initial.is_solvable():
            raise UnsolvableError(f"Board is not solvable:\n{initial}")

        self.initial = initial
        self.settings = settings
        self.expanded = 0
        self.generated = 0
        self.elapsed = 0.0

        goal = self._search(Solver.order_for(settings.heuristic))
        self._path = goal.path()

    # -- search ---------------------------------------------------------------

    def _search(self, order: NodeOrder) -> SearchNode:
        settings = self.settings
        root = SearchNode(self.initial)
        unexplored: HeapMinPQ[SearchNode] = HeapMinPQ(key=order)
        unexplored.insert(root)
        self.generated = 1

        best_depth: dict[Board, int] = {root.board: 0}
        closed: set[Board] = set()
        t0 = perf_counter()

        logger.debug(
            "A* start: %d×%d board, heuristic=%s, initial priority=%d",
            self.initial.n,
            self.initial.n,
            settings.heuristic,
            order(root)[0],
        )

        while not unexplored.is_empty():
            node = unexplored.del_min()

            if node.board.is_goal():
                self.elapsed = perf_counter() - t0
                logger.debug(
                    "A* done: %d moves, %d expanded, %d generated in %.3fs",
                    node.depth,
                    self.expanded,
                    self.generated,
                    self.elapsed,
                )
                return node

            if settings.detect_duplicates:
                if node.board in closed:
                    continue
                closed.add(node.board)

            self._check_budget(t0)
            self.expanded += 1

            grandparent = node.parent.board if node.parent is not None else None
            for direction, board in node.board.successors():
                if settings.skip_grandparent and board == grandparent:
                    continue
                depth = node.depth + 1
                if settings.detect_duplicates:
                    if depth >= best_depth.get(board, depth + 1):
                        continue
                    best_depth[board] = depth
                unexplored.insert(node.child(direction, board))
                self.generated += 1

        self.elapsed = perf_counter() - t0
        raise UnsolvableError("Search space exhausted without reaching the goal.")

    def _check_budget(self, t0: float) -> None:
        settings = self.settings
        if (
            settings.max_expansions is not None
            and self.expanded >= settings.max_expansions
        ):
            elapsed = perf_counter() - t0
            logger.warning(
                "Expansion budget of %d nodes exhausted", settings.max_expansions
            )
            raise ResourceExhaustedError(
                f"Search exceeded {settings.max_expansions} node expansions.",
                expanded=self.expanded,
                elapsed=elapsed,
            )
        if settings.timeout_sec is not None:
            elapsed = perf_counter() - t0
            if elapsed > settings.timeout_sec:
                logger.warning(
                    "Time budget of %.3fs exhausted after %d expansions",
                    settings.timeout_sec,
                    self.expanded,
                )
                raise ResourceExhaustedError(
                    f"Search exceeded {settings.timeout_sec}s.",
                    expanded=self.expanded,
                    elapsed=elapsed,
                )

    # -- results --------------------------------------------------------------

    def moves(self) -> int:
        """Minimum number of moves to solve the initial board."""
        return self._path[-1].depth

    def solution(self) -> list[Board]:
        """Boards of a shortest solution, initial and goal included."""
        return [node.board for node in self._path]

    def directions(self) -> list[Direction]:
        """Tile moves that carry the initial board to the goal."""
        return [node.move for node in self._path[1:] if node.move is not None]

    # -- orderings ------------------------------------------------------------

    @staticmethod
    def hamming_order() -> NodeOrder:
        return _hamming_key

    @staticmethod
    def manhattan_order() -> NodeOrder:
        return _manhattan_key

    @staticmethod
    def order_for(heuristic: Heuristic) -> NodeOrder:
        return _ORDERS[Heuristic(heuristic)]

    # -- convenience ----------------------------------------------------------

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state."""
        return board.is_solvable()

    @staticmethod
    def solve(board: Board, settings: SolverSettings | None = None) -> list[Direction]:
        """Return a shortest move list for *board* (``[]`` when already solved)."""
        return Solver(board, settings).directions()

    @staticmethod
    def hint(board: Board) -> Direction | None:
        """Return the single best next move, or ``None`` if solved / unsolvable."""
        if board.is_goal() or not board.is_solvable():
            return None
        moves = Solver.solve(board)
        return moves[0] if moves else None
