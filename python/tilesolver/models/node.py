"""Search-tree node used by the A* solver."""

from __future__ import annotations

from dataclasses import dataclass, field

from tilesolver.models.board import Board, Direction


@dataclass(frozen=True, eq=False)
class SearchNode:
    """A board plus the path that reached it.

    ``depth`` is the number of moves from the root (the ``g`` of
    ``f = g + h``); ``move`` is the tile direction that produced this
    board from its parent.  Both priorities are cached at construction.
    """

    board: Board
    parent: SearchNode | None = field(default=None, repr=False)
    depth: int = 0
    move: Direction | None = None

    hamming_priority: int = field(init=False, repr=False)
    manhattan_priority: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "hamming_priority", self.board.hamming() + self.depth)
        object.__setattr__(self, "manhattan_priority", self.board.manhattan() + self.depth)

    def child(self, direction: Direction, board: Board) -> SearchNode:
        return SearchNode(
            board=board, parent=self, depth=self.depth + 1, move=direction
        )

    def path(self) -> list[SearchNode]:
        """Nodes from the root down to this one."""
        nodes: list[SearchNode] = []
        node: SearchNode | None = self
        while node is not None:
            nodes.append(node)
            node = node.parent
        nodes.reverse()
        return nodes
