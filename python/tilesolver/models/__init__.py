from tilesolver.models.board import Board, Direction
from tilesolver.models.node import SearchNode
from tilesolver.models.puzzlefile import parse_board, read_board

__all__ = ["Board", "Direction", "SearchNode", "parse_board", "read_board"]
