"""Shared fixtures for the tilesolver test suite."""

from __future__ import annotations

from collections import deque
from pathlib import Path

import pytest

from tilesolver.models.board import Board

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"


def _bfs_distance(start: Board) -> int | None:
    frontier: deque[tuple[Board, int]] = deque([(start, 0)])
    seen = {start}
    while frontier:
        board, dist = frontier.popleft()
        if board.is_goal():
            return dist
        for nb in board.neighbors():
            if nb not in seen:
                seen.add(nb)
                frontier.append((nb, dist + 1))
    return None


@pytest.fixture
def bfs_distance():
    """Reference shortest distance to the goal, or None if unreachable."""
    return _bfs_distance


@pytest.fixture
def fixture_path():
    def _path(name: str) -> Path:
        return FIXTURES_DIR / name

    return _path
