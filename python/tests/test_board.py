"""Board test suite: scenarios, invariants, and text form."""

from __future__ import annotations

import pytest

from tilesolver.engine.generator import PuzzleGenerator
from tilesolver.errors import InvalidArgumentError, OutOfRangeError
from tilesolver.models.board import Board, Direction

# (id, n, flat tiles, hamming, manhattan, is_goal, is_solvable)
_SCENARIOS = [
    ("solved-3x3", 3, [1, 2, 3, 4, 5, 6, 7, 8, 0], 0, 0, True, True),
    ("one-move-3x3", 3, [1, 2, 3, 4, 5, 6, 7, 0, 8], 1, 1, False, True),
    ("classic-3x3", 3, [0, 1, 3, 4, 2, 5, 7, 8, 6], 4, 4, False, True),
    ("swapped-7-8", 3, [1, 2, 3, 4, 5, 6, 8, 7, 0], 2, 2, False, False),
    ("blank-top-right-2x2", 2, [1, 0, 3, 2], 1, 1, False, True),
    ("blank-bottom-left-2x2", 2, [1, 2, 0, 3], 1, 1, False, True),
    ("swapped-1-2-2x2", 2, [2, 1, 3, 0], 2, 2, False, False),
]


def _ids(scenario: tuple) -> str:
    return scenario[0]


# -- scenarios ----------------------------------------------------------------


@pytest.mark.parametrize("scenario", _SCENARIOS, ids=_ids)
def test_scenario_scores(scenario: tuple) -> None:
    _, n, flat, hamming, manhattan, is_goal, is_solvable = scenario
    board = Board.from_flat(n, flat)

    assert board.hamming() == hamming
    assert board.manhattan() == manhattan
    assert board.is_goal() is is_goal
    assert board.is_solvable() is is_solvable
    assert board.size() == n * n
    assert len(board) == n * n


def test_from_rows_matches_from_flat() -> None:
    rows = [[0, 1, 3], [4, 2, 5], [7, 8, 6]]
    assert Board.from_rows(rows) == Board.from_flat(3, [0, 1, 3, 4, 2, 5, 7, 8, 6])


def test_goal_board() -> None:
    goal = Board.goal(4)
    assert goal.is_goal()
    assert goal.tiles[-1] == 0
    assert goal.blank_pos == (3, 3)
    assert goal.manhattan() == 0


# -- construction errors ------------------------------------------------------


@pytest.mark.parametrize(
    "n, flat",
    [
        (1, [0]),
        (3, [1, 2, 3, 4, 5, 6, 7, 8]),
        (3, [1, 1, 3, 4, 5, 6, 7, 8, 0]),
        (2, [1, 2, 3, 4]),
    ],
    ids=["too-small", "short", "duplicate", "no-blank"],
)
def test_invalid_tiles_rejected(n: int, flat: list[int]) -> None:
    with pytest.raises(InvalidArgumentError):
        Board.from_flat(n, flat)


def test_ragged_rows_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        Board.from_rows([[1, 2], [3]])


# -- element access -----------------------------------------------------------


def test_tile_at() -> None:
    board = Board.from_rows([[0, 1, 3], [4, 2, 5], [7, 8, 6]])
    assert board.tile_at(0, 0) == 0
    assert board.tile_at(1, 1) == 2
    assert board.tile_at(2, 2) == 6
    assert board.blank_pos == (0, 0)


@pytest.mark.parametrize("row, col", [(3, 0), (0, 3), (-1, 0), (0, -1), (1, 5)])
def test_tile_at_out_of_range(row: int, col: int) -> None:
    board = Board.goal(3)
    with pytest.raises(OutOfRangeError):
        board.tile_at(row, col)


def test_board_is_immutable() -> None:
    board = Board.goal(3)
    with pytest.raises(AttributeError):
        board.tiles = (0,) * 9  # type: ignore[misc]


# -- equality -----------------------------------------------------------------


def test_equal_scores_do_not_make_boards_equal() -> None:
    a = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 0, 7, 8])
    b = Board.from_flat(3, [1, 2, 3, 4, 0, 5, 7, 8, 6])
    assert a.hamming() == b.hamming()
    assert a.manhattan() == b.manhattan()
    assert a != b


def test_equality_and_hash() -> None:
    a = Board.from_flat(3, [0, 1, 3, 4, 2, 5, 7, 8, 6])
    b = Board.from_rows([[0, 1, 3], [4, 2, 5], [7, 8, 6]])
    assert a == a
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert Board.goal(2) != Board.goal(3)


# -- neighbors ----------------------------------------------------------------


@pytest.mark.parametrize(
    "blank, expected",
    [(0, 2), (2, 2), (6, 2), (8, 2), (1, 3), (3, 3), (5, 3), (7, 3), (4, 4)],
)
def test_neighbor_count_by_blank_position(blank: int, expected: int) -> None:
    flat = [v for v in range(1, 9)]
    flat.insert(blank, 0)
    board = Board.from_flat(3, flat)
    assert len(board.neighbors()) == expected


def test_neighbor_order_is_down_right_up_left() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 0, 5, 6, 7, 8])
    blanks = [nb.blank_pos for nb in board.neighbors()]
    assert blanks == [(2, 1), (1, 2), (0, 1), (1, 0)]
    directions = [d for d, _ in board.successors()]
    assert directions == [Direction.UP, Direction.LEFT, Direction.DOWN, Direction.RIGHT]


def test_neighbors_leave_source_untouched() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 0, 5, 6, 7, 8])
    before = board.tiles
    board.neighbors()
    assert board.tiles == before
    assert board.blank_pos == (1, 1)


def test_slide() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert board.slide(Direction.LEFT).is_goal()
    with pytest.raises(OutOfRangeError):
        board.slide(Direction.UP)


# -- invariants over random boards --------------------------------------------


@pytest.mark.parametrize("n", [2, 3, 4, 5])
@pytest.mark.parametrize("seed", range(5))
def test_random_board_invariants(n: int, seed: int) -> None:
    board = PuzzleGenerator.generate(n, seed=seed)

    assert 0 <= board.hamming() <= n * n - 1
    assert board.manhattan() >= board.hamming()
    assert board.is_goal() == (board.hamming() == 0) == (board == Board.goal(n))
    assert board.is_solvable()

    for neighbor in board.neighbors():
        changed = [i for i in range(n * n) if neighbor.tiles[i] != board.tiles[i]]
        assert len(changed) == 2
        assert board.tiles.index(0) in changed
        assert neighbor != board
        assert board in neighbor.neighbors()
        assert neighbor.is_solvable()


@pytest.mark.parametrize("n", [2, 3, 4])
@pytest.mark.parametrize("seed", range(3))
def test_unsolvable_variant_flips_parity(n: int, seed: int) -> None:
    board = PuzzleGenerator.generate(n, seed=seed)
    assert not PuzzleGenerator.unsolvable_variant(board).is_solvable()


@pytest.mark.parametrize("n, steps", [(2, 12), (2, 24), (3, 1), (4, 2)])
@pytest.mark.parametrize("seed", range(4))
def test_generate_never_returns_goal(n: int, steps: int, seed: int) -> None:
    board = PuzzleGenerator.generate(n, steps=steps, seed=seed)
    assert not board.is_goal()
    assert board.is_solvable()


@pytest.mark.parametrize("n, steps", [(3, 0), (2, -1)])
def test_generate_rejects_empty_walk(n: int, steps: int) -> None:
    with pytest.raises(InvalidArgumentError):
        PuzzleGenerator.generate(n, steps=steps, seed=1)


# -- text form ----------------------------------------------------------------


def test_text_form_3x3() -> None:
    board = Board.from_flat(3, [0, 1, 3, 4, 2, 5, 7, 8, 6])
    assert str(board) == "3\n 0  1  3\n 4  2  5\n 7  8  6\n"


@pytest.mark.parametrize(
    "flat, text",
    [
        ([1, 0, 3, 2], "2\n 1  0\n 3  2\n"),
        ([1, 2, 0, 3], "2\n 1  2\n 0  3\n"),
    ],
    ids=["blank-top-right-2x2", "blank-bottom-left-2x2"],
)
def test_text_form_2x2(flat: list[int], text: str) -> None:
    assert str(Board.from_flat(2, flat)) == text


def test_text_form_pads_to_width_two() -> None:
    board = Board.goal(4)
    assert str(board).splitlines() == [
        "4",
        " 1  2  3  4",
        " 5  6  7  8",
        " 9 10 11 12",
        "13 14 15  0",
    ]
