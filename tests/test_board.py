import random

import pytest

from minesweeper.board import Board, CellMode, generate, mine_mask, neighbor_counts
from minesweeper.errors import ConfigurationError, InvariantError


@pytest.mark.parametrize('height,width,mines', [(1, 1, 0), (2, 2, 2), (3, 7, 10), (16, 16, 40), (9, 30, 135)])
def test_generate_places_exact_distinct_mines(height, width, mines):
    board = generate(height, width, mines, rng=random.Random(7))
    coords = [m.coord for m in board.mines]
    assert len(coords) == mines
    assert len(set(coords)) == mines
    assert sum(1 for c in board.cells() if c.is_mine) == mines


def test_generate_starts_hidden(rng):
    board = generate(6, 4, 5, rng=rng)
    assert all(c.mode is CellMode.HIDDEN for c in board.cells())
    assert board.num_visible == 0
    assert [[c.coord for c in row] for row in board.grid] == [[(r, c) for c in range(4)] for r in range(6)]


def test_generate_counts_match_neighborhood(rng):
    for _ in range(20):
        board = generate(8, 11, 30, rng=rng)
        expected = neighbor_counts(mine_mask(board))
        for cell in board.cells():
            if not cell.is_mine:
                assert cell.neighboring_mines == expected[cell.row, cell.col]
        board.validate()


def test_generate_is_reproducible_with_seed():
    a = generate(10, 10, 20, rng=random.Random(42))
    b = generate(10, 10, 20, rng=random.Random(42))
    assert [m.coord for m in a.mines] == [m.coord for m in b.mines]


def test_corner_and_edge_counts():
    board = Board.from_mines(3, 4, [(0, 0), (2, 3)])
    # corners see three candidates, edges five
    assert board.cell(0, 1).neighboring_mines == 1
    assert board.cell(1, 0).neighboring_mines == 1
    assert board.cell(1, 1).neighboring_mines == 1
    assert board.cell(0, 3).neighboring_mines == 0
    assert board.cell(2, 0).neighboring_mines == 0
    assert board.cell(1, 2).neighboring_mines == 1
    assert board.cell(2, 2).neighboring_mines == 1
    assert board.cell(1, 3).neighboring_mines == 1


def test_counts_never_wrap_around_edges():
    board = Board.from_mines(3, 3, [(0, 2)])
    assert board.cell(0, 0).neighboring_mines == 0
    assert board.cell(2, 2).neighboring_mines == 0
    assert board.cell(1, 0).neighboring_mines == 0


def test_mines_do_not_count_each_other():
    board = Board.from_mines(2, 2, [(0, 0), (1, 1)])
    assert board.cell(0, 1).neighboring_mines == 2
    assert board.cell(1, 0).neighboring_mines == 2
    assert board.cell(0, 0).neighboring_mines == 0


def test_neighbors_are_clamped():
    board = Board.empty(3, 3)
    assert sorted(board.neighbors(0, 0)) == [(0, 1), (1, 0), (1, 1)]
    assert len(board.neighbors(1, 1)) == 8
    assert len(board.neighbors(0, 1)) == 5


@pytest.mark.parametrize('height,width,mines', [(0, 5, 0), (5, 0, 0), (-1, 3, 0), (3, 3, 5), (2, 2, 3), (4, 4, -1)])
def test_invalid_configuration_rejected(height, width, mines):
    with pytest.raises(ConfigurationError):
        generate(height, width, mines)


def test_half_board_is_allowed(rng):
    board = generate(3, 3, 4, rng=rng)
    assert board.num_mines == 4


def test_from_mines_rejects_bad_layouts():
    with pytest.raises(ConfigurationError):
        Board.from_mines(3, 3, [(0, 0), (0, 0)])
    with pytest.raises(ConfigurationError):
        Board.from_mines(3, 3, [(3, 0)])


def test_validate_flags_corrupt_counts():
    board = Board.from_mines(3, 3, [(0, 0)])
    board.cell(2, 2).neighboring_mines = 9
    with pytest.raises(InvariantError):
        board.validate()
    board.cell(2, 2).neighboring_mines = 1
    with pytest.raises(InvariantError):
        board.validate()


def test_neighbor_counts_matches_layout():
    board = Board.from_mines(5, 5, [(0, 3), (1, 3), (3, 3)])
    assert neighbor_counts(mine_mask(board)).tolist() == [
        [0, 0, 2, 0, 2],
        [0, 0, 2, 0, 2],
        [0, 0, 2, 2, 2],
        [0, 0, 1, 0, 1],
        [0, 0, 1, 1, 1],
    ]


def test_mine_mask():
    board = Board.from_mines(2, 2, [(0, 0)])
    assert mine_mask(board).tolist() == [[True, False], [False, False]]
