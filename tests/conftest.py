"""Shared fixtures: fixed mine layouts and seeded generators."""
import random

import pytest

from minesweeper.board import Board
from minesweeper.engine import GameConfig, Minesweeper


def build_game(height, width, mines):
    board = Board.from_mines(height, width, mines)
    return Minesweeper(GameConfig(height, width, len(mines)), board)


@pytest.fixture
def make_game():
    """Factory for games with a fixed mine layout."""
    return build_game


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def corner_game():
    """2x2 board with a single mine in the top-left corner."""
    return build_game(2, 2, [(0, 0)])


@pytest.fixture
def open_game():
    """3x3 board without mines."""
    return build_game(3, 3, [])


@pytest.fixture
def walled_game():
    """5x5 board, mines at (0, 3), (1, 3) and (3, 3).

    . . 2 * 2
    . . 2 * 2
    . . 2 2 2
    . . 1 * 1
    . . 1 1 1
    """
    return build_game(5, 5, [(0, 3), (1, 3), (3, 3)])
