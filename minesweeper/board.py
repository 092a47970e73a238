from __future__ import annotations
import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .errors import ConfigurationError, InvariantError

logger = logging.getLogger(__name__)

Coordinate = Tuple[int, int]


class CellMode(Enum):
    HIDDEN = 'hidden'
    FLAGGED = 'flagged'
    VISIBLE = 'visible'


@dataclass
class Cell:
    row: int
    col: int
    is_mine: bool = False
    neighboring_mines: int = 0
    mode: CellMode = CellMode.HIDDEN

    @property
    def coord(self) -> Coordinate:
        return (self.row, self.col)


def max_mines(height: int, width: int) -> int:
    return (height * width) // 2


def check_dimensions(height: int, width: int, num_mines: int) -> None:
    if height <= 0 or width <= 0:
        raise ConfigurationError(f'Board dimensions must be positive, got {height}x{width}')
    if num_mines < 0:
        raise ConfigurationError(f'Mine count must not be negative, got {num_mines}')
    if num_mines > max_mines(height, width):
        raise ConfigurationError(
            f'{num_mines} mines exceed half of a {height}x{width} board (max {max_mines(height, width)})')


@dataclass
class Board:
    height: int
    width: int
    grid: List[List[Cell]]
    mines: List[Cell] = field(default_factory=list)
    num_visible: int = 0

    @classmethod
    def empty(cls, height: int, width: int) -> 'Board':
        grid = [[Cell(r, c) for c in range(width)] for r in range(height)]
        return cls(height, width, grid)

    @classmethod
    def from_mines(cls, height: int, width: int, coords: Iterable[Coordinate]) -> 'Board':
        """Build a board with mines at exactly the given (row, col) coordinates."""
        coords = list(coords)
        check_dimensions(height, width, len(coords))
        if len(set(coords)) != len(coords):
            raise ConfigurationError('Mine coordinates must be distinct')
        board = cls.empty(height, width)
        for r, c in coords:
            if not board.in_bounds(r, c):
                raise ConfigurationError(f'Mine ({r}, {c}) lies outside a {height}x{width} board')
        board._lay_mines(coords)
        return board

    @property
    def num_mines(self) -> int:
        return len(self.mines)

    @property
    def num_cells(self) -> int:
        return self.height * self.width

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def cell(self, row: int, col: int) -> Cell:
        return self.grid[row][col]

    def cells(self) -> Iterator[Cell]:
        for row in self.grid:
            yield from row

    def neighbors(self, row: int, col: int) -> List[Coordinate]:
        coords = []
        for nr in range(max(0, row - 1), min(self.height, row + 2)):
            for nc in range(max(0, col - 1), min(self.width, col + 2)):
                if (nr, nc) != (row, col):
                    coords.append((nr, nc))
        return coords

    def _lay_mines(self, coords: List[Coordinate]) -> None:
        for r, c in coords:
            cell = self.grid[r][c]
            cell.is_mine = True
            self.mines.append(cell)
        # Each mine bumps the count of the non-mine cells around it
        for mine in self.mines:
            for nr, nc in self.neighbors(mine.row, mine.col):
                other = self.grid[nr][nc]
                if not other.is_mine:
                    other.neighboring_mines += 1

    def validate(self) -> None:
        expected = neighbor_counts(mine_mask(self))
        for cell in self.cells():
            if cell.is_mine:
                continue
            if not 0 <= cell.neighboring_mines <= 8:
                raise InvariantError(
                    f'Cell {cell.coord} has {cell.neighboring_mines} neighboring mines')
            if cell.neighboring_mines != expected[cell.row, cell.col]:
                raise InvariantError(
                    f'Cell {cell.coord} counts {cell.neighboring_mines} mines, layout has {expected[cell.row, cell.col]}')

    def force_all_visible(self) -> None:
        for cell in self.cells():
            cell.mode = CellMode.VISIBLE
        self.num_visible = self.num_cells


def generate(height: int, width: int, num_mines: int, rng: Optional[random.Random] = None) -> Board:
    check_dimensions(height, width, num_mines)
    rng = rng if rng is not None else random.Random()
    chosen: List[Coordinate] = []
    taken = set()
    while len(chosen) < num_mines:
        coord = (rng.randrange(height), rng.randrange(width))
        if coord in taken:
            continue
        taken.add(coord)
        chosen.append(coord)
    board = Board.empty(height, width)
    board._lay_mines(chosen)
    logger.debug('Generated %dx%d board with %d mines', height, width, num_mines)
    return board


def mine_mask(board: Board) -> np.ndarray:
    mask = np.zeros((board.height, board.width), dtype=bool)
    for mine in board.mines:
        mask[mine.row, mine.col] = True
    return mask


def neighbor_counts(mask: np.ndarray) -> np.ndarray:
    """Clamped 8-neighbor mine counts for every cell, zero on the mines themselves."""
    rows, cols = mask.shape
    padded = np.pad(mask.astype(np.int8), 1)
    total = np.zeros((rows, cols), dtype=np.int8)
    for dr in (-1, 0, 1):
        for dc in (-1, 0, 1):
            if dr == 0 and dc == 0:
                continue
            total += padded[1 + dr:1 + dr + rows, 1 + dc:1 + dc + cols]
    total[mask] = 0
    return total
