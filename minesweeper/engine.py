from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

from .board import Board, Cell, CellMode, Coordinate, check_dimensions, generate
from .errors import ConfigurationError, InvariantError
from .modes import Action, GameMode, is_clickable, toggle_flag, toggle_interaction
from .reveal import reveal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    height: int
    width: int
    num_mines: int

    def __post_init__(self):
        check_dimensions(self.height, self.width, self.num_mines)


class DisplayCategory(Enum):
    HIDDEN = 'hidden'
    FLAGGED = 'flagged'
    NUMBER = 'number'
    MINE_WON = 'mine_won'
    MINE_LOST = 'mine_lost'


@dataclass(frozen=True)
class CellView:
    category: DisplayCategory
    clickable: bool
    count: Optional[int] = None


ASCII_SYMBOLS = {
    DisplayCategory.HIDDEN: '#',
    DisplayCategory.FLAGGED: 'F',
    DisplayCategory.MINE_WON: '*',
    DisplayCategory.MINE_LOST: 'X',
}


class Minesweeper:
    def __init__(self, config: GameConfig, board: Board, rng: Optional[random.Random] = None):
        if (board.height, board.width, board.num_mines) != (config.height, config.width, config.num_mines):
            raise ConfigurationError(
                f'Board is {board.height}x{board.width} with {board.num_mines} mines, '
                f'config asks for {config.height}x{config.width} with {config.num_mines}')
        self.config = config
        self.board = board
        self.rng = rng
        self.mode = GameMode.SWEEP

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def num_mines(self) -> int:
        return self.config.num_mines

    @property
    def num_visible(self) -> int:
        return self.board.num_visible

    @property
    def mines(self) -> List[Cell]:
        return self.board.mines

    @property
    def is_over(self) -> bool:
        return self.mode.is_terminal

    @property
    def won(self) -> bool:
        return self.mode is GameMode.WON

    def restart(self) -> 'Minesweeper':
        board = generate(self.height, self.width, self.num_mines, rng=self.rng)
        board.validate()
        self.board = board
        self.mode = GameMode.SWEEP
        logger.debug('Restarted %dx%d game with %d mines', self.height, self.width, self.num_mines)
        return self

    # dispatch

    def dispatch(self, action: Action, row: Optional[int] = None, col: Optional[int] = None) -> 'Minesweeper':
        if self.mode.is_terminal:
            logger.debug('Ignoring %s after game ended (%s)', action.name, self.mode.name)
            return self
        if action is Action.TOGGLE_MODE:
            self.mode = toggle_interaction(self.mode)
            return self
        if row is None or col is None:
            logger.debug('Ignoring %s without a coordinate', action.name)
            return self
        if action is Action.REVEAL:
            return self._reveal(row, col)
        if action is Action.FLAG:
            return self._flag(row, col)
        raise ValueError(f'Unknown action: {action!r}')

    def dispatch_reveal(self, row: int, col: int) -> 'Minesweeper':
        return self.dispatch(Action.REVEAL, row, col)

    def dispatch_flag(self, row: int, col: int) -> 'Minesweeper':
        return self.dispatch(Action.FLAG, row, col)

    def dispatch_toggle_mode(self) -> 'Minesweeper':
        return self.dispatch(Action.TOGGLE_MODE)

    def _reveal(self, row: int, col: int) -> 'Minesweeper':
        if self.mode is not GameMode.SWEEP:
            logger.debug('Ignoring reveal of (%d, %d) in %s mode', row, col, self.mode.name)
            return self
        if not reveal(self.board, row, col):
            logger.debug('Reveal of (%d, %d) had no effect', row, col)
            return self
        self._update_status()
        return self

    def _flag(self, row: int, col: int) -> 'Minesweeper':
        if self.mode is not GameMode.FLAG:
            logger.debug('Ignoring flag of (%d, %d) in %s mode', row, col, self.mode.name)
            return self
        if not self.board.in_bounds(row, col):
            logger.debug('Ignoring flag of out-of-range (%d, %d)', row, col)
            return self
        if not toggle_flag(self.board.grid[row][col]):
            logger.debug('Cell (%d, %d) cannot be flagged', row, col)
        return self

    def _update_status(self) -> None:
        # Loss is checked before win
        if any(m.mode is CellMode.VISIBLE for m in self.board.mines):
            self._finish(GameMode.LOST)
        elif self.board.num_visible == self.height * self.width - self.num_mines:
            self._finish(GameMode.WON)

    def _finish(self, mode: GameMode) -> None:
        self.mode = mode
        self.board.force_all_visible()
        logger.info('Game %s after revealing the board (%dx%d, %d mines)',
                    'won' if mode is GameMode.WON else 'lost', self.height, self.width, self.num_mines)

    # read-only projections

    def get_cell_view(self, row: int, col: int) -> CellView:
        if not self.board.in_bounds(row, col):
            raise IndexError(f'({row}, {col}) is outside a {self.height}x{self.width} board')
        cell = self.board.grid[row][col]
        clickable = is_clickable(self.mode, cell.mode)
        if cell.mode is CellMode.HIDDEN:
            return CellView(DisplayCategory.HIDDEN, clickable)
        if cell.mode is CellMode.FLAGGED:
            return CellView(DisplayCategory.FLAGGED, clickable)
        if cell.mode is not CellMode.VISIBLE:
            raise InvariantError(f'Cell {cell.coord} has no display category for {cell.mode!r}')
        if cell.is_mine:
            if self.mode is GameMode.WON:
                return CellView(DisplayCategory.MINE_WON, clickable)
            if self.mode is GameMode.LOST:
                return CellView(DisplayCategory.MINE_LOST, clickable)
            raise InvariantError(f'Mine {cell.coord} is visible while the game is still {self.mode.name}')
        if not 0 <= cell.neighboring_mines <= 8:
            raise InvariantError(f'Cell {cell.coord} has {cell.neighboring_mines} neighboring mines')
        return CellView(DisplayCategory.NUMBER, clickable, cell.neighboring_mines)

    def hidden_cells(self) -> Iterable[Coordinate]:
        for cell in self.board.cells():
            if cell.mode is CellMode.HIDDEN:
                yield cell.coord

    def render_ascii(self) -> str:
        rows = []
        for r in range(self.height):
            row = []
            for c in range(self.width):
                view = self.get_cell_view(r, c)
                if view.category is DisplayCategory.NUMBER:
                    row.append('.' if view.count == 0 else str(view.count))
                else:
                    row.append(ASCII_SYMBOLS[view.category])
            rows.append(' '.join(row))
        return '\n'.join(rows)


def new_game(config: GameConfig, rng: Optional[random.Random] = None) -> Minesweeper:
    board = generate(config.height, config.width, config.num_mines, rng=rng)
    board.validate()
    return Minesweeper(config, board, rng=rng)
