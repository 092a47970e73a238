from __future__ import annotations
from enum import Enum

from .board import Cell, CellMode


class GameMode(Enum):
    SWEEP = 'sweep'
    FLAG = 'flag'
    WON = 'won'
    LOST = 'lost'

    @property
    def is_terminal(self) -> bool:
        return self in (GameMode.WON, GameMode.LOST)


class Action(Enum):
    REVEAL = 'reveal'
    FLAG = 'flag'
    TOGGLE_MODE = 'toggle_mode'


def toggle_interaction(mode: GameMode) -> GameMode:
    if mode is GameMode.SWEEP:
        return GameMode.FLAG
    if mode is GameMode.FLAG:
        return GameMode.SWEEP
    return mode


def toggle_flag(cell: Cell) -> bool:
    if cell.mode is CellMode.HIDDEN:
        cell.mode = CellMode.FLAGGED
        return True
    if cell.mode is CellMode.FLAGGED:
        cell.mode = CellMode.HIDDEN
        return True
    return False


def is_clickable(mode: GameMode, cell_mode: CellMode) -> bool:
    if mode is GameMode.SWEEP:
        return cell_mode is CellMode.HIDDEN
    if mode is GameMode.FLAG:
        return cell_mode in (CellMode.HIDDEN, CellMode.FLAGGED)
    return False
