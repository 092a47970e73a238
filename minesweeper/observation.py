from __future__ import annotations
import numpy as np

from .engine import DisplayCategory, Minesweeper

# Integer encoding of what the player can see, one value per cell:
# -2 flagged, -1 hidden, 0..8 revealed count, 9 revealed mine.
# Hidden cells never leak whether they hold a mine.
FLAGGED = -2
HIDDEN = -1
MINE = 9


def encode_view(game: Minesweeper) -> np.ndarray:
    out = np.full((game.height, game.width), HIDDEN, dtype=np.int8)
    for r in range(game.height):
        for c in range(game.width):
            view = game.get_cell_view(r, c)
            if view.category is DisplayCategory.FLAGGED:
                out[r, c] = FLAGGED
            elif view.category is DisplayCategory.NUMBER:
                out[r, c] = view.count
            elif view.category in (DisplayCategory.MINE_WON, DisplayCategory.MINE_LOST):
                out[r, c] = MINE
    return out


def status_line(game: Minesweeper) -> str:
    view = encode_view(game)
    flags = int((view == FLAGGED).sum())
    hidden = int((view == HIDDEN).sum())
    return f'mode: {game.mode.name.lower()} | flags: {flags}/{game.num_mines} | hidden: {hidden} | revealed: {game.num_visible}'
