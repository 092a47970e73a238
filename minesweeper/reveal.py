from __future__ import annotations
from typing import List

from .board import Board, CellMode, Coordinate

ORTHOGONAL = ((-1, 0), (1, 0), (0, -1), (0, 1))


def reveal(board: Board, row: int, col: int) -> bool:
    """Reveal (row, col) and flood outward from zero-count cells.

    Returns False without touching the board when the coordinate is out of
    bounds or the cell is not hidden. The flood only moves orthogonally and
    skips flagged and already visible cells.
    """
    if not board.in_bounds(row, col) or board.grid[row][col].mode is not CellMode.HIDDEN:
        return False
    stack: List[Coordinate] = [(row, col)]
    while stack:
        r, c = stack.pop()
        if not board.in_bounds(r, c):
            continue
        cell = board.grid[r][c]
        if cell.mode is not CellMode.HIDDEN:
            continue
        cell.mode = CellMode.VISIBLE
        board.num_visible += 1
        if cell.is_mine or cell.neighboring_mines != 0:
            continue
        for dr, dc in ORTHOGONAL:
            stack.append((r + dr, c + dc))
    return True
