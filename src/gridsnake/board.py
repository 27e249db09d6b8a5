# board.py
from __future__ import annotations

import numpy as np  # type: ignore

from .game import GameState

# Cell codes in a board snapshot
EMPTY, BODY, HEAD, FOOD = 0, 1, 2, 3


def board_array(state: GameState) -> np.ndarray:
    """
    Snapshot of the board as a (grid_size, grid_size) int8 array indexed [y, x].
    Food is written first so a head sitting on the food cell reads HEAD.
    """
    n = state.grid_size
    board = np.zeros((n, n), dtype=np.int8)

    fx, fy = state.food
    board[fy, fx] = FOOD

    for x, y in state.snake[1:]:
        board[y, x] = BODY
    hx, hy = state.head
    board[hy, hx] = HEAD
    return board


def free_cells(board: np.ndarray) -> int:
    """Cells not covered by the snake (the food cell counts as free)."""
    return int(np.count_nonzero((board != BODY) & (board != HEAD)))
