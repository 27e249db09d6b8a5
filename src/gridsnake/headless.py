# headless.py
"""
Window-less driver for the game core: one call, one tick.

Useful as a test harness or as the back end of an alternate UI. The
observation is the board snapshot from `board.board_array`.
"""
from __future__ import annotations

import random
from typing import Iterable, Optional, Tuple, Union

import numpy as np  # type: ignore

from .board import board_array, free_cells
from .config import CFG, GRID_SIZE
from .errors import BoardFullError
from .game import Direction, GameState, create_game_state, set_direction, step

Move = Optional[Union[Direction, str]]


class HeadlessGame:
    def __init__(self, seed: Optional[int] = CFG.seed, grid_size: int = GRID_SIZE):
        self.rng = random.Random(seed)
        self.grid_size = grid_size
        self.state: Optional[GameState] = None

    def reset(self, seed: Optional[int] = None) -> np.ndarray:
        """Start a new game. The rng carries over unless a seed is passed."""
        if seed is not None:
            self.rng.seed(seed)
        self.state = create_game_state(self.rng.random, self.grid_size)
        return board_array(self.state)

    def step(self, direction: Move = None) -> Tuple[np.ndarray, int, bool]:
        """
        Optionally request a heading, then advance exactly one tick.
        Returns (board, score, game_over).
        """
        if self.state is None:
            raise RuntimeError("Call reset() first.")
        if direction is not None:
            set_direction(self.state, direction)
        try:
            step(self.state)
        except BoardFullError:
            pass  # step already ended the game
        return board_array(self.state), self.state.score, self.state.game_over

    def free_cells(self) -> int:
        if self.state is None:
            raise RuntimeError("Call reset() first.")
        return free_cells(board_array(self.state))


def replay(moves: Iterable[Move], seed: Optional[int] = 0, grid_size: int = GRID_SIZE) -> GameState:
    """Play `moves` from a fresh seeded game and return the final state."""
    game = HeadlessGame(seed=seed, grid_size=grid_size)
    game.reset()
    for move in moves:
        _, _, over = game.step(move)
        if over:
            break
    assert game.state is not None
    return game.state
