# session.py
from __future__ import annotations

import logging
from typing import Optional, Union

from .config import GRID_SIZE, TICK_MS, RandomSource
from .errors import BoardFullError
from .game import Direction, GameState, create_game_state, set_direction, step

logger = logging.getLogger(__name__)


class Ticker:
    """Fixed-interval tick source driven by a caller-supplied clock (ms)."""

    def __init__(self, interval_ms: int = TICK_MS):
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self.interval_ms = interval_ms
        self._last: Optional[int] = None

    @property
    def active(self) -> bool:
        return self._last is not None

    def start(self, now_ms: int) -> None:
        # Restarting replaces the old schedule
        self._last = now_ms

    def stop(self) -> None:
        self._last = None

    def poll(self, now_ms: int) -> bool:
        """True at most once per interval while active."""
        if self._last is None or now_ms - self._last < self.interval_ms:
            return False
        self._last = now_ms
        return True


class GameSession:
    """
    Owns one GameState and its tick source.
    Input handlers and the tick run on the same thread, so no locking.
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        tick_ms: int = TICK_MS,
        grid_size: int = GRID_SIZE,
    ):
        self.grid_size = grid_size
        self.state: GameState = create_game_state(rng, grid_size)
        self.ticker = Ticker(tick_ms)

    # Tick source -------------------------------------------------------------
    @property
    def running(self) -> bool:
        return self.ticker.active

    def start(self, now_ms: int) -> None:
        if self.ticker.active:
            logger.debug("tick source already running; restarting")
        self.ticker.start(now_ms)
        logger.info("session started (tick every %d ms)", self.ticker.interval_ms)

    def stop(self) -> None:
        if self.ticker.active:
            self.ticker.stop()
            logger.info("session stopped")

    def tick(self, now_ms: int) -> bool:
        """Step the game if a tick is due. Returns True when a tick fired."""
        if not self.ticker.poll(now_ms):
            return False

        was_over = self.state.game_over
        try:
            step(self.state)
        except BoardFullError:
            # step has already ended the game
            logger.info("board full at score %d", self.state.score)

        if self.state.game_over and not was_over:
            logger.info("game over, score %d", self.state.score)
        return True

    # Input entry points ------------------------------------------------------
    def set_direction(self, direction: Union[Direction, str]) -> None:
        set_direction(self.state, direction)

    def toggle_pause(self) -> None:
        if self.state.game_over:
            return
        self.state.paused = not self.state.paused
        logger.debug("paused=%s", self.state.paused)

    def reset(self, now_ms: Optional[int] = None) -> GameState:
        """New game with the same rng; restarts the tick source if now_ms is given."""
        self.stop()
        self.state = create_game_state(self.state.rng, self.grid_size)
        logger.info("session reset")
        if now_ms is not None:
            self.start(now_ms)
        return self.state
