# main.py
from __future__ import annotations
import argparse
import logging
from typing import List, Optional

import pygame # type: ignore

from .config import CFG, BAR_HEIGHT, MIN_BOARD_PX, MIN_GRID_SIZE, Config, make_rng
from .session import GameSession
from .ui import (
    PAUSE_KEYS, RESET_KEYS, QUIT_KEYS,
    key_to_direction, layout_buttons, button_at,
    draw_game, draw_overlay, draw_buttons,
)

logger = logging.getLogger(__name__)


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


def parse_args(argv: Optional[List[str]] = None, base: Config = CFG) -> Config:
    """Build a Config from the command line, defaulting to `base`."""
    parser = argparse.ArgumentParser(prog="gridsnake", description="Grid snake game.")
    parser.add_argument("--seed", type=int, default=base.seed,
                        help="RNG seed for food placement (-1 for a random seed).")
    parser.add_argument("--tick-ms", type=_positive_int, default=base.tick_ms)
    parser.add_argument("--grid-size", type=_positive_int, default=base.grid_size)
    parser.add_argument("--cell-size", type=_positive_int, default=base.cell_size)
    parser.add_argument("--log-level", default=base.log_level,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    ns = parser.parse_args(argv)

    if ns.grid_size < MIN_GRID_SIZE:
        parser.error(f"--grid-size must be at least {MIN_GRID_SIZE}")
    if ns.grid_size * ns.cell_size < MIN_BOARD_PX:
        parser.error(f"board must be at least {MIN_BOARD_PX} px wide (grid-size x cell-size)")

    return Config(
        seed=None if ns.seed == -1 else ns.seed,
        tick_ms=ns.tick_ms,
        grid_size=ns.grid_size,
        cell_size=ns.cell_size,
        fps=base.fps,
        log_level=ns.log_level,
    )


def handle_event(session: GameSession, event, buttons, now_ms: int) -> bool:
    """Route one pygame event to the session. Return False to quit."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN:
        if event.key in QUIT_KEYS:
            return False
        direction = key_to_direction(event.key)
        if direction is not None:
            session.set_direction(direction)
        elif event.key in PAUSE_KEYS:
            session.toggle_pause()
        elif event.key in RESET_KEYS:
            session.reset(now_ms)
    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        button = button_at(buttons, event.pos)
        if button is None:
            return True
        if button.action == "pause":
            session.toggle_pause()
        elif button.action == "reset":
            session.reset(now_ms)
        else:
            session.set_direction(button.action)
    return True


def main(argv: Optional[List[str]] = None) -> int:
    cfg = parse_args(argv)
    logging.basicConfig(
        level=cfg.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    board_px = cfg.grid_size * cfg.cell_size
    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode((board_px, board_px + BAR_HEIGHT))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    session = GameSession(make_rng(cfg.seed), cfg.tick_ms, cfg.grid_size)
    buttons = layout_buttons(board_px)
    logger.info("grid %dx%d, seed %s", cfg.grid_size, cfg.grid_size, cfg.seed)

    session.start(pygame.time.get_ticks())
    running = True
    try:
        while running:
            # 1) input
            now = pygame.time.get_ticks()
            for event in pygame.event.get():
                if not handle_event(session, event, buttons, now):
                    running = False
                    break
            if not running:
                break

            # 2) update (gated by the session's ticker)
            session.tick(pygame.time.get_ticks())

            # 3) render
            draw_game(screen, font, session.state, cfg.cell_size)
            draw_overlay(screen, font, session.state, board_px)
            draw_buttons(screen, font, buttons, session.state)
            pygame.display.flip()
            clock.tick(cfg.fps)
    finally:
        session.stop()
        pygame.quit()

    logger.info("final score %d", session.state.score)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
