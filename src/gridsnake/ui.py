# ui.py
from dataclasses import dataclass
from typing import List, Optional, Tuple
import numpy as np  # type: ignore
import pygame # type: ignore

from .config import (
    BAR_HEIGHT, MIN_BOARD_PX,
    BOARD, GRID_LINE, SNAKE, SNAKE_HEAD, FOOD, TEXT, BUTTON, OVERLAY,
)
from .board import board_array, BODY, HEAD, FOOD as FOOD_CELL
from .game import Direction, GameState

# ---------- Input mapping ----------
KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}

PAUSE_KEYS = (pygame.K_SPACE,)
RESET_KEYS = (pygame.K_r,)
QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)

def key_to_direction(key: int) -> Optional[Direction]:
    return KEY_DIRECTIONS.get(key)

# ---------- Status text ----------
def status_text(state: GameState) -> Optional[str]:
    """Overlay text, or None when the overlay is hidden."""
    if state.game_over:
        return "Game Over"
    if state.paused:
        return "Paused"
    return None

def pause_label(state: GameState) -> str:
    return "Resume" if state.paused else "Pause"

# ---------- Buttons ----------
@dataclass
class Button:
    action: str                 # "pause", "reset", or a direction name
    rect: pygame.Rect

def layout_buttons(board_px: int) -> List[Button]:
    """Button bar under the board: pause, reset, then the four directions."""
    if board_px < MIN_BOARD_PX:
        raise ValueError(f"board_px must be at least {MIN_BOARD_PX}, got {board_px}")
    pad = 6
    h = BAR_HEIGHT - 2 * pad
    top = board_px + pad
    actions = ["pause", "reset"] + [d.value for d in Direction]
    w = (board_px - pad * (len(actions) + 1)) // len(actions)
    return [
        Button(action, pygame.Rect(pad + i * (w + pad), top, w, h))
        for i, action in enumerate(actions)
    ]

def button_at(buttons: List[Button], pos: Tuple[int, int]) -> Optional[Button]:
    for button in buttons:
        if button.rect.collidepoint(pos):
            return button
    return None

def button_label(button: Button, state: GameState) -> str:
    if button.action == "pause":
        return pause_label(state)
    if button.action == "reset":
        return "Reset"
    return {"up": "^", "down": "v", "left": "<", "right": ">"}[button.action]

# ---------- Drawing ----------
def draw_cell(screen: pygame.Surface, gx: int, gy: int, color, cell_size: int) -> None:
    rect = pygame.Rect(gx * cell_size, gy * cell_size, cell_size, cell_size)
    pygame.draw.rect(screen, color, rect)

def draw_game(screen: pygame.Surface, font: pygame.font.Font, state: GameState, cell_size: int) -> None:
    board = board_array(state)
    colors = {BODY: SNAKE, HEAD: SNAKE_HEAD, FOOD_CELL: FOOD}
    screen.fill(BOARD)
    for gy, gx in np.ndindex(*board.shape):
        code = int(board[gy, gx])
        if code in colors:
            draw_cell(screen, gx, gy, colors[code], cell_size)
        else:
            rect = pygame.Rect(gx * cell_size, gy * cell_size, cell_size, cell_size)
            pygame.draw.rect(screen, GRID_LINE, rect, 1)
    # score
    txt = font.render(f"Score: {state.score}", True, TEXT)
    screen.blit(txt, (8, 6))

def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, state: GameState, board_px: int) -> None:
    text = status_text(state)
    if text is None:
        return
    # Dim the board with a translucent overlay
    overlay = pygame.Surface((board_px, board_px), pygame.SRCALPHA)
    overlay.fill(OVERLAY)
    screen.blit(overlay, (0, 0))

    title = font.render(text, True, (240, 240, 250))
    screen.blit(title, title.get_rect(center=(board_px // 2, board_px // 2 - 16)))
    if state.game_over:
        sub = font.render("Press R to restart", True, TEXT)
        sco = font.render(f"Score: {state.score}", True, TEXT)
        screen.blit(sub, sub.get_rect(center=(board_px // 2, board_px // 2 + 16)))
        screen.blit(sco, sco.get_rect(center=(board_px // 2, board_px // 2 + 44)))

def draw_buttons(screen: pygame.Surface, font: pygame.font.Font, buttons: List[Button], state: GameState) -> None:
    for button in buttons:
        pygame.draw.rect(screen, BUTTON, button.rect, border_radius=4)
        label = font.render(button_label(button, state), True, TEXT)
        screen.blit(label, label.get_rect(center=button.rect.center))
