# __init__.py
from .errors import BoardFullError, InvalidDirection, SnakeError
from .game import (
    Cell,
    Direction,
    GameState,
    create_game_state,
    place_food,
    set_direction,
    step,
)
from .session import GameSession, Ticker

__all__ = [
    "BoardFullError",
    "Cell",
    "Direction",
    "GameSession",
    "GameState",
    "InvalidDirection",
    "SnakeError",
    "Ticker",
    "create_game_state",
    "place_food",
    "set_direction",
    "step",
]
