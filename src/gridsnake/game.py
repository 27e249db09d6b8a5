# game.py
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union
import logging
import math
import random

from .config import GRID_SIZE, MIN_GRID_SIZE, RandomSource
from .errors import BoardFullError, InvalidDirection

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]

# ---------- Directions ----------
class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def vector(self) -> Cell:
        return _VECTORS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @classmethod
    def parse(cls, value: Union["Direction", str]) -> "Direction":
        """Accept a Direction or its name ("up", "Left", ...)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise InvalidDirection(value)


# (dx, dy), y grows downwards
_VECTORS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

# ---------- Food ----------
def place_food(snake: Sequence[Cell], rng: RandomSource, grid_size: int = GRID_SIZE) -> Cell:
    """Rejection-sample a free cell. Raises BoardFullError if none is left."""
    occupied = set(snake)
    if len(occupied) >= grid_size * grid_size:
        raise BoardFullError(grid_size)
    while True:
        fx = math.floor(rng() * grid_size)
        fy = math.floor(rng() * grid_size)
        if (fx, fy) not in occupied:
            return (fx, fy)

# ---------- State ----------
@dataclass
class GameState:
    snake: List[Cell]              # head at index 0
    direction: Direction
    pending_direction: Direction
    food: Cell
    score: int = 0
    game_over: bool = False
    paused: bool = False
    rng: RandomSource = field(default=random.random, repr=False)
    grid_size: int = GRID_SIZE

    @property
    def head(self) -> Cell:
        return self.snake[0]

def initial_snake(grid_size: int = GRID_SIZE) -> List[Cell]:
    mid = grid_size // 2
    return [(mid, mid), (mid - 1, mid), (mid - 2, mid)]

def create_game_state(rng: Optional[RandomSource] = None, grid_size: int = GRID_SIZE) -> GameState:
    if grid_size < MIN_GRID_SIZE:
        raise ValueError(f"grid_size must be at least {MIN_GRID_SIZE}, got {grid_size}")
    if rng is None:
        rng = random.random
    snake = initial_snake(grid_size)
    return GameState(
        snake=snake,
        direction=Direction.RIGHT,
        pending_direction=Direction.RIGHT,
        food=place_food(snake, rng, grid_size),
        rng=rng,
        grid_size=grid_size,
    )

# ---------- Transitions ----------
def set_direction(state: GameState, requested: Union[Direction, str]) -> None:
    """Buffer a heading for the next tick; 180° turns are ignored."""
    requested = Direction.parse(requested)
    if requested is state.direction.opposite:
        return
    state.pending_direction = requested

def step(state: GameState) -> GameState:
    """
    Advance the game by one tick, in place.
    Returns the same state; a no-op when paused or over.
    """
    if state.game_over or state.paused:
        return state

    # Commit direction once per tick
    state.direction = state.pending_direction

    hx, hy = state.head
    dx, dy = state.direction.vector
    nx, ny = hx + dx, hy + dy

    hit_wall = not (0 <= nx < state.grid_size and 0 <= ny < state.grid_size)
    # Pre-move body: the tail about to move away still counts
    hit_self = (nx, ny) in state.snake[1:]

    if hit_wall or hit_self:
        state.game_over = True
        logger.debug("collision at %s (%s), score %d",
                     (nx, ny), "wall" if hit_wall else "self", state.score)
        return state

    new_head = (nx, ny)
    state.snake.insert(0, new_head)

    if new_head == state.food:
        state.score += 1
        try:
            state.food = place_food(state.snake, state.rng, state.grid_size)
        except BoardFullError:
            # Snake covers the whole board; the game cannot continue
            state.game_over = True
            raise
    else:
        state.snake.pop()

    return state
