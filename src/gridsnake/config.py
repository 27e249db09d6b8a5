# config.py
from dataclasses import dataclass
from typing import Callable, Optional
import random

# ----- Grid & window -----
GRID_SIZE = 20
MIN_GRID_SIZE = 4        # room for the starting snake plus food
CELL_SIZE = 20
BAR_HEIGHT = 48            # button bar under the board
MIN_BOARD_PX = 120         # narrowest board the button bar fits under

# ----- Timing -----
TICK_MS = 120

# ----- Colors -----
BOARD      = (43, 43, 43)
GRID_LINE  = (58, 58, 58)
SNAKE      = (59, 178, 115)
SNAKE_HEAD = (42, 138, 90)
FOOD       = (227, 79, 79)
TEXT       = (220, 220, 230)
BUTTON     = (70, 70, 78)
OVERLAY    = (0, 0, 0, 140)

# ----- Randomness -----
# Any zero-arg callable returning a float in [0, 1).
RandomSource = Callable[[], float]

def make_rng(seed: Optional[int] = None) -> RandomSource:
    """Seeded source when `seed` is given, system-seeded otherwise."""
    return random.Random(seed).random

# ----- Tunables (overridable from the command line) -----
@dataclass
class Config:
    seed: Optional[int] = 0
    tick_ms: int = TICK_MS
    grid_size: int = GRID_SIZE
    cell_size: int = CELL_SIZE
    fps: int = 60
    log_level: str = "INFO"

CFG = Config()
