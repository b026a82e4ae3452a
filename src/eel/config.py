from dataclasses import dataclass
from enum import Enum

# ----- Board & window -----
GRID_W, GRID_H = 40, 20
CELL_SIZE = 20
START_LENGTH = 3

# ----- Colors -----
BG   = (20, 20, 24)
GREEN = (80, 200, 80)
EEL_TAIL = (20, 80, 40)
RED   = (200, 70, 70)
TEXT  = (220, 220, 230)

# ----- Timing -----
BASE_INTERVAL_MS = 150   # tick period at speed level 1
MIN_LEVEL, MAX_LEVEL = 1, 9
FPS = 60


# ----- Directions (dx, dy) -----
class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


UP, DOWN, LEFT, RIGHT = Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT


# ----- Tunables (what you'd pass on the command line) -----
@dataclass
class Config:
    seed: int | None = None
    width: int = GRID_W
    height: int = GRID_H
    speed: int = MIN_LEVEL
    extended: bool = False
    debug: bool = False

CFG = Config()
