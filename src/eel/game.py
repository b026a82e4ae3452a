# game.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import random

from .config import Direction, GREEN, EEL_TAIL, START_LENGTH
from .spawn import Cell, Food, spawn_food

RGB = Tuple[int, int, int]

# ---------- Helpers ----------
def is_opposite(a: Direction, b: Direction) -> bool:
    return a.value[0] == -b.value[0] and a.value[1] == -b.value[1]

def wrap(cell: Cell, direction: Direction, width: int, height: int) -> Cell:
    """Move one cell along `direction` on a torus."""
    dx, dy = direction.value
    return ((cell[0] + dx) % width, (cell[1] + dy) % height)

def _clamp(v: int, hi: int) -> int:
    return max(0, min(v, hi - 1))

# ---------- State ----------
@dataclass
class SimulationState:
    width: int
    height: int
    body: List[Cell]               # head at index 0
    heading: Direction
    food: Food
    rng: random.Random = field(default_factory=random.Random, repr=False)
    extended: bool = False         # five food kinds + color gradient
    growth_debt: int = 0           # tail retentions still owed
    terminal: bool = False
    score: int = 0
    head_color: RGB = GREEN
    tail_color: RGB = EEL_TAIL

    @property
    def head(self) -> Cell:
        return self.body[0]

    @property
    def length(self) -> int:
        return len(self.body)

    def set_direction(self, requested: Direction) -> bool:
        """Adopt `requested` unless it is a 180° turn. Returns whether it was adopted."""
        if is_opposite(requested, self.heading):
            return False
        self.heading = requested
        return True

    def step(self) -> bool:
        """
        Advance the simulation by one tick.
        Returns True if alive, False once the eel has bitten itself.
        """
        if self.terminal:
            return False

        new_head = wrap(self.head, self.heading, self.width, self.height)

        # Self collision (the tail cell counts: it has not moved yet)
        if new_head in self.body:
            self.terminal = True
            return False

        self.body.insert(0, new_head)

        if new_head == self.food.cell:
            eaten = self.food
            # the pushed head already is one cell of growth
            self.growth_debt += eaten.reward - 1
            self.score += eaten.reward
            self.food = spawn_food(self.body, self.width, self.height, self.rng, self.extended)
            if eaten.kind is not None:
                self.head_color = eaten.kind.color
        elif self.growth_debt > 0:
            self.growth_debt -= 1
        else:
            self.body.pop()

        return True


def start_body(width: int, height: int, heading: Direction, length: int = START_LENGTH) -> List[Cell]:
    """
    Lay `length` cells from the board center backwards along `heading`,
    clamped to the board. Cells that clamp onto an earlier cell are dropped.
    """
    cx, cy = width // 2, height // 2
    dx, dy = heading.value
    body: List[Cell] = []
    for i in range(length):
        cell = (_clamp(cx - dx * i, width), _clamp(cy - dy * i, height))
        if cell not in body:
            body.append(cell)
    return body


def new_game_state(
    width: int,
    height: int,
    rng: Optional[random.Random] = None,
    extended: bool = False,
) -> SimulationState:
    if width < 1 or height < 1:
        raise ValueError(f"Board must be at least 1x1, got {width}x{height}")
    rng = rng if rng is not None else random.Random()

    heading = rng.choice(list(Direction))
    body = start_body(width, height, heading)
    if len(body) >= width * height:
        raise ValueError(f"Board {width}x{height} has no room for food")

    food = spawn_food(body, width, height, rng, extended)
    return SimulationState(
        width=width,
        height=height,
        body=body,
        heading=heading,
        food=food,
        rng=rng,
        extended=extended,
    )
