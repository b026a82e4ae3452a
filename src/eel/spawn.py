# spawn.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Collection, Optional, Tuple
import random

Cell = Tuple[int, int]


class FoodKind(Enum):
    """Food kinds of the extended game: (growth reward, display color)."""
    RED = (1, (200, 70, 70))
    BLUE = (2, (70, 110, 220))
    YELLOW = (3, (230, 210, 60))
    PURPLE = (4, (160, 80, 200))
    ORANGE = (5, (240, 140, 40))

    @property
    def reward(self) -> int:
        return self.value[0]

    @property
    def color(self) -> Tuple[int, int, int]:
        return self.value[1]


@dataclass(frozen=True)
class Food:
    cell: Cell
    kind: Optional[FoodKind] = None   # None in the basic game

    @property
    def reward(self) -> int:
        return self.kind.reward if self.kind is not None else 1


def place(occupied: Collection[Cell], width: int, height: int, rng: random.Random) -> Cell:
    """
    Pick a uniformly random cell that is not in `occupied` (rejection sampling).
    Never returns if `occupied` covers the whole board; callers must leave
    at least one cell free.
    """
    while True:
        fx = rng.randrange(width)
        fy = rng.randrange(height)
        if (fx, fy) not in occupied:
            return (fx, fy)


def spawn_food(
    occupied: Collection[Cell],
    width: int,
    height: int,
    rng: random.Random,
    extended: bool = False,
) -> Food:
    cell = place(occupied, width, height, rng)
    kind = rng.choice(list(FoodKind)) if extended else None
    return Food(cell, kind)
