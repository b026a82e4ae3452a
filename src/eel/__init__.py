# src/eel/__init__.py
"""Eel: a growing organism on a wrap-around grid."""

from .config import Direction
from .game import SimulationState, new_game_state
from .spawn import Food, FoodKind, place, spawn_food
from .ticks import TickScheduler, interval_ms

__all__ = [
    "Direction",
    "SimulationState",
    "new_game_state",
    "Food",
    "FoodKind",
    "place",
    "spawn_food",
    "TickScheduler",
    "interval_ms",
]
