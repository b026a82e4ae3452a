# ticks.py
from __future__ import annotations

from .config import BASE_INTERVAL_MS, MIN_LEVEL, MAX_LEVEL


def interval_ms(level: int, base_ms: float = BASE_INTERVAL_MS) -> float:
    """
    Step interval for a speed level 1..9.
    Level 1 -> base_ms, level 9 -> base_ms / 2 (non-linear in between).
    """
    if not MIN_LEVEL <= level <= MAX_LEVEL:
        raise ValueError(f"Speed level must be in {MIN_LEVEL}..{MAX_LEVEL}, got {level}")
    return base_ms / (1 + (level - 1) / 8)


class TickScheduler:
    """
    Fixed-tick pacing, decoupled from the frame rate:
      - accumulate wall-clock time between frames
      - once it reaches the interval, fire one step (two with `fast`)
      - reset the accumulator to zero; overshoot is not carried forward
    """

    def __init__(self, level: int = MIN_LEVEL, base_ms: float = BASE_INTERVAL_MS):
        self.base_ms = base_ms
        self.level = MIN_LEVEL
        self.elapsed_ms: float = 0.0
        self.set_level(level)

    @property
    def interval(self) -> float:
        return interval_ms(self.level, self.base_ms)

    def set_level(self, level: int) -> None:
        interval_ms(level, self.base_ms)  # validates
        self.level = level

    def reset(self) -> None:
        self.elapsed_ms = 0.0

    def advance(self, elapsed_ms: float, fast: bool = False) -> int:
        """Add frame time; return how many steps to run now (0, 1 or 2)."""
        self.elapsed_ms += elapsed_ms
        if self.elapsed_ms < self.interval:
            return 0
        self.elapsed_ms = 0.0
        return 2 if fast else 1

    def run(self, state, elapsed_ms: float, fast: bool = False) -> int:
        """Advance and step `state` as many times as scheduled."""
        steps = self.advance(elapsed_ms, fast)
        for _ in range(steps):
            state.step()
        return steps
