# term.py
"""Text-terminal shell: curses screen, i/j/k/l to steer, q to quit."""
from __future__ import annotations
import curses
import random
import time

from .config import Config, Direction
from .game import SimulationState, new_game_state
from .main import report_game_over
from .render import text_frame
from .ticks import TickScheduler

KEYS = {
    "i": Direction.UP,
    "k": Direction.DOWN,
    "j": Direction.LEFT,
    "l": Direction.RIGHT,
}

POLL_MS = 100
GAME_OVER = "Game Over! press q to exit."


def _put(screen, row: int, text: str, max_x: int) -> None:
    # the bottom-right cell raises even when in bounds
    try:
        screen.addstr(row, 0, text[:max_x])
    except curses.error:
        pass


def draw(screen, state: SimulationState) -> None:
    """Draw the board clipped to the window; the last line shows game over."""
    max_y, max_x = screen.getmaxyx()
    screen.erase()
    lines = text_frame(state).splitlines()
    for row, line in enumerate(lines[: max(max_y - 1, 0)]):
        _put(screen, row, line, max_x)
    if state.terminal and max_y > 0:
        _put(screen, min(len(lines), max_y - 1), GAME_OVER, max_x)
    screen.refresh()


def _loop(screen, cfg: Config) -> SimulationState:
    curses.curs_set(0)
    screen.timeout(POLL_MS)

    state = new_game_state(cfg.width, cfg.height, random.Random(cfg.seed), cfg.extended)
    scheduler = TickScheduler(cfg.speed)
    draw(screen, state)
    last = time.monotonic()

    while True:
        ch = screen.getch()
        if ch != -1:
            key = chr(ch).lower() if 0 <= ch < 256 else ""
            if key == "q":
                return state
            if key in KEYS:
                state.set_direction(KEYS[key])

        now = time.monotonic()
        steps = scheduler.run(state, (now - last) * 1000.0)
        last = now
        if steps:
            draw(screen, state)


def run_text(cfg: Config) -> None:
    state = curses.wrapper(_loop, cfg)
    if state.terminal:
        report_game_over(state)
