# render.py
from __future__ import annotations
from typing import List, Tuple

import numpy as np  # type: ignore
import pygame       # type: ignore

from .config import CELL_SIZE, BG, GREEN, RED, TEXT
from .game import SimulationState

RGB = Tuple[int, int, int]

# Cell codes in the occupancy grid
EMPTY, BODY, HEAD, FOOD = 0, 1, 2, 3

GLYPHS = np.array([" ", "o", ">", "*"])

# -----------------------------------------------------------------------------
# Pure views of the state
# -----------------------------------------------------------------------------
def occupancy_grid(state: SimulationState) -> np.ndarray:
    """
    Return an int8 array of shape (height, width) indexed [y, x]:
      0 empty, 1 body, 2 head, 3 food
    """
    grid = np.zeros((state.height, state.width), dtype=np.int8)
    fx, fy = state.food.cell
    grid[fy, fx] = FOOD
    for x, y in state.body[1:]:
        grid[y, x] = BODY
    hx, hy = state.head
    grid[hy, hx] = HEAD
    return grid


def text_frame(state: SimulationState) -> str:
    """Board as text: '>' head, 'o' body, '*' food."""
    rows = GLYPHS[occupancy_grid(state)]
    return "\n".join("".join(row) for row in rows)


def gradient(head: RGB, tail: RGB, n: int) -> List[RGB]:
    """n colors linearly interpolated from head to tail."""
    if n <= 0:
        return []
    if n == 1:
        return [tuple(head)]
    stops = np.linspace(np.asarray(head, dtype=np.float64), np.asarray(tail, dtype=np.float64), n)
    return [tuple(int(round(c)) for c in row) for row in stops]


def body_colors(state: SimulationState) -> List[RGB]:
    """One color per body cell, head first. Flat green in the basic game."""
    if not state.extended:
        return [GREEN] * state.length
    return gradient(state.head_color, state.tail_color, state.length)


def food_color(state: SimulationState) -> RGB:
    kind = state.food.kind
    return kind.color if kind is not None else RED

# -----------------------------------------------------------------------------
# pygame drawing
# -----------------------------------------------------------------------------
def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: RGB) -> None:
    rect = pygame.Rect(gx * CELL_SIZE, gy * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, color, rect)


def draw_game(screen: pygame.Surface, font: pygame.font.Font, state: SimulationState, level: int) -> None:
    screen.fill(BG)
    # food
    draw_cell(screen, state.food.cell[0], state.food.cell[1], food_color(state))
    # eel, tail first so the head stays on top
    for (x, y), color in reversed(list(zip(state.body, body_colors(state)))):
        draw_cell(screen, x, y, color)
    # hud
    txt = font.render(f"Score: {state.score}  Length: {state.length}  Speed: {level}", True, TEXT)
    screen.blit(txt, (8, 6))


def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, state: SimulationState) -> None:
    width, height = screen.get_size()
    # Dim with translucent overlay
    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    title = font.render("GAME OVER", True, (240, 240, 250))
    sub   = font.render("Press R to restart", True, (220, 220, 230))
    sco   = font.render(f"Score: {state.score}  Length: {state.length}", True, (220, 220, 230))

    tx = title.get_rect(center=(width // 2, height // 2 - 16))
    sx = sub.get_rect(center=(width // 2, height // 2 + 16))
    cx = sco.get_rect(center=(width // 2, height // 2 + 44))

    screen.blit(title, tx)
    screen.blit(sub, sx)
    screen.blit(sco, cx)


def draw_paused(screen: pygame.Surface, font: pygame.font.Font) -> None:
    width, height = screen.get_size()
    label = font.render("PAUSED", True, TEXT)
    screen.blit(label, label.get_rect(center=(width // 2, height // 2)))
