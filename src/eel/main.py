# main.py
from __future__ import annotations
import argparse
import random

from .config import CELL_SIZE, CFG, FPS, MIN_LEVEL, MAX_LEVEL, Config, Direction
from .game import SimulationState, new_game_state
from .ticks import TickScheduler

ARROWS = {
    "K_UP": Direction.UP,
    "K_DOWN": Direction.DOWN,
    "K_LEFT": Direction.LEFT,
    "K_RIGHT": Direction.RIGHT,
}


def report_game_over(state: SimulationState) -> None:
    print(f"[EEL] game over: length={state.length}, score={state.score}")


def report_tick(state: SimulationState) -> None:
    print(f"[EEL] head={state.head} length={state.length} debt={state.growth_debt}")


def run_pygame(cfg: Config) -> None:
    import pygame  # type: ignore
    from .render import draw_game, draw_game_over, draw_paused

    rng = random.Random(cfg.seed)
    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode((cfg.width * CELL_SIZE, cfg.height * CELL_SIZE))
    pygame.display.set_caption("Eel")
    clock = pygame.time.Clock()

    arrows = {getattr(pygame, name): d for name, d in ARROWS.items()}
    digits = {getattr(pygame, f"K_{n}"): n for n in range(MIN_LEVEL, MAX_LEVEL + 1)}

    state = new_game_state(cfg.width, cfg.height, rng, cfg.extended)
    scheduler = TickScheduler(cfg.speed)
    paused = False
    running = True

    while running:
        dt = clock.tick(FPS)

        # 1) input
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_q, pygame.K_ESCAPE):
                    running = False
                elif event.key in arrows:
                    state.set_direction(arrows[event.key])
                elif event.key in digits:
                    scheduler.set_level(digits[event.key])
                elif event.key == pygame.K_p:
                    paused = not paused
                elif event.key == pygame.K_r and state.terminal:
                    state = new_game_state(cfg.width, cfg.height, rng, cfg.extended)
                    scheduler.reset()
        if not running:
            break

        # 2) update
        if not paused and not state.terminal:
            fast = bool(pygame.key.get_mods() & pygame.KMOD_SHIFT)
            steps = scheduler.run(state, dt, fast)
            if steps and cfg.debug:
                report_tick(state)
            if state.terminal:
                report_game_over(state)

        # 3) render
        draw_game(screen, font, state, scheduler.level)
        if state.terminal:
            draw_game_over(screen, font, state)
        elif paused:
            draw_paused(screen, font)
        pygame.display.flip()

    pygame.quit()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="eel", description="Eel on a wrap-around grid.")
    parser.add_argument(
        "--renderer",
        type=str,
        default="pygame",
        choices=["pygame", "text"],
        help="pygame window or curses terminal",
    )
    parser.add_argument("--width", type=int, default=CFG.width)
    parser.add_argument("--height", type=int, default=CFG.height)
    parser.add_argument(
        "--speed",
        type=int,
        default=CFG.speed,
        choices=range(MIN_LEVEL, MAX_LEVEL + 1),
        help="speed level, 1 (slow) .. 9 (twice as fast)",
    )
    parser.add_argument(
        "--extended",
        action="store_true",
        help="five food kinds with growth rewards 1..5 and a colored body",
    )
    parser.add_argument("--seed", type=int, default=CFG.seed)
    parser.add_argument("--debug", action="store_true", help="print a line per tick")
    return parser


def config_from_args(argv: list[str] | None = None) -> tuple[Config, str]:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.width < 1 or args.height < 1:
        parser.error(f"board must be at least 1x1, got {args.width}x{args.height}")
    return Config(
        seed=args.seed,
        width=args.width,
        height=args.height,
        speed=args.speed,
        extended=args.extended,
        debug=args.debug,
    ), args.renderer


def main(argv: list[str] | None = None) -> None:
    cfg, renderer = config_from_args(argv)
    if renderer == "text":
        from .term import run_text
        run_text(cfg)
    else:
        run_pygame(cfg)


if __name__ == "__main__":
    main()
