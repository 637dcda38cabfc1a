# main.py
import argparse
import dataclasses
import logging

import numpy as np  # type: ignore
import pygame # type: ignore

from .config import CFG, Config, window_size
from .driver import TickDriver
from .engine import GameEngine
from .render import draw_frame
from .ui import UIController

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> Config:
    parser = argparse.ArgumentParser(prog="tilesnake", description="Play Snake.")
    parser.add_argument("--grid-size", type=int, default=CFG.grid_size,
                        help="board is N x N tiles (default: %(default)s)")
    parser.add_argument("--tick-ms", type=int, default=CFG.tick_ms,
                        help="milliseconds between moves (default: %(default)s)")
    parser.add_argument("--seed", type=int, default=CFG.seed,
                        help="seed for food placement, for reproducible games")
    parser.add_argument("--log-level", type=str, default=CFG.log_level,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    if args.grid_size < 3:
        parser.error("--grid-size must be at least 3")
    if args.tick_ms <= 0:
        parser.error("--tick-ms must be positive")

    return dataclasses.replace(
        CFG,
        grid_size=args.grid_size,
        tick_ms=args.tick_ms,
        seed=args.seed,
        log_level=args.log_level,
    )


def build_game(cfg: Config):
    """Engine, driver and controller wired together, no window needed."""
    engine = GameEngine(
        grid_size=cfg.grid_size,
        rng=np.random.default_rng(cfg.seed),
        score_per_food=cfg.score_per_food,
    )
    driver = TickDriver(engine, interval_ms=cfg.tick_ms)
    return engine, driver, UIController(engine, driver)


def main(argv=None):
    cfg = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, cfg.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode(window_size(cfg.grid_size))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    engine, driver, ui = build_game(cfg)
    logger.info("window %sx%s, tick every %d ms", *window_size(cfg.grid_size), cfg.tick_ms)

    running = True
    while running:
        # 1) input
        for event in pygame.event.get():
            if not ui.handle_event(event, pygame.time.get_ticks()):
                running = False
                break
        if not running:
            break

        # 2) update (the driver decides whether a move is due)
        driver.update(pygame.time.get_ticks())
        ui.poll_game_over()

        # 3) render
        draw_frame(screen, font, engine.snapshot(), ui.screen)
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
