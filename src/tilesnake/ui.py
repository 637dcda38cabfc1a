# ui.py
import logging

import pygame # type: ignore

from .controls import heading_for_key, heading_for_button, PAUSE_KEYS, START_KEYS
from .driver import TickDriver
from .engine import GameEngine, RunState
from .render import button_rects, action_button_rect

logger = logging.getLogger(__name__)

SCREENS = {
    RunState.NOT_STARTED: "start",
    RunState.RUNNING: "playing",
    RunState.PAUSED: "paused",
    RunState.GAME_OVER: "game_over",
}


class UIController:
    """Turns pygame events into engine calls and decides which overlay is visible."""

    def __init__(self, engine: GameEngine, driver: TickDriver) -> None:
        self.engine = engine
        self.driver = driver
        self._reported_over = False

    @property
    def screen(self) -> str:
        return SCREENS[self.engine.run_state]

    def start_game(self, now_ms: int) -> None:
        self.engine.reset()
        self.driver.start(now_ms)
        self._reported_over = False

    def toggle_pause(self, now_ms: int) -> None:
        state = self.engine.toggle_pause()
        if state is RunState.RUNNING:
            self.driver.start(now_ms)
            logger.info("resumed")
        elif state is RunState.PAUSED:
            self.driver.stop()
            logger.info("paused at score %d", self.engine.score)

    def _can_start(self) -> bool:
        return self.screen in ("start", "game_over")

    def handle_event(self, event: pygame.event.Event, now_ms: int) -> bool:
        """Process one event. Returns False to quit."""
        if event.type == pygame.QUIT:
            return False

        if event.type == pygame.KEYDOWN:
            heading = heading_for_key(event.key)
            if heading is not None:
                self.engine.set_heading(heading)
            elif event.key in PAUSE_KEYS:
                self.toggle_pause(now_ms)
            elif event.key in START_KEYS and self._can_start():
                self.start_game(now_ms)

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self._can_start() and action_button_rect(self.engine.grid_size).collidepoint(event.pos):
                self.start_game(now_ms)
                return True
            for name, rect in button_rects(self.engine.grid_size).items():
                if rect.collidepoint(event.pos):
                    heading = heading_for_button(name)
                    if heading is not None:
                        self.engine.set_heading(heading)
                    break
        return True

    def poll_game_over(self) -> bool:
        """Log the final score and death reason once per run; True on the call that logged it."""
        if self.engine.run_state is RunState.GAME_OVER and not self._reported_over:
            self._reported_over = True
            logger.info("final score %d (%s)", self.engine.score, self.engine.death_reason)
            return True
        return False
