# driver.py
import logging
from typing import Optional

from .config import CFG
from .engine import GameEngine, RunState

logger = logging.getLogger(__name__)


class TickDriver:
    """
    Repeating timer that calls engine.tick() every interval_ms.

    The caller feeds it the clock (pygame.time.get_ticks() in the game,
    plain integers in tests). Once the engine leaves RUNNING the driver
    disarms itself; start() must be called again after reset or resume.
    """

    def __init__(self, engine: GameEngine, interval_ms: int = CFG.tick_ms) -> None:
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self.engine = engine
        self.interval_ms = interval_ms
        self._last_fire: Optional[int] = None

    @property
    def active(self) -> bool:
        return self._last_fire is not None

    def start(self, now_ms: int) -> None:
        self._last_fire = now_ms
        logger.debug("tick driver armed at %d ms (every %d ms)", now_ms, self.interval_ms)

    def stop(self) -> None:
        if self._last_fire is not None:
            logger.debug("tick driver stopped")
        self._last_fire = None

    def update(self, now_ms: int) -> int:
        """Run at most one tick if one is due at now_ms; returns how many ran (0 or 1)."""
        if self._last_fire is None:
            return 0
        if self.engine.run_state is not RunState.RUNNING:
            self.stop()
            return 0
        elapsed = now_ms - self._last_fire
        if elapsed < self.interval_ms:
            return 0

        # Missed intervals after a stall are dropped, not replayed.
        self._last_fire += (elapsed // self.interval_ms) * self.interval_ms
        self.engine.tick()
        if self.engine.run_state is not RunState.RUNNING:
            self.stop()
        return 1
