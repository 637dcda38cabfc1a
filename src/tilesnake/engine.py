# engine.py
from dataclasses import dataclass
from enum import Enum
import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np  # type: ignore

from .config import GRID_SIZE, RIGHT, CFG

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]
Heading = Tuple[int, int]

# Rejection-sampling draws before falling back to enumerating free cells.
MAX_FOOD_DRAWS = 64
INITIAL_LENGTH = 3


class RunState(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


# ---------- Helpers ----------
def is_opposite(a: Heading, b: Heading) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def hits_wall(cell: Cell, grid_size: int) -> bool:
    x, y = cell
    return not (0 <= x < grid_size and 0 <= y < grid_size)

def hits_self(cell: Cell, snake: Sequence[Cell]) -> bool:
    # Compared against the whole pre-move body, tail included.
    return cell in snake

def spawn_food(snake: Sequence[Cell], grid_size: int, rng: np.random.Generator) -> Optional[Cell]:
    """
    Pick a uniformly random cell not covered by the snake.

    Rejection sampling first (cheap while the board is mostly empty); after
    MAX_FOOD_DRAWS misses, enumerate the free cells and choose among them.
    Returns None only when the snake covers the whole board.
    """
    occupied = set(snake)
    for _ in range(MAX_FOOD_DRAWS):
        fx, fy = (int(v) for v in rng.integers(0, grid_size, size=2))
        if (fx, fy) not in occupied:
            return (fx, fy)

    grid = np.zeros((grid_size, grid_size), dtype=bool)
    for x, y in occupied:
        grid[y, x] = True
    free = np.argwhere(~grid)           # rows of (y, x)
    logger.debug("food draws exhausted, choosing among %d free cells", len(free))
    if len(free) == 0:
        return None
    fy, fx = free[rng.integers(len(free))]
    return (int(fx), int(fy))

def starting_snake(grid_size: int) -> List[Cell]:
    cx, cy = grid_size // 2, grid_size // 2
    return [(cx - i, cy) for i in range(INITIAL_LENGTH)]


# ---------- Snapshot ----------
@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Cell, ...]       # head first
    food: Optional[Cell]
    heading: Heading
    score: int
    run_state: RunState
    death_reason: Optional[str]
    grid_size: int
    ticks: int


# ---------- Engine ----------
class GameEngine:
    """
    One Snake game: board, snake, food, heading, score and run state.

    Nothing here knows about time or pixels. A driver calls tick() at a fixed
    period and a renderer reads snapshot() afterwards.
    """

    def __init__(
        self,
        grid_size: int = GRID_SIZE,
        rng: Optional[np.random.Generator] = None,
        score_per_food: int = CFG.score_per_food,
    ) -> None:
        if grid_size < INITIAL_LENGTH:
            raise ValueError(f"grid_size must be at least {INITIAL_LENGTH}, got {grid_size}")
        self.grid_size = grid_size
        self.rng = rng if rng is not None else np.random.default_rng(CFG.seed)
        self.score_per_food = score_per_food

        self.snake: List[Cell] = []   # head at index 0
        self.food: Optional[Cell] = None
        self.direction: Heading = RIGHT   # committed by the last tick
        self.pending: Heading = RIGHT     # consumed by the next tick
        self.score = 0
        self.ticks = 0
        self.run_state = RunState.NOT_STARTED
        self.death_reason: Optional[str] = None

    @property
    def head(self) -> Cell:
        return self.snake[0]

    def reset(self, grid_size: Optional[int] = None) -> None:
        """Start a fresh run: centered 3-cell snake heading right, score 0, new food."""
        if grid_size is not None:
            if grid_size < INITIAL_LENGTH:
                raise ValueError(f"grid_size must be at least {INITIAL_LENGTH}, got {grid_size}")
            self.grid_size = grid_size

        self.snake = starting_snake(self.grid_size)
        self.direction = RIGHT
        self.pending = RIGHT
        self.score = 0
        self.ticks = 0
        self.death_reason = None
        self.run_state = RunState.RUNNING
        self.place_food()
        logger.info("new game on %dx%d board, food at %s", self.grid_size, self.grid_size, self.food)

    def place_food(self) -> Optional[Cell]:
        self.food = spawn_food(self.snake, self.grid_size, self.rng)
        return self.food

    def set_heading(self, requested: Heading) -> bool:
        """
        Queue a heading for the next tick; 180° turns are rejected.

        Checked against the committed direction, not the last request, so a
        burst of inputs between two ticks cannot chain into a reversal.
        """
        if is_opposite(requested, self.direction):
            logger.debug("ignoring reversal %s while heading %s", requested, self.direction)
            return False
        self.pending = requested
        return True

    def toggle_pause(self) -> RunState:
        if self.run_state is RunState.RUNNING:
            self.run_state = RunState.PAUSED
        elif self.run_state is RunState.PAUSED:
            self.run_state = RunState.RUNNING
        return self.run_state

    def _game_over(self, reason: str) -> None:
        self.run_state = RunState.GAME_OVER
        self.death_reason = reason
        logger.info("game over (%s) after %d ticks, score %d", reason, self.ticks, self.score)

    def tick(self) -> bool:
        """
        Advance the game by one cell.
        Returns True while the run is alive (running or paused), False otherwise.
        """
        if self.run_state is not RunState.RUNNING:
            return self.run_state is RunState.PAUSED

        # Commit direction once per tick
        self.direction = self.pending

        hx, hy = self.head
        dx, dy = self.direction
        new_head = (hx + dx, hy + dy)

        if hits_wall(new_head, self.grid_size):
            self._game_over("wall")
            return False
        if hits_self(new_head, self.snake):
            self._game_over("self")
            return False

        self.snake.insert(0, new_head)
        self.ticks += 1
        if new_head == self.food:
            self.score += self.score_per_food
            self.place_food()
        else:
            self.snake.pop()
        return True

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake),
            food=self.food,
            heading=self.direction,
            score=self.score,
            run_state=self.run_state,
            death_reason=self.death_reason,
            grid_size=self.grid_size,
            ticks=self.ticks,
        )
