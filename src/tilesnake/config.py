from dataclasses import dataclass
from typing import Optional, Tuple

# ----- Board & window -----
TILE_SIZE = 20
GRID_SIZE = 20
PANEL_HEIGHT = 150          # score line + on-screen direction pad

# ----- Colors -----
BG          = (0x16, 0x21, 0x3e)
PANEL_BG    = (0x1a, 0x1a, 0x2e)
FOOD        = (0x4c, 0xd1, 0x37)
SNAKE_HEAD  = (0xe9, 0x45, 0x60)
SNAKE_BODY  = (0x0f, 0x34, 0x60)
TEXT        = (220, 220, 230)
BUTTON      = (0x53, 0x34, 0x83)
BUTTON_TEXT = (240, 240, 250)

# ----- Headings (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
HEADINGS = (UP, DOWN, LEFT, RIGHT)

# ----- Tunables -----
@dataclass(frozen=True)
class Config:
    seed: Optional[int] = None      # None -> fresh entropy every run
    grid_size: int = GRID_SIZE
    tick_ms: int = 250
    score_per_food: int = 10
    log_level: str = "INFO"

CFG = Config()


def window_size(grid_size: int) -> Tuple[int, int]:
    """Pixel size of the window for a grid_size x grid_size board plus the control panel."""
    return grid_size * TILE_SIZE, grid_size * TILE_SIZE + PANEL_HEIGHT
