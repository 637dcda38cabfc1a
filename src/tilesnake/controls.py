# controls.py
from typing import Dict, Optional

import pygame # type: ignore

from .config import UP, DOWN, LEFT, RIGHT
from .engine import Heading

# Arrow keys, with WASD as aliases.
KEY_HEADINGS: Dict[int, Heading] = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_w: UP,
    pygame.K_s: DOWN,
    pygame.K_a: LEFT,
    pygame.K_d: RIGHT,
}

# On-screen direction pad
BUTTON_HEADINGS: Dict[str, Heading] = {
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
}

PAUSE_KEYS = frozenset({pygame.K_p, pygame.K_SPACE})
START_KEYS = frozenset({pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_r})


def heading_for_key(key: int) -> Optional[Heading]:
    return KEY_HEADINGS.get(key)

def heading_for_button(name: str) -> Optional[Heading]:
    return BUTTON_HEADINGS.get(name)
