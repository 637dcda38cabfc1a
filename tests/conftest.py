import os

# Headless SDL so pygame works without a display or sound card.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pygame
import pytest

from tilesnake.engine import GameEngine


@pytest.fixture(scope="session", autouse=True)
def pygame_session():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def engine():
    """A 20x20 engine that has been reset, with a seeded food RNG."""
    eng = GameEngine(grid_size=20, rng=np.random.default_rng(1234))
    eng.reset()
    return eng
