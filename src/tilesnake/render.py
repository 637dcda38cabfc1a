# render.py
from typing import Dict, Tuple

import pygame # type: ignore

from .config import (
    TILE_SIZE, PANEL_HEIGHT,
    BG, PANEL_BG, FOOD, SNAKE_HEAD, SNAKE_BODY, TEXT, BUTTON, BUTTON_TEXT,
)
from .engine import Snapshot

BUTTON_SIZE = 40
BUTTON_GAP = 8
GLOW_PAD = 4
ARROWS = {"up": "^", "down": "v", "left": "<", "right": ">"}


# ---------- Layout ----------
def board_px(grid_size: int) -> int:
    return grid_size * TILE_SIZE

def button_rects(grid_size: int) -> Dict[str, pygame.Rect]:
    """Hit boxes of the on-screen direction pad, laid out as an inverted T."""
    cx = board_px(grid_size) // 2
    top = board_px(grid_size) + 40
    step = BUTTON_SIZE + BUTTON_GAP
    half = BUTTON_SIZE // 2
    return {
        "up":    pygame.Rect(cx - half, top, BUTTON_SIZE, BUTTON_SIZE),
        "left":  pygame.Rect(cx - half - step, top + step, BUTTON_SIZE, BUTTON_SIZE),
        "down":  pygame.Rect(cx - half, top + step, BUTTON_SIZE, BUTTON_SIZE),
        "right": pygame.Rect(cx - half + step, top + step, BUTTON_SIZE, BUTTON_SIZE),
    }

def action_button_rect(grid_size: int) -> pygame.Rect:
    """The Start / Restart button shown on the overlays."""
    rect = pygame.Rect(0, 0, 140, 40)
    rect.center = (board_px(grid_size) // 2, board_px(grid_size) // 2 + 50)
    return rect

def cell_rect(gx: int, gy: int) -> pygame.Rect:
    return pygame.Rect(gx * TILE_SIZE, gy * TILE_SIZE, TILE_SIZE - 2, TILE_SIZE - 2)


# ---------- Board ----------
def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    pygame.draw.rect(screen, color, cell_rect(gx, gy))

def draw_food(screen: pygame.Surface, gx: int, gy: int) -> None:
    glow = pygame.Surface((TILE_SIZE - 2 + 2 * GLOW_PAD, TILE_SIZE - 2 + 2 * GLOW_PAD), pygame.SRCALPHA)
    glow.fill((*FOOD, 70))
    screen.blit(glow, (gx * TILE_SIZE - GLOW_PAD, gy * TILE_SIZE - GLOW_PAD))
    draw_cell(screen, gx, gy, FOOD)

def draw_board(screen: pygame.Surface, snap: Snapshot) -> None:
    size = board_px(snap.grid_size)
    screen.fill(BG, pygame.Rect(0, 0, size, size))
    if snap.food is not None:
        draw_food(screen, snap.food[0], snap.food[1])
    for i, (x, y) in enumerate(snap.snake):
        draw_cell(screen, x, y, SNAKE_HEAD if i == 0 else SNAKE_BODY)


# ---------- Panel ----------
def draw_button(screen: pygame.Surface, font: pygame.font.Font, rect: pygame.Rect, label: str) -> None:
    pygame.draw.rect(screen, BUTTON, rect, border_radius=6)
    txt = font.render(label, True, BUTTON_TEXT)
    screen.blit(txt, txt.get_rect(center=rect.center))

def draw_panel(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    size = board_px(snap.grid_size)
    screen.fill(PANEL_BG, pygame.Rect(0, size, size, PANEL_HEIGHT))
    txt = font.render(f"Score: {snap.score}", True, TEXT)
    screen.blit(txt, (8, size + 8))
    for name, rect in button_rects(snap.grid_size).items():
        draw_button(screen, font, rect, ARROWS[name])


# ---------- Overlays ----------
def _overlay(screen: pygame.Surface, font: pygame.font.Font, grid_size: int, lines) -> None:
    size = board_px(grid_size)
    shade = pygame.Surface((size, size), pygame.SRCALPHA)
    shade.fill((0, 0, 0, 140))  # RGBA
    screen.blit(shade, (0, 0))
    for i, (text, color) in enumerate(lines):
        surf = font.render(text, True, color)
        screen.blit(surf, surf.get_rect(center=(size // 2, size // 2 - 40 + i * 28)))

def draw_start_screen(screen: pygame.Surface, font: pygame.font.Font, grid_size: int) -> None:
    _overlay(screen, font, grid_size, [
        ("SNAKE", (240, 240, 250)),
        ("Arrows / buttons to steer, P to pause", TEXT),
    ])
    draw_button(screen, font, action_button_rect(grid_size), "Start")

def draw_paused(screen: pygame.Surface, font: pygame.font.Font, grid_size: int) -> None:
    _overlay(screen, font, grid_size, [
        ("PAUSED", (240, 240, 250)),
        ("Press P to resume", TEXT),
    ])

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, grid_size: int, score: int) -> None:
    _overlay(screen, font, grid_size, [
        ("GAME OVER", (240, 240, 250)),
        (f"Final score: {score}", TEXT),
    ])
    draw_button(screen, font, action_button_rect(grid_size), "Restart")

def draw_frame(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot, screen_name: str) -> None:
    """Redraw everything: board, panel, then whichever overlay is showing."""
    draw_board(screen, snap)
    draw_panel(screen, font, snap)
    if screen_name == "start":
        draw_start_screen(screen, font, snap.grid_size)
    elif screen_name == "paused":
        draw_paused(screen, font, snap.grid_size)
    elif screen_name == "game_over":
        draw_game_over(screen, font, snap.grid_size, snap.score)
