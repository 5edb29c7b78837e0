"""
Rendering helpers for Cat Stack.

- Canvas: a pygame Surface with a save/translate/restore stack, so the
  camera can be applied as one translation around the world drawing.
- RenderAssets: sprite images (loaded from disk, or placeholders) and fonts.
- Hud: cached time/score text surfaces; re-rendered only when values change.
- draw_scene: projects a SessionState onto a Canvas without touching it.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import List, Optional, Tuple

import pygame

from catstack_config import CONFIG
from catstack_layout import Dims
from catstack_session import SessionState

logger = logging.getLogger(__name__)

SKY = (135, 206, 235)
GROUND = (139, 69, 19)
CLEAR = (0, 0, 0)
PROMPT = (255, 255, 255)
HUD_TEXT = (255, 255, 255)
PROMPT_TEXT = "Press SPACE to start the game!"

# Placeholder fills when a sprite image is missing
PLACEHOLDER_COLORS: List[Tuple[int, int, int]] = [
    (255, 158, 94),
    (120, 120, 130),
    (240, 230, 210),
    (200, 119, 255),
    (94, 224, 142),
]


class Canvas:
    """Drawing surface with a translation stack."""

    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self.dx = 0.0
        self.dy = 0.0
        self._saved: List[Tuple[float, float]] = []

    @property
    def size(self) -> Tuple[int, int]:
        return self.surface.get_size()

    def save(self):
        self._saved.append((self.dx, self.dy))

    def restore(self):
        if not self._saved:
            raise RuntimeError("Canvas.restore() without a matching save()")
        self.dx, self.dy = self._saved.pop()

    def translate(self, dx: float, dy: float):
        self.dx += dx
        self.dy += dy

    def clear(self):
        self.surface.fill(CLEAR)

    def fill_rect(self, color, rect):
        x, y, w, h = rect
        self.surface.fill(color, pygame.Rect(round(x + self.dx), round(y + self.dy), round(w), round(h)))

    def draw_image(self, image: pygame.Surface, x: float, y: float, size: int):
        if image.get_size() != (size, size):
            image = pygame.transform.scale(image, (size, size))
        self.surface.blit(image, (round(x + self.dx), round(y + self.dy)))

    def text_centered(self, text: str, font: pygame.font.Font, color, x: float, y: float):
        surf = font.render(text, True, color)
        self.surface.blit(surf, surf.get_rect(center=(round(x + self.dx), round(y + self.dy))))


def placeholder_image(index: int, size: int) -> pygame.Surface:
    s = pygame.Surface((size, size), pygame.SRCALPHA)
    col = PLACEHOLDER_COLORS[index % len(PLACEHOLDER_COLORS)]
    pygame.draw.rect(s, col, (0, 0, size, size), border_radius=max(1, size // 5))
    pygame.draw.rect(s, (40, 40, 40), (0, 0, size, size), 2, border_radius=max(1, size // 5))
    return s


def load_sprite_images(asset_dir: str, count: int, size: int) -> List[pygame.Surface]:
    """Load cat1.png .. catN.png from `asset_dir`, scaled to `size`."""
    images = []
    for i in range(1, count + 1):
        path = os.path.join(asset_dir, f"cat{i}.png")
        try:
            img = pygame.image.load(path)
        except (FileNotFoundError, pygame.error) as exc:
            logger.warning("sprite %s unavailable (%s); using placeholder", path, exc)
            images.append(placeholder_image(i - 1, size))
            continue
        if pygame.display.get_surface() is not None:
            img = img.convert_alpha()
        images.append(pygame.transform.scale(img, (size, size)))
    return images


class RenderAssets:
    """Holds sprite images and fonts."""

    def __init__(self, dims: Dims, cfg=CONFIG):
        self.images = load_sprite_images(cfg["ASSET_DIR"], cfg["SPRITE_COUNT"], dims.sprite)
        self.prompt_font = pygame.font.SysFont("arial", 30)
        self.hud_font = pygame.font.SysFont("arial", 24)


@dataclass
class Hud:
    font: pygame.font.Font
    time_remaining: int = -1
    score: int = -1
    time_s: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None

    def set_time(self, seconds: int):
        if seconds != self.time_remaining:
            self.time_remaining = seconds
            self.time_s = self.font.render(f"Time: {seconds}s", True, HUD_TEXT)

    def set_score(self, score: int):
        if score != self.score:
            self.score = score
            self.score_s = self.font.render(f"Score: {score}", True, HUD_TEXT)

    def draw(self, screen: pygame.Surface):
        if self.time_s: screen.blit(self.time_s, (12, 10))
        if self.score_s: screen.blit(self.score_s, (12, 38))


def draw_scene(canvas: Canvas, state: SessionState, dims: Dims, images, prompt_font):
    """Project `state` onto `canvas`. Reads state only."""
    off = state.camera_offset
    s = dims.sprite
    canvas.clear()
    canvas.save()
    canvas.translate(0, off)
    # sky stays glued to the viewport whatever the translation
    canvas.fill_rect(SKY, (0, -off, dims.width, dims.height))
    canvas.fill_rect(GROUND, (0, dims.ground_y, dims.width, dims.ground_h))
    for c in state.stack:
        canvas.draw_image(images[c.image], c.x, c.y, s)
    cur = state.current
    canvas.draw_image(images[cur.image], cur.x, cur.y, s)
    canvas.restore()
    if not state.active:
        canvas.text_centered(PROMPT_TEXT, prompt_font, PROMPT, dims.width / 2, dims.height / 2)
