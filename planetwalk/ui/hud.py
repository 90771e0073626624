"""HUD overlay — position readout, nearest star, cursor hint."""

from __future__ import annotations

import pygame
from pygame.math import Vector3

from ..constants import (
    AMBER,
    CYAN,
    LIGHT_GREY,
    PANEL_BG,
    PANEL_BORDER,
    SCREEN_WIDTH,
    WHITE,
)
from ..models.galaxy import Star


def format_coord(v: Vector3) -> str:
    """Vector as three space-separated numbers in scientific notation."""
    return f"{v.x:e} {v.y:e} {v.z:e}"


class HUD:
    """Heads-up display drawn over the surface view."""

    def __init__(self) -> None:
        self.font = pygame.font.Font(None, 24)
        self.font_small = pygame.font.Font(None, 20)
        self.panel_height = 40

    def draw(
        self,
        surface: pygame.Surface,
        position: Vector3,
        seed: str,
        nearest: Star,
        locked: bool,
    ) -> None:
        # Semi-transparent top bar
        bar = pygame.Surface((SCREEN_WIDTH, self.panel_height), pygame.SRCALPHA)
        bar.fill(PANEL_BG)
        surface.blit(bar, (0, 0))
        pygame.draw.line(
            surface, PANEL_BORDER, (0, self.panel_height), (SCREEN_WIDTH, self.panel_height)
        )

        x = 15
        y = 12
        self._draw_stat(surface, "pos", format_coord(position), WHITE, x, y)
        x += 420
        self._draw_stat(surface, "seed", seed, AMBER, x, y)
        x += 260
        self._draw_stat(surface, "near", nearest.name, nearest.color, x, y)

        hint = "RMB: release cursor" if locked else "LMB: capture cursor"
        hint_surf = self.font_small.render(hint, True, CYAN)
        surface.blit(hint_surf, (SCREEN_WIDTH - hint_surf.get_width() - 15, y))

    def _draw_stat(
        self,
        surface: pygame.Surface,
        label: str,
        text: str,
        color: tuple[int, int, int],
        x: int,
        y: int,
    ) -> None:
        label_surf = self.font_small.render(label, True, LIGHT_GREY)
        surface.blit(label_surf, (x, y))
        val_surf = self.font.render(text, True, color)
        surface.blit(val_surf, (x + label_surf.get_width() + 8, y - 1))
