"""Planetwalk — main game module (window and frame loop)."""

from __future__ import annotations

import logging

import pygame

from .constants import FPS, SCREEN_HEIGHT, SCREEN_WIDTH, TITLE
from .models.bodies import WorldConfig
from .models.galaxy import Galaxy
from .models.rig import RigConfig
from .screens.surface_view import SurfaceViewScreen
from .ui.hud import HUD

logger = logging.getLogger(__name__)


class Game:
    """Owns the window and drives one screen per frame."""

    def __init__(self, world: WorldConfig, rig_config: RigConfig) -> None:
        # Build the world before opening the window so bad config never shows one
        self.world = world
        self.galaxy = Galaxy(world.galaxy, world.seed)
        self.surface_view = SurfaceViewScreen(world, rig_config, self.galaxy)

        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()
        self.running = True
        self.hud = HUD()

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def run(self) -> None:
        logger.info("Entering main loop")
        while self.running:
            dt = self.clock.tick(FPS) / 1000.0
            self._handle_events()
            self._update(dt)
            self._draw()

        pygame.quit()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return

            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
                return

            self.surface_view.handle_events(event)

    def _update(self, dt: float) -> None:
        self.surface_view.update(dt)

    def _draw(self) -> None:
        self.surface_view.draw(self.screen)
        rig = self.surface_view.rig
        self.hud.draw(
            self.screen,
            rig.contact_position,
            self.world.seed,
            self.galaxy.nearest_star(rig.contact_position),
            self.surface_view.cursor.locked,
        )
        pygame.display.flip()
