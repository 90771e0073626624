"""Surface view — walk the planet under the generated star field."""

from __future__ import annotations

import math

import pygame
from pygame.math import Vector3

from ..constants import AMBER, CYAN, SCREEN_HEIGHT, SCREEN_WIDTH, WHITE
from ..models.bodies import Body, WorldConfig
from ..models.camera import apparent_radius, project
from ..models.galaxy import Galaxy
from ..models.rig import Directions, InputFrame, Link, PlayerRig, RigConfig
from ..models.transform import Transform
from ..states import CursorLockState

_MOVE_KEYS = {
    "forward": (pygame.K_w, pygame.K_UP),
    "back": (pygame.K_s, pygame.K_DOWN),
    "left": (pygame.K_a, pygame.K_LEFT),
    "right": (pygame.K_d, pygame.K_RIGHT),
}

_WIREFRAME_RINGS = 12
_WIREFRAME_SEGMENTS = 36


def directions_from_keys(keys_held: set[int]) -> Directions:
    """Map held key codes to movement directions."""
    return Directions(
        **{name: any(k in keys_held for k in keys) for name, keys in _MOVE_KEYS.items()}
    )


def sphere_wireframe(body: Body, rings: int = _WIREFRAME_RINGS, segments: int = _WIREFRAME_SEGMENTS) -> list[list[Vector3]]:
    """Latitude and longitude polylines over the surface of ``body``."""
    lines: list[list[Vector3]] = []
    r = body.radius
    c = body.position
    for i in range(1, rings):
        lat = math.pi * i / rings - math.pi / 2
        y = r * math.sin(lat)
        ring_r = r * math.cos(lat)
        lines.append([
            c + Vector3(ring_r * math.cos(a), y, ring_r * math.sin(a))
            for a in (math.tau * j / segments for j in range(segments + 1))
        ])
    for j in range(segments // 2):
        a = math.tau * j / (segments // 2)
        lines.append([
            c + Vector3(r * math.cos(lat) * math.cos(a), r * math.sin(lat), r * math.cos(lat) * math.sin(a))
            for lat in (math.pi * i / segments - math.pi / 2 for i in range(segments + 1))
        ])
    return lines


class SurfaceViewScreen:
    """Third-person view of the rig on the planet surface."""

    def __init__(self, world: WorldConfig, rig_config: RigConfig, galaxy: Galaxy) -> None:
        self.world = world
        self.galaxy = galaxy
        self.cursor = CursorLockState()
        self.rig = PlayerRig(rig_config, world.planet, self.cursor)
        self.input = InputFrame()
        self._keys_held: set[int] = set()

        self._planet_lines = sphere_wireframe(world.planet)
        self._moon_lines = sphere_wireframe(world.moon, rings=6, segments=18)

    def handle_events(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            self._keys_held.add(event.key)
        elif event.type == pygame.KEYUP:
            self._keys_held.discard(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 1:
                self.cursor.capture()
                pygame.mouse.set_visible(False)
                pygame.event.set_grab(True)
            elif event.button == 3:
                self.cursor.release()
                pygame.mouse.set_visible(True)
                pygame.event.set_grab(False)
        elif event.type == pygame.MOUSEMOTION:
            self.input.add_motion(*event.rel)

    def update(self, dt: float) -> None:
        self.input.directions = directions_from_keys(self._keys_held)
        self.rig.apply_look(self.input.look_x, self.input.look_y)
        self.rig.tick(self.input.directions, dt)
        self.input.clear()

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(self.world.clear_color)
        camera = self.rig.world_transform(Link.CAMERA)

        for star in self.galaxy.stars:
            pos = project(star.position, camera, SCREEN_WIDTH, SCREEN_HEIGHT)
            if pos is None:
                continue
            radius = apparent_radius(star.radius, star.position, camera, SCREEN_HEIGHT)
            pygame.draw.circle(surface, star.color, pos, max(1, min(radius, SCREEN_HEIGHT)))

        self._draw_body(surface, camera, self.world.moon, self._moon_lines)
        self._draw_body(surface, camera, self.world.planet, self._planet_lines)

        # Rig links as markers, head brightest
        for link, color in ((Link.LEGS, AMBER), (Link.TORSO, CYAN), (Link.HEAD, WHITE)):
            pos = project(self.rig.world_transform(link).translation, camera, SCREEN_WIDTH, SCREEN_HEIGHT)
            if pos is not None:
                pygame.draw.circle(surface, color, pos, 4)

    def _draw_body(
        self,
        surface: pygame.Surface,
        camera: Transform,
        body: Body,
        lines: list[list[Vector3]],
    ) -> None:
        """Emissive bodies glow as a solid disc, lit ones show their wireframe."""
        if not body.emissive:
            self._draw_wireframe(surface, camera, body, lines)
            return
        pos = project(body.position, camera, SCREEN_WIDTH, SCREEN_HEIGHT)
        if pos is None:
            return
        radius = apparent_radius(body.radius, body.position, camera, SCREEN_HEIGHT)
        pygame.draw.circle(surface, body.color, pos, max(1, min(radius, SCREEN_HEIGHT)))

    def _draw_wireframe(
        self,
        surface: pygame.Surface,
        camera: Transform,
        body: Body,
        lines: list[list[Vector3]],
    ) -> None:
        eye = camera.translation
        for line in lines:
            prev: tuple[float, float] | None = None
            for point in line:
                # Skip the far hemisphere
                facing = (point - body.position).dot(eye - point) >= 0
                pos = project(point, camera, SCREEN_WIDTH, SCREEN_HEIGHT) if facing else None
                if pos is not None and prev is not None:
                    pygame.draw.line(surface, body.color, prev, pos)
                prev = pos
