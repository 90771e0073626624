from __future__ import annotations

import math

import pygame
import pytest
from pygame.math import Vector3

from planetwalk.constants import GRASS, SCREEN_HEIGHT, SCREEN_WIDTH
from planetwalk.models.bodies import Body, Emissive, Lit, WorldConfig
from planetwalk.models.galaxy import Galaxy, GalaxyConfig
from planetwalk.models.rig import Directions, Link, RigConfig
from planetwalk.models.transform import Transform
from planetwalk.screens.surface_view import SurfaceViewScreen, directions_from_keys, sphere_wireframe
from planetwalk.ui.hud import format_coord


def test_wasd_and_arrows_map_to_directions():
    assert directions_from_keys(set()) == Directions()
    assert directions_from_keys({pygame.K_w, pygame.K_d}) == Directions(forward=True, right=True)
    assert directions_from_keys({pygame.K_DOWN, pygame.K_LEFT}) == Directions(back=True, left=True)
    assert directions_from_keys({pygame.K_SPACE}) == Directions()


def test_wireframe_points_lie_on_sphere():
    body = Body(radius=50.0, material=Lit(GRASS), position=Vector3(1, 2, 3))
    lines = sphere_wireframe(body, rings=4, segments=8)
    assert len(lines) == 3 + 4
    for line in lines:
        for point in line:
            assert point.distance_to(body.position) == pytest.approx(50.0)


def test_format_coord_uses_scientific_notation():
    assert format_coord(Vector3(0, 100, -44.5)) == "0.000000e+00 1.000000e+02 -4.450000e+01"


@pytest.fixture
def screen():
    pygame.display.init()
    pygame.display.set_mode((64, 64))
    world = WorldConfig.default("test")
    yield SurfaceViewScreen(world, RigConfig(), Galaxy(world.galaxy, world.seed))
    pygame.event.set_grab(False)
    pygame.display.quit()


def _click(screen, button):
    screen.handle_events(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button, pos=(0, 0)))


def _move(screen, dx, dy):
    screen.handle_events(
        pygame.event.Event(pygame.MOUSEMOTION, rel=(dx, dy), pos=(0, 0), buttons=(0, 0, 0))
    )


def test_motion_is_ignored_until_left_click(screen):
    before = screen.rig.world_transform(Link.LEGS).forward()
    _move(screen, -200, 0)
    screen.update(1 / 60)
    assert screen.rig.world_transform(Link.LEGS).forward() == before


def test_locked_motion_events_sum_into_one_yaw(screen, assert_vec):
    _click(screen, 1)
    assert screen.cursor.locked
    for _ in range(3):
        _move(screen, -100, 0)
    screen.update(1 / 60)

    yaw = 0.3
    assert_vec(screen.rig.world_transform(Link.LEGS).forward(), (-math.sin(yaw), 0, -math.cos(yaw)))
    assert (screen.input.look_x, screen.input.look_y) == (0.0, 0.0)


def test_right_click_stops_look(screen):
    _click(screen, 1)
    _move(screen, -100, 0)
    screen.update(1 / 60)
    turned = screen.rig.world_transform(Link.LEGS).forward()

    _click(screen, 3)
    assert not screen.cursor.locked
    _move(screen, -100, 0)
    screen.update(1 / 60)
    assert screen.rig.world_transform(Link.LEGS).forward() == turned


def _body_pixels(material, body_color):
    surface = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    world = WorldConfig.default("test")
    screen = SurfaceViewScreen(world, RigConfig(), Galaxy(GalaxyConfig(), "test"))
    body = Body(radius=2.0, material=material, position=Vector3(0, 0, -10))
    screen._draw_body(surface, Transform(), body, sphere_wireframe(body))
    centre = tuple(surface.get_at((SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2)))[:3]
    count = pygame.mask.from_threshold(surface, body_color, (1, 1, 1, 255)).count()
    return centre, count


def test_emissive_body_draws_solid_disc():
    glow = (250, 240, 200)
    centre, count = _body_pixels(Emissive(glow), glow)
    assert centre == glow
    # f = 360 / tan(35 deg) ~ 514 px, so the disc radius is ~103 px
    assert count > 0.9 * math.pi * 100 ** 2


def test_lit_body_draws_wireframe_only():
    _, count = _body_pixels(Lit(GRASS), GRASS)
    assert 0 < count < 0.5 * math.pi * 100 ** 2
