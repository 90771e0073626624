from __future__ import annotations

import os

import pytest

# Keep pygame quiet and headless for the whole session
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from pygame.math import Vector3  # noqa: E402


def xyz(v: Vector3) -> tuple[float, float, float]:
    return (v.x, v.y, v.z)


@pytest.fixture
def assert_vec():
    """Compare a Vector3 against an (x, y, z) tuple within tolerance."""

    def check(v: Vector3, expected, abs: float = 1e-6) -> None:
        assert xyz(v) == pytest.approx(tuple(expected), abs=abs)

    return check
