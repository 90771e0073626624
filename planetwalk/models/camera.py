"""Pinhole projection from world space to screen pixels."""

from __future__ import annotations

import math

from pygame.math import Vector3

from ..constants import FOV_DEGREES, NEAR_PLANE
from .transform import Transform


def focal_length(height: int, fov_degrees: float = FOV_DEGREES) -> float:
    """Pixels per unit at depth 1 for a vertical field of view."""
    return (height / 2) / math.tan(math.radians(fov_degrees) / 2)


def to_camera_space(point: Vector3, camera: Transform) -> Vector3:
    return camera.rotation.inverse().apply(point - camera.translation)


def project(
    point: Vector3,
    camera: Transform,
    width: int,
    height: int,
    fov_degrees: float = FOV_DEGREES,
    near: float = NEAR_PLANE,
) -> tuple[float, float] | None:
    """Screen position of ``point``, or None when it is behind the near plane."""
    local = to_camera_space(point, camera)
    depth = -local.z
    if depth < near:
        return None
    f = focal_length(height, fov_degrees)
    return (width / 2 + f * local.x / depth, height / 2 - f * local.y / depth)


def apparent_radius(
    radius: float,
    point: Vector3,
    camera: Transform,
    height: int,
    fov_degrees: float = FOV_DEGREES,
) -> float:
    """On-screen radius in pixels of a sphere; 0 when it is behind the camera."""
    depth = -to_camera_space(point, camera).z
    if depth <= 0:
        return 0.0
    return focal_length(height, fov_degrees) * radius / depth
