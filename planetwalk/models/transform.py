"""Rigid transforms built on pygame's Vector3.

Orientation is stored as an orthonormal basis: the images of the unit
X, Y and Z axes. The convention matches a right-handed, Y-up world where
an object looks down its local -Z axis.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from pygame.math import Vector3

_EPSILON = 1e-9

UNIT_X = Vector3(1.0, 0.0, 0.0)
UNIT_Y = Vector3(0.0, 1.0, 0.0)
UNIT_Z = Vector3(0.0, 0.0, 1.0)


def safe_normalize(v: Vector3) -> Vector3 | None:
    """Return ``v`` scaled to unit length, or None for a zero-length vector."""
    if v.length_squared() < _EPSILON * _EPSILON:
        return None
    return v.normalize()


class Rotation:
    """A 3D rotation held as three basis columns."""

    __slots__ = ("x_axis", "y_axis", "z_axis")

    def __init__(self, x_axis: Vector3, y_axis: Vector3, z_axis: Vector3) -> None:
        self.x_axis = Vector3(x_axis)
        self.y_axis = Vector3(y_axis)
        self.z_axis = Vector3(z_axis)

    @classmethod
    def identity(cls) -> Rotation:
        return cls(UNIT_X, UNIT_Y, UNIT_Z)

    @classmethod
    def from_axis_angle(cls, axis: Vector3, angle: float) -> Rotation:
        """Right-handed rotation of ``angle`` radians about ``axis``.

        A zero angle or a zero-length axis gives the identity.
        """
        unit = safe_normalize(axis)
        if angle == 0.0 or unit is None:
            return cls.identity()
        return cls(
            UNIT_X.rotate_rad(angle, unit),
            UNIT_Y.rotate_rad(angle, unit),
            UNIT_Z.rotate_rad(angle, unit),
        )

    @classmethod
    def from_rotation_x(cls, angle: float) -> Rotation:
        return cls.from_axis_angle(UNIT_X, angle)

    @classmethod
    def from_rotation_y(cls, angle: float) -> Rotation:
        return cls.from_axis_angle(UNIT_Y, angle)

    @classmethod
    def from_rotation_z(cls, angle: float) -> Rotation:
        return cls.from_axis_angle(UNIT_Z, angle)

    @classmethod
    def from_rotation_arc(cls, source: Vector3, target: Vector3) -> Rotation:
        """Shortest rotation taking unit vector ``source`` onto unit vector ``target``."""
        cross = source.cross(target)
        dot = source.dot(target)
        sin_angle = cross.length()
        if sin_angle < 1e-7:
            if dot > 0.0:
                return cls.identity()
            # Opposite vectors: half turn about any perpendicular axis
            axis = source.cross(UNIT_X)
            if axis.length_squared() < 1e-6:
                axis = source.cross(UNIT_Y)
            return cls.from_axis_angle(axis, math.pi)
        return cls.from_axis_angle(cross, math.atan2(sin_angle, dot))

    def apply(self, v: Vector3) -> Vector3:
        return self.x_axis * v.x + self.y_axis * v.y + self.z_axis * v.z

    def __mul__(self, other: Rotation) -> Rotation:
        return Rotation(
            self.apply(other.x_axis),
            self.apply(other.y_axis),
            self.apply(other.z_axis),
        )

    def inverse(self) -> Rotation:
        x, y, z = self.x_axis, self.y_axis, self.z_axis
        return Rotation(
            Vector3(x.x, y.x, z.x),
            Vector3(x.y, y.y, z.y),
            Vector3(x.z, y.z, z.z),
        )

    def orthonormalized(self) -> Rotation:
        """Re-square the basis, keeping the Y column's direction exact."""
        y = self.y_axis.normalize()
        x = (self.x_axis - y * self.x_axis.dot(y)).normalize()
        return Rotation(x, y, x.cross(y))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rotation):
            return NotImplemented
        return (
            self.x_axis == other.x_axis
            and self.y_axis == other.y_axis
            and self.z_axis == other.z_axis
        )

    def __repr__(self) -> str:
        return f"Rotation({self.x_axis}, {self.y_axis}, {self.z_axis})"


@dataclass
class Transform:
    """Position plus orientation, relative to whatever frame owns it."""

    translation: Vector3 = field(default_factory=Vector3)
    rotation: Rotation = field(default_factory=Rotation.identity)

    @classmethod
    def from_xyz(cls, x: float, y: float, z: float) -> Transform:
        return cls(Vector3(x, y, z))

    def looking_at(self, target: Vector3, up: Vector3 = UNIT_Y) -> Transform:
        """Copy of this transform rotated so -Z points at ``target``."""
        back = safe_normalize(self.translation - target)
        if back is None:
            return self.copy()
        right = safe_normalize(up.cross(back))
        if right is None:
            return self.copy()
        return Transform(Vector3(self.translation), Rotation(right, back.cross(right), back))

    def compose(self, child: Transform) -> Transform:
        """World transform of ``child`` when this is its parent's world transform."""
        return Transform(
            self.translation + self.rotation.apply(child.translation),
            self.rotation * child.rotation,
        )

    def copy(self) -> Transform:
        r = self.rotation
        return Transform(Vector3(self.translation), Rotation(r.x_axis, r.y_axis, r.z_axis))

    # Basis directions, in the frame this transform is expressed in

    def forward(self) -> Vector3:
        return -self.rotation.z_axis

    def back(self) -> Vector3:
        return Vector3(self.rotation.z_axis)

    def left(self) -> Vector3:
        return -self.rotation.x_axis

    def right(self) -> Vector3:
        return Vector3(self.rotation.x_axis)

    def up(self) -> Vector3:
        return Vector3(self.rotation.y_axis)

    def down(self) -> Vector3:
        return -self.rotation.y_axis
