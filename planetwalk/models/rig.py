"""Player rig that walks on the surface of a sphere.

The rig is a chain of frames, each stored in an arena and referring to its
parent by index:

    CONTACT -> LEGS -> TORSO -> HEAD -> CAMERA

Only CONTACT moves. Yaw turns LEGS, pitch tilts TORSO, and the rest are
fixed offsets. After every step CONTACT sits exactly ``planet.radius``
from the planet centre with its up axis along the surface normal.
"""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass, field

from pygame.math import Vector3

from ..constants import (
    CAMERA_OFFSET,
    HEAD_OFFSET,
    LEGS_OFFSET,
    LOOK_SENSITIVITY,
    PLAYER_SPAWN,
    TORSO_OFFSET,
    WALK_SPEED,
)
from ..errors import ConfigError
from ..states import CursorLockState
from .bodies import Body
from .transform import UNIT_Y, Rotation, Transform, safe_normalize

logger = logging.getLogger(__name__)


class Link(enum.IntEnum):
    """Rig links, in parent-before-child order."""

    CONTACT = 0
    LEGS = 1
    TORSO = 2
    HEAD = 3
    CAMERA = 4


# ---------------------------------------------------------------------------
# Frame arena
# ---------------------------------------------------------------------------


@dataclass
class FrameNode:
    local: Transform
    parent: int | None = None


class FrameArena:
    """Flat store of frames; a parent always precedes its children."""

    def __init__(self) -> None:
        self.nodes: list[FrameNode] = []

    def add(self, local: Transform, parent: int | None = None) -> int:
        if parent is not None and not 0 <= parent < len(self.nodes):
            raise IndexError(f"parent frame {parent} does not exist")
        self.nodes.append(FrameNode(local=local, parent=parent))
        return len(self.nodes) - 1

    def local(self, index: int) -> Transform:
        return self.nodes[index].local

    def world(self, index: int) -> Transform:
        """Compose local transforms from the root down to ``index``."""
        chain: list[Transform] = []
        current: int | None = index
        while current is not None:
            node = self.nodes[current]
            chain.append(node.local)
            current = node.parent

        result = Transform()
        for local in reversed(chain):
            result = result.compose(local)
        return result

    def __len__(self) -> int:
        return len(self.nodes)


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Directions:
    """Movement keys held this frame."""

    forward: bool = False
    back: bool = False
    left: bool = False
    right: bool = False

    @property
    def any(self) -> bool:
        return self.forward or self.back or self.left or self.right


class InputFrame:
    """Input gathered over one frame, before it is handed to the rig."""

    def __init__(self) -> None:
        self.look_x = 0.0
        self.look_y = 0.0
        self.directions = Directions()

    def add_motion(self, dx: float, dy: float) -> None:
        # Several motion events can arrive per frame; all of them count
        self.look_x += dx
        self.look_y += dy

    def clear(self) -> None:
        self.look_x = 0.0
        self.look_y = 0.0


# ---------------------------------------------------------------------------
# Rig
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RigConfig:
    """Locomotion feel and spawn point."""

    spawn: Vector3 = field(default_factory=lambda: Vector3(PLAYER_SPAWN))
    walk_speed: float = WALK_SPEED
    look_sensitivity_x: float = LOOK_SENSITIVITY
    look_sensitivity_y: float = LOOK_SENSITIVITY

    def __post_init__(self) -> None:
        if not (math.isfinite(self.walk_speed) and self.walk_speed > 0):
            raise ConfigError(f"walk_speed must be positive and finite, got {self.walk_speed}")
        for name in ("look_sensitivity_x", "look_sensitivity_y"):
            if not math.isfinite(getattr(self, name)):
                raise ConfigError(f"{name} must be a finite number")


class PlayerRig:
    """Frame hierarchy glued to the planet surface."""

    def __init__(self, config: RigConfig, planet: Body, cursor: CursorLockState) -> None:
        self.config = config
        self.planet = planet
        self.cursor = cursor
        self.last_movement = Vector3()

        normal = safe_normalize(config.spawn - planet.position)
        if normal is None:
            raise ConfigError("player spawn coincides with the planet centre")

        contact = Transform(
            planet.position + normal * planet.radius,
            Rotation.from_rotation_arc(UNIT_Y, normal),
        )
        camera = Transform.from_xyz(*CAMERA_OFFSET).looking_at(Vector3())

        self.frames = FrameArena()
        parent = None
        for link, local in (
            (Link.CONTACT, contact),
            (Link.LEGS, Transform.from_xyz(0.0, LEGS_OFFSET, 0.0)),
            (Link.TORSO, Transform.from_xyz(0.0, TORSO_OFFSET, 0.0)),
            (Link.HEAD, Transform.from_xyz(0.0, HEAD_OFFSET, 0.0)),
            (Link.CAMERA, camera),
        ):
            index = self.frames.add(local, parent)
            if index != link:
                raise RuntimeError(f"rig link {link.name} landed at frame {index}")
            parent = index

        logger.debug("Rig spawned at %s", contact.translation)

    # ------------------------------------------------------------------
    # Per-frame updates
    # ------------------------------------------------------------------

    def apply_look(self, delta_x: float, delta_y: float) -> None:
        """Turn the legs (yaw) and tilt the torso (pitch) by pointer motion."""
        if not self.cursor.locked:
            return
        if delta_x == 0.0 and delta_y == 0.0:
            return

        legs = self.frames.local(Link.LEGS)
        yaw = -delta_x * self.config.look_sensitivity_x
        # Parent-space Y is the surface normal
        legs.rotation = Rotation.from_rotation_y(yaw) * legs.rotation

        torso = self.frames.local(Link.TORSO)
        pitch = -delta_y * self.config.look_sensitivity_y
        torso.rotation = torso.rotation * Rotation.from_rotation_x(pitch)

    def tick(self, directions: Directions, elapsed: float) -> None:
        """Walk along the surface for ``elapsed`` seconds."""
        legs_world = self.frames.world(Link.LEGS)

        heading = Vector3()
        if directions.forward:
            heading += legs_world.forward()
        if directions.back:
            heading += legs_world.back()
        if directions.left:
            heading += legs_world.left()
        if directions.right:
            heading += legs_world.right()

        heading = safe_normalize(heading)
        if heading is None:
            return

        movement = heading * self.config.walk_speed * elapsed
        contact = self.frames.local(Link.CONTACT)

        # Move, then clamp to the sphere, then re-orient toward the clamped normal
        tentative = contact.translation + movement
        normal = safe_normalize(tentative - self.planet.position)
        if normal is None:
            return

        contact.translation = self.planet.position + normal * self.planet.radius
        arc = Rotation.from_rotation_arc(legs_world.up(), normal)
        contact.rotation = (arc * contact.rotation).orthonormalized()
        self.last_movement = movement

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------

    def world_transform(self, link: Link) -> Transform:
        return self.frames.world(link)

    def link_transforms(self) -> dict[Link, Transform]:
        return {link: self.frames.world(link) for link in Link}

    @property
    def contact_position(self) -> Vector3:
        return Vector3(self.frames.local(Link.CONTACT).translation)

    @property
    def surface_normal(self) -> Vector3:
        return (self.contact_position - self.planet.position).normalize()

    @property
    def altitude(self) -> float:
        """Distance of the contact point above the surface; zero while glued."""
        return self.contact_position.distance_to(self.planet.position) - self.planet.radius
