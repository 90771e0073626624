"""Planet, moon and the session-wide world configuration."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Union

from pygame.math import Vector3

from ..constants import (
    CLEAR_COLOR,
    DEFAULT_SEED,
    DUST,
    EARTH_RADIUS,
    GRASS,
    MOON_DISTANCE,
    MOON_RADIUS,
)
from ..errors import ConfigError
from .galaxy import RGB, GalaxyConfig
from .transform import UNIT_Z


@dataclass(frozen=True)
class Emissive:
    """Self-lit surface (stars); ignores scene lighting."""

    color: RGB


@dataclass(frozen=True)
class Lit:
    """Surface shaded by scene lighting."""

    color: RGB


BodyMaterial = Union[Emissive, Lit]


@dataclass(frozen=True)
class Body:
    """A spherical visual body."""

    radius: float
    material: BodyMaterial
    position: Vector3 = field(default_factory=Vector3)

    def __post_init__(self) -> None:
        if not self.radius > 0:
            raise ConfigError(f"body radius must be positive, got {self.radius}")

    @property
    def color(self) -> RGB:
        return self.material.color

    @property
    def emissive(self) -> bool:
        return isinstance(self.material, Emissive)

    def with_distance_from(self, distance: float, axis: Vector3, origin: Vector3) -> Body:
        """Copy of this body placed ``distance`` along ``axis`` from ``origin``."""
        return replace(self, position=Vector3(origin) + Vector3(axis) * distance)


@dataclass(frozen=True)
class WorldConfig:
    """Everything world setup needs, fixed for the whole session."""

    seed: str
    galaxy: GalaxyConfig
    planet: Body
    moon: Body
    clear_color: RGB = CLEAR_COLOR

    @classmethod
    def default(cls, seed: str = DEFAULT_SEED, galaxy: GalaxyConfig | None = None) -> WorldConfig:
        planet = Body(radius=EARTH_RADIUS, material=Lit(GRASS))
        moon = Body(radius=MOON_RADIUS, material=Lit(DUST)).with_distance_from(
            MOON_DISTANCE, UNIT_Z, planet.position,
        )
        return cls(
            seed=seed,
            galaxy=galaxy if galaxy is not None else GalaxyConfig(),
            planet=planet,
            moon=moon,
        )

    def __post_init__(self) -> None:
        if not isinstance(self.seed, str):
            raise ConfigError(f"seed must be a string, got {type(self.seed).__name__}")
