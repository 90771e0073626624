"""Procedural galaxy generation for Planetwalk."""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass

from pygame.math import Vector3

from ..constants import (
    ANCHOR_STAR_NAME,
    AU,
    GALAXY_RADIUS,
    SOL_RADIUS,
    STAR_PALETTE,
    STAR_RADIUS_RANGE,
    STAR_SEPARATION,
    YELLOW_STAR,
)
from ..errors import ConfigError
from .star_names import STAR_NAMES
from .transform import Rotation, safe_normalize

logger = logging.getLogger(__name__)

RGB = tuple[int, int, int]


@dataclass(frozen=True)
class GalaxyConfig:
    """Tuning for star placement."""

    galaxy_radius: float = GALAXY_RADIUS
    star_radius_range: tuple[float, float] = STAR_RADIUS_RANGE
    min_separation: float = STAR_SEPARATION
    palette: tuple[RGB, ...] = STAR_PALETTE

    def __post_init__(self) -> None:
        low, high = self.star_radius_range
        if not (math.isfinite(self.galaxy_radius) and self.galaxy_radius > 0):
            raise ConfigError(f"galaxy_radius must be positive and finite, got {self.galaxy_radius}")
        if not (math.isfinite(high) and 0 < low <= high):
            raise ConfigError(f"star_radius_range must satisfy 0 < min <= max, got {self.star_radius_range}")
        if not (math.isfinite(self.min_separation) and self.min_separation > 0):
            raise ConfigError(f"min_separation must be positive and finite, got {self.min_separation}")
        if not self.palette:
            raise ConfigError("palette must contain at least one color")


@dataclass(frozen=True)
class Star:
    """A single generated star. Identity is its index in generation order."""

    name: str
    position: Vector3
    radius: float
    color: RGB

    # Vector3 is mutable, so stars compare by value but never hash
    __hash__ = None


def anchor_star() -> Star:
    """The fixed primary star every galaxy starts with, built fresh per call."""
    return Star(
        name=ANCHOR_STAR_NAME,
        position=Vector3(0.0, AU, 0.0),
        radius=SOL_RADIUS,
        color=YELLOW_STAR,
    )


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------


def _random_position(rng: random.Random, galaxy_radius: float) -> Vector3:
    """Point at a uniform distance along +Y, spun by three random angles."""
    rotation = (
        Rotation.from_rotation_x(rng.uniform(-math.pi, math.pi))
        * Rotation.from_rotation_y(rng.uniform(-math.pi, math.pi))
        * Rotation.from_rotation_z(rng.uniform(-math.pi, math.pi))
    )
    distance = rng.uniform(0.0, galaxy_radius)
    return rotation.apply(Vector3(0.0, distance, 0.0))


def _separate(candidate: Vector3, placed: list[Star], min_separation: float) -> Vector3:
    """Push ``candidate`` away from each too-close neighbour, in placement order.

    Single pass: a push away from one neighbour is not re-checked against
    the neighbours before it, so dense galaxies can keep some violations.
    """
    for other in placed:
        offset = candidate - other.position
        if offset.length() < min_separation:
            direction = safe_normalize(offset)
            if direction is None:
                continue
            candidate = candidate + direction * min_separation
            logger.debug("Pushed candidate away from %s", other.name)
    return candidate


def generate_stars(seed: str, config: GalaxyConfig) -> list[Star]:
    """Build the ordered star list for ``seed``. Same inputs, same galaxy."""
    rng = random.Random(seed)
    low, high = config.star_radius_range

    stars: list[Star] = [anchor_star()]
    for name in STAR_NAMES:
        position = _random_position(rng, config.galaxy_radius)
        position = _separate(position, stars, config.min_separation)
        radius = rng.uniform(low, high)
        color = config.palette[rng.randrange(len(config.palette))]
        stars.append(Star(name=name, position=position, radius=radius, color=color))

    logger.info("Generated %d stars from seed %r", len(stars), seed)
    return stars


class Galaxy:
    """The star field for one session, regenerated from its seed every run."""

    def __init__(self, config: GalaxyConfig, seed: str) -> None:
        self.seed = seed
        self.config = config
        self.stars: list[Star] = generate_stars(seed, config)
        self._by_name: dict[str, Star] = {s.name: s for s in self.stars}

    @property
    def anchor(self) -> Star:
        return self.stars[0]

    def get_star(self, name: str) -> Star:
        return self._by_name[name]

    def nearest_star(self, position: Vector3) -> Star:
        return min(self.stars, key=lambda s: s.position.distance_squared_to(position))

    def __len__(self) -> int:
        return len(self.stars)
