"""User settings read from JSON.

Uses platformdirs for the cross-platform settings location:
  Linux:   ~/.config/planetwalk/settings.json
  macOS:   ~/Library/Application Support/planetwalk/settings.json
  Windows: C:/Users/.../AppData/Local/planetwalk/settings.json

Only tuning is read from here. The world itself is never saved; it is
regenerated from the seed every run.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir

from ..constants import DEFAULT_SEED, GALAXY_RADIUS, LOOK_SENSITIVITY, STAR_SEPARATION, WALK_SPEED
from ..errors import ConfigError
from .bodies import WorldConfig
from .galaxy import GalaxyConfig
from .rig import RigConfig

logger = logging.getLogger(__name__)

SETTINGS_DIR = Path(user_config_dir("planetwalk"))
SETTINGS_FILE = SETTINGS_DIR / "settings.json"

_NUMBER_DEFAULTS: dict[str, float] = {
    "walk_speed": WALK_SPEED,
    "look_sensitivity_x": LOOK_SENSITIVITY,
    "look_sensitivity_y": LOOK_SENSITIVITY,
    "galaxy_radius": GALAXY_RADIUS,
    "min_separation": STAR_SEPARATION,
}

KNOWN_KEYS = frozenset({"seed", *_NUMBER_DEFAULTS})


def load_settings(path: Path | None = None) -> dict[str, Any]:
    """Read the settings file. Missing or unreadable files give an empty dict."""
    path = path if path is not None else SETTINGS_FILE
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: expected a JSON object", path)
        return {}

    settings: dict[str, Any] = {}
    for key, value in data.items():
        if key not in KNOWN_KEYS:
            logger.warning("Ignoring unknown setting %r", key)
            continue
        settings[key] = value
    return settings


# ── Config assembly ───────────────────────────────────────────────────

def _number(settings: dict[str, Any], key: str) -> float:
    value = settings.get(key, _NUMBER_DEFAULTS[key])
    # bool is an int subclass but never a sensible tuning value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"setting {key!r} must be a number, got {value!r}")
    return float(value)


def build_configs(settings: dict[str, Any]) -> tuple[WorldConfig, RigConfig]:
    """Turn merged settings into validated world and rig configuration."""
    seed = settings.get("seed", DEFAULT_SEED)
    if not isinstance(seed, str):
        raise ConfigError(f"setting 'seed' must be a string, got {seed!r}")

    galaxy = GalaxyConfig(
        galaxy_radius=_number(settings, "galaxy_radius"),
        min_separation=_number(settings, "min_separation"),
    )
    world = WorldConfig.default(seed=seed, galaxy=galaxy)
    rig = RigConfig(
        walk_speed=_number(settings, "walk_speed"),
        look_sensitivity_x=_number(settings, "look_sensitivity_x"),
        look_sensitivity_y=_number(settings, "look_sensitivity_y"),
    )
    return world, rig
