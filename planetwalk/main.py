"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .errors import ConfigError
from .game import Game
from .models.settings import build_configs, load_settings

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Walk around a planet in a seeded galaxy.")
    parser.add_argument("--seed", help="Galaxy seed; overrides the settings file.")
    parser.add_argument(
        "--settings",
        type=Path,
        default=None,
        help="Settings JSON to read instead of the per-user one.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = load_settings(args.settings)
    if args.seed is not None:
        settings["seed"] = args.seed

    try:
        world, rig_config = build_configs(settings)
        game = Game(world, rig_config)
    except ConfigError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
