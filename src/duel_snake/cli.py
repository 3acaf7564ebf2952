"""CLI launcher for a local two-player duel."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from duel_snake.config import GameConfig

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="duel-snake",
        description="Two-player snake with power-ups on a shared grid.",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags below override it).",
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--tick-interval", type=float, default=None,
        help="Seconds between simulation ticks.",
    )
    parser.add_argument(
        "--assets", type=str, default=None,
        help="Directory holding the Graphics/ and Sounds/ folders.",
    )
    parser.add_argument(
        "--save-config", type=str, default=None,
        help="Write the effective config to this path and exit.",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def _resolve_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    flag_map = {
        "seed": "seed",
        "tick_interval": "tick_interval",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val

    if overrides:
        config = dataclasses.replace(config, **overrides)
    return config


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``duel-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        config = _resolve_config(args)
    except (OSError, ValueError, TypeError) as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    if args.save_config:
        config.save(args.save_config)
        return 0

    from duel_snake.app import DuelSnakeApp

    assets = Path(args.assets) if args.assets else None
    DuelSnakeApp(config, assets_dir=assets).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
