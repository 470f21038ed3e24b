from __future__ import annotations

import argparse
import sys
from dataclasses import replace

from . import __version__
from .app import run_gui, run_headless
from .config import BurrowConfig
from .exceptions import InvalidDirectionError, MalformedLevelError
from .levels.loader import load_level
from .logging_config import configure_logging, level_for_verbosity, level_from_name


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="burrow",
        description="Burrow - tile-grid puzzle runner",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--level", default=None, help="YAML level file (defaults to the bundled level)")
    parser.add_argument("--config", default=None, help="YAML config file")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--gui", action="store_true", help="Open an Arcade window")
    mode.add_argument("--moves", default="", help="Headless play: letters U/D/L/R, e.g. RRDL")
    parser.add_argument("--turnstile-push", action="store_true", help="Turnstiles deflect the player")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")

    args = parser.parse_args(argv)

    config = BurrowConfig.from_yaml(args.config) if args.config else BurrowConfig()
    config = config.with_env()
    if args.turnstile_push:
        config = replace(config, turnstile_push=True)
    configure_logging(
        level_for_verbosity(args.verbose, level_from_name(config.log_level)),
        env_override=args.verbose == 0,
    )

    try:
        level = load_level(args.level)
    except (OSError, MalformedLevelError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.gui:
        return run_gui(level, config)
    try:
        return run_headless(level, args.moves, config)
    except InvalidDirectionError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
