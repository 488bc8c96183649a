"""Play the game: python -m portal_platformer [--preset NAME] [--seed N]."""

import argparse
import copy
import logging
import sys

from .config import CONFIGS, ConfigError
from .engine import PlatformerEngine


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="portal_platformer", description=__doc__)
    p.add_argument("--preset", choices=sorted(CONFIGS), default="default",
                   help="Named configuration preset.")
    p.add_argument("--seed", type=int, default=None,
                   help="Level placement seed. Omit for a random seed.")
    p.add_argument("--fps", type=int, default=None, help="Frame rate cap.")
    p.add_argument("--width", type=int, default=None, help="Window width in pixels.")
    p.add_argument("--height", type=int, default=None, help="Window height in pixels.")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def make_config(args):
    """Apply command-line overrides to a copy of the chosen preset."""
    config = copy.deepcopy(CONFIGS[args.preset])
    world = config.world
    if args.fps is not None:
        world.fps = args.fps
    if args.width is not None:
        world.screen_width = args.width
    if args.height is not None:
        world.screen_height = args.height
    # Re-run validation on the overridden values
    world.__post_init__()
    config.__post_init__()
    return config


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = make_config(args)
    except ConfigError as e:
        parser.error(str(e))

    PlatformerEngine(config, seed=args.seed).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
