"""
Main entry point for terminal tic-tac-toe.

Two players share one terminal and take turns placing X and O.
Run this script to play!
"""

import argparse
import logging
import sys

from session.config import SessionConfig
from session.controller import GameSession
from session.text import GOODBYE


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Two-player terminal tic-tac-toe")
    parser.add_argument(
        "--player1",
        default=SessionConfig.PLAYER_ONE,
        help="Name of the first player"
    )
    parser.add_argument(
        "--player2",
        default=SessionConfig.PLAYER_TWO,
        help="Name of the second player"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=SessionConfig.RANDOM_SEED,
        help="Random seed for picking who goes first"
    )
    parser.add_argument(
        "--log-level",
        default=SessionConfig.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostics"
    )
    return parser.parse_args(argv)


def build_config(args) -> SessionConfig:
    """Apply command line flags on top of the default configuration."""
    config = SessionConfig()
    config.PLAYER_ONE = args.player1
    config.PLAYER_TWO = args.player2
    config.RANDOM_SEED = args.seed
    config.LOG_LEVEL = args.log_level
    return config


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    config = build_config(args)

    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

    session = GameSession(config)
    try:
        session.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
        print(GOODBYE)
    return 0


if __name__ == "__main__":
    sys.exit(main())
