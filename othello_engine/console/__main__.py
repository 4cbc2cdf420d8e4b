"""
Main entry point for playing Othello in the terminal.

Usage:
    python -m othello_engine.console [--depth 4] [--dark ai] [--light human]
"""

import argparse

from othello_engine.console.config import GameConfig
from othello_engine.console.interface import ConsoleInterface


def main():
    parser = argparse.ArgumentParser(description="Play Othello against the engine")
    parser.add_argument("--depth", type=int, default=4, help="Search depth (default: 4)")
    parser.add_argument("--dark", choices=["human", "ai"], default="human", help="Dark player")
    parser.add_argument("--light", choices=["human", "ai"], default="ai", help="Light player")
    parser.add_argument("--no-pruning", action="store_true", help="Disable alpha-beta pruning")
    parser.add_argument("--trace", action="store_true", help="Log search details")
    parser.add_argument("--pace", action="store_true", help="Pause before AI moves")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    try:
        config = GameConfig(
            search_depth=args.depth,
            pruning_enabled=not args.no_pruning,
            trace_enabled=args.trace,
            ai_dark=args.dark == "ai",
            ai_light=args.light == "ai",
            pace_ai=args.pace,
        )
    except ValueError as e:
        parser.error(str(e))

    interface = ConsoleInterface(config, debug=args.debug)
    interface.handle("new")
    interface.run()


if __name__ == "__main__":
    main()
