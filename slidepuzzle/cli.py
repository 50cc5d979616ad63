"""Command-line entry point for the sliding puzzle."""

from __future__ import annotations

import argparse
import sys

from slidepuzzle.game import Game


def _prompt_size():
    print("Enter board size (e.g., 3 for 3x3): ", end="", flush=True)
    text = input().strip()
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"invalid board size: {text!r}") from None


def _prompt_name():
    print("Enter your name: ", end="", flush=True)
    words = input().split()
    if not words:
        raise ValueError("a player name is required")
    return words[0]


def _parser():
    parser = argparse.ArgumentParser(prog="slidepuzzle", description="Play the sliding puzzle.")
    parser.add_argument("--size", type=int, help="board size, e.g. 3 for 3x3")
    parser.add_argument("--name", help="player name")
    parser.add_argument(
        "--delay", type=float, default=0.3, help="seconds between steps of the automatic solver"
    )
    return parser


def main(argv=None):
    """Ask for a board size and a name, then play a game."""
    args = _parser().parse_args(argv)
    try:
        size = args.size if args.size is not None else _prompt_size()
        name = args.name if args.name is not None else _prompt_name()
        Game(size, name, delay=args.delay).run()
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except (EOFError, KeyboardInterrupt):
        print(file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())