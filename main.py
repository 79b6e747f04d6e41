from __future__ import annotations

import argparse
import random

from game.board import Board
from game.ruleset import DEFAULT_RULES
from state.persistence import load_state
from ui.cli import gameloop


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play Mastermind in the terminal.")
    parser.add_argument("--slots", type=int, default=DEFAULT_RULES["slots"])
    parser.add_argument("--colors", type=int, default=DEFAULT_RULES["colors"])
    parser.add_argument("--rows", type=int, default=DEFAULT_RULES["max_rows"])
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for the random solution"
    )
    parser.add_argument("--load", default=None, help="Resume from a save file")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    rng = random.Random(args.seed) if args.seed is not None else None

    if args.load:
        try:
            board = load_state(args.load)
        except OSError as e:
            print(f"Error loading save: {e}")
            return 1
    else:
        board = Board(args.slots, args.colors, args.rows, rng=rng)

    gameloop(board, rng=rng)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
