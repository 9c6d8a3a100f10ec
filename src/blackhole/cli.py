"""
Black hole game - command line entry point.

Usage:
    blackhole [play] [--size N --holes K] [--seed S] [--max-attempts M]
    blackhole evaluate [--size N] [--holes K] [--games G] [--seed S]
"""
import argparse
import logging
import sys
from typing import List, Optional

import numpy as np

from .agents import RandomAgent
from .driver import play
from .evaluation import Evaluator
from .game.engine import GameConfig, InvalidConfiguration


def run_play(args: argparse.Namespace) -> int:
    """Play an interactive game."""
    config = None
    if args.size is not None or args.holes is not None:
        if args.size is None or args.holes is None:
            print("Both --size and --holes are needed to skip the prompt.")
            return 2
        try:
            config = GameConfig(args.size, args.holes)
        except InvalidConfiguration as error:
            print(f"Failed to start game. Error: {error}")
            return 2

    rng = np.random.default_rng(args.seed)
    try:
        play(config=config, rng=rng, max_attempts=args.max_attempts)
    except InvalidConfiguration as error:
        print(f"Failed to start game. Error: {error}")
        return 2
    except (EOFError, KeyboardInterrupt):
        print()
        return 1
    return 0


def run_evaluate(args: argparse.Namespace) -> int:
    """Evaluate the random agent and print results."""
    try:
        config = GameConfig(args.size, args.holes)
    except InvalidConfiguration as error:
        print(f"Invalid settings: {error}")
        return 2

    try:
        evaluator = Evaluator(config, num_episodes=args.games, seed=args.seed)
    except ValueError as error:
        print(f"Invalid settings: {error}")
        return 2
    agent = RandomAgent(config.size, seed=args.seed)

    print(f"\nEvaluating Random over {args.games} games...")
    results = evaluator.evaluate(agent)

    print("Results for Random:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="blackhole",
        description="Black hole game - open every cell without a black hole",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument("--size", type=int, help="Board size (NxN)")
    play_parser.add_argument("--holes", type=int, help="Number of black holes")
    play_parser.add_argument("--seed", type=int, help="Random seed")
    play_parser.add_argument(
        "--max-attempts",
        type=int,
        default=None,
        help="Give up after this many invalid settings entries",
    )

    # Evaluate command
    eval_parser = subparsers.add_parser(
        "evaluate", help="Evaluate the random agent"
    )
    eval_parser.add_argument("--size", type=int, default=8, help="Board size (NxN)")
    eval_parser.add_argument(
        "--holes", type=int, default=8, help="Number of black holes"
    )
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    eval_parser.add_argument("--seed", type=int, help="Random seed")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "evaluate":
        return run_evaluate(args)
    if args.command is None:
        args = parser.parse_args(["play"], namespace=args)
    return run_play(args)


if __name__ == "__main__":
    sys.exit(main())
