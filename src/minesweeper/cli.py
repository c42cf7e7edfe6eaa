"""
Command-line entry point for console Minesweeper.

Usage:
    minesweeper [--rows N] [--cols N] [--mines N] [--seed N] [--verbose]
"""
import argparse
import logging
import random
import sys
from typing import List, Optional

from .board import Board, BoardConfig
from .console import ConsoleInput, play
from .errors import InvalidConfigError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description="Play Minesweeper in the console"
    )
    parser.add_argument(
        "--rows", type=int, default=9, help="Number of board rows"
    )
    parser.add_argument(
        "--cols", type=int, default=9, help="Number of board columns"
    )
    parser.add_argument(
        "--mines", type=int, default=None,
        help="Number of mines (asked for when omitted)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for mine placement"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log engine activity to stderr"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, set up the board and play one game."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )

    source = ConsoleInput()
    try:
        mines = args.mines
        if mines is None:
            BoardConfig(rows=args.rows, cols=args.cols, mines=0)
            mines = source.read_mine_count()
        config = BoardConfig(rows=args.rows, cols=args.cols, mines=mines)
    except InvalidConfigError as exc:
        print(f"Invalid board: {exc}")
        return 1
    except EOFError:
        return 1

    board = Board(config, rng=random.Random(args.seed))
    logger.info(
        "Starting %dx%d game with %d mines", config.rows, config.cols, mines
    )
    try:
        play(board, source)
    except EOFError:
        logger.warning("Input closed before the game finished")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
