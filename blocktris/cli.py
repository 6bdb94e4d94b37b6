"""Command-line entry point for the falling-block game."""

from __future__ import annotations

import argparse
import random
import sys

from .blocklist import BlockList
from .board import Board
from .game import GRAVITY_INTERVAL, Game
from .terminal import (
    SCORE_FILE,
    InputReader,
    raw_terminal,
    show_game_over,
    show_loading,
    show_title,
)

__all__ = ["main"]


def _positive_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from exc
    if value <= 0:
        raise argparse.ArgumentTypeError("must be greater than zero")
    return value


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="blocktris",
        description="Terminal falling-block puzzle. Keys: a/d move, s down, "
        "w/x rotate, space drop, m toggle shadow.",
    )
    parser.add_argument("--score-file", default=SCORE_FILE, help="where saved scores go")
    parser.add_argument("--seed", type=int, default=None, help="seed for the piece order")
    parser.add_argument(
        "--interval",
        type=_positive_float,
        default=GRAVITY_INTERVAL,
        help="seconds between gravity ticks at the start",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Play games until the player declines to restart."""
    args = _parse_args(argv)
    rng = random.Random(args.seed)
    show_title()
    with raw_terminal():
        reader = InputReader()
        reader.start()
        try:
            while True:
                show_loading()
                block_list = BlockList()
                board = Board(block_list)
                game = Game(
                    block_list,
                    board,
                    reader,
                    rng=rng,
                    score_path=args.score_file,
                    gravity_interval=args.interval,
                )
                game.run()
                show_game_over()
                game.check_save_log()
                restart = game.check_restart()
                sys.stdout.flush()
                if not restart:
                    break
        except (EOFError, KeyboardInterrupt):
            pass
        finally:
            reader.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())