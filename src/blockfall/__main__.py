"""Simple ASCII demo for the falling-block engine.

Run with: `python -m blockfall`

The demo feeds a number of tick events into a fresh game, optionally mixing in
random moves and rotations, and prints the final frame.  It doubles as a quick
smoke test that renderers see more than a blank grid.
"""

from __future__ import annotations

import argparse
import logging
import random
from typing import Optional, Sequence

from . import Game, GameEvent
from .board import HEIGHT, WIDTH
from .utils import format_grid


LOGGER = logging.getLogger(__name__)

_PLAYER_EVENTS = (GameEvent.MOVE_LEFT, GameEvent.MOVE_RIGHT, GameEvent.ROTATE)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--cols", type=int, default=WIDTH, help="Board width in cells.")
    parser.add_argument("--rows", type=int, default=HEIGHT, help="Board height in cells.")
    parser.add_argument("--ticks", type=int, default=30, help="Number of tick events to simulate.")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the random source and interleave random player moves.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def run(game: Game, ticks: int, rng: Optional[random.Random] = None) -> int:
    """Feed up to ``ticks`` tick events into ``game`` and return how many were applied.

    Stops early once the game is over.
    """

    applied = 0
    for _ in range(ticks):
        if rng is not None:
            game.handle_event(rng.choice(_PLAYER_EVENTS))
        game.handle_event(GameEvent.TICK)
        applied += 1
        if game.over:
            break
    return applied


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING), format="%(message)s")

    spawn_rng = random.Random(args.seed)
    # Player moves use their own stream derived from the spawn seed.
    moves_rng = random.Random(spawn_rng.random()) if args.seed is not None else None
    game = Game(args.cols, args.rows, rng=spawn_rng)
    applied = run(game, args.ticks, moves_rng)
    LOGGER.info("Simulated %d tick(s), %d line(s) cleared", applied, game.lines_cleared)

    print(format_grid(game))
    if game.over:
        print("GAME OVER")


if __name__ == "__main__":
    main()
