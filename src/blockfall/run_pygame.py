"""Simple pygame front-end for the falling-block engine.

This module turns key presses and a fixed-rate timer into
:class:`~blockfall.game.GameEvent` values and draws the game after every
frame.  It holds no rules of its own.
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

import pygame

from .board import HEIGHT, WIDTH
from .game import Game, GameEvent
from .tetromino import PIECE_VALUES, TetrominoType
from .utils import render_grid


LOGGER = logging.getLogger(__name__)

# Size of a single board cell in pixels
CELL_SIZE = 30
# Milliseconds between automatic downward moves
TICK_MS = 300
# Frames per second to run the game loop at
FPS = 60

FALLING_COLOR = (0, 255, 0)
GAME_OVER_COLOR = (255, 0, 0)
GRID_LINE_COLOR = (50, 50, 50)

# Colours for each tetromino type
SHAPE_COLORS = {
    TetrominoType.I: (0, 255, 255),
    TetrominoType.O: (255, 255, 0),
    TetrominoType.T: (128, 0, 128),
    TetrominoType.S: (0, 255, 0),
    TetrominoType.Z: (255, 0, 0),
    TetrominoType.J: (0, 0, 255),
    TetrominoType.L: (255, 165, 0),
}

# Mapping from the integer stored in the board grid to a colour
CELL_COLORS = {0: (0, 0, 0)}
for shape, value in PIECE_VALUES.items():
    CELL_COLORS[value] = SHAPE_COLORS[shape]

KEY_EVENTS = {
    pygame.K_a: GameEvent.MOVE_LEFT,
    pygame.K_LEFT: GameEvent.MOVE_LEFT,
    pygame.K_d: GameEvent.MOVE_RIGHT,
    pygame.K_RIGHT: GameEvent.MOVE_RIGHT,
    pygame.K_w: GameEvent.ROTATE,
    pygame.K_UP: GameEvent.ROTATE,
}


def event_for_key(key: int) -> Optional[GameEvent]:
    """Return the game event bound to ``key``, if any."""

    return KEY_EVENTS.get(key)


def cell_color(game: Game, col: int, row: int, value: int) -> tuple[int, int, int]:
    """Return the colour for the cell at ``(col, row)`` holding ``value``."""

    if game.falling is not None and game.falling.get(col, row) is not None:
        return FALLING_COLOR
    if value and game.over:
        return GAME_OVER_COLOR
    return CELL_COLORS.get(value, (255, 255, 255))


def draw_game(screen: pygame.Surface, game: Game) -> None:
    """Render the settled blocks and the falling piece."""

    grid = render_grid(game)
    for row, line in enumerate(grid):
        for col, value in enumerate(line):
            rect = pygame.Rect(col * CELL_SIZE, row * CELL_SIZE, CELL_SIZE, CELL_SIZE)
            pygame.draw.rect(screen, cell_color(game, col, row, value), rect)
            pygame.draw.rect(screen, GRID_LINE_COLOR, rect, 1)


class GameRunner:
    """Drive a :class:`Game` from the pygame event loop."""

    def __init__(self, cols: int = WIDTH, rows: int = HEIGHT, tick_ms: int = TICK_MS) -> None:
        self.game = Game(cols, rows)
        self.tick_ms = tick_ms
        self._running = False
        self._tick_timer = 0

    @property
    def running(self) -> bool:
        return self._running

    def advance(self, dt: int) -> None:
        """Accumulate ``dt`` milliseconds and emit a tick when due."""

        self._tick_timer += dt
        if self._tick_timer >= self.tick_ms:
            self._tick_timer = 0
            self.game.handle_event(GameEvent.TICK)

    def handle(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.stop()
        elif event.type == pygame.KEYDOWN:
            game_event = event_for_key(event.key)
            if game_event is not None:
                self.game.handle_event(game_event)

    def run(self) -> None:
        pygame.init()
        board = self.game.board
        screen = pygame.display.set_mode((board.cols * CELL_SIZE, board.rows * CELL_SIZE))
        pygame.display.set_caption("blockfall")
        clock = pygame.time.Clock()
        LOGGER.info("Game started on a %dx%d board", board.cols, board.rows)

        self._tick_timer = 0
        self._running = True
        try:
            while self._running:
                dt = clock.tick(FPS)
                for event in pygame.event.get():
                    self.handle(event)
                self.advance(dt)

                screen.fill((0, 0, 0))
                draw_game(screen, self.game)
                caption = "blockfall - GAME OVER" if self.game.over else "blockfall"
                pygame.display.set_caption(caption)
                pygame.display.flip()
        finally:
            pygame.quit()
            LOGGER.info("Game stopped after %d line(s)", self.game.lines_cleared)

    def stop(self) -> None:
        self._running = False


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--cols", type=int, default=WIDTH, help="Board width in cells.")
    parser.add_argument("--rows", type=int, default=HEIGHT, help="Board height in cells.")
    parser.add_argument("--tick-ms", type=int, default=TICK_MS, help="Milliseconds between ticks.")
    parser.add_argument("--log-level", default="INFO", help="Logging level (e.g. DEBUG, INFO, WARNING).")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")
    GameRunner(args.cols, args.rows, args.tick_ms).run()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
