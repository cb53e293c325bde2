"""High level game container driven by discrete events."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Protocol, Sequence, TypeVar
import logging
import random

from .board import HEIGHT, WIDTH, Board
from .piece import Tetromino
from .tetromino import STANDARD_TETROMINOS, TetrominoType, shape_template


LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything able to pick an element of a sequence, e.g. ``random.Random``."""

    def choice(self, seq: Sequence[T]) -> T: ...


class GameEvent(str, Enum):
    """Inputs understood by :meth:`Game.handle_event`."""

    TICK = "tick"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    ROTATE = "rotate"


class CellState(str, Enum):
    """What a renderer should draw at a board cell."""

    EMPTY = "empty"
    SETTLED = "settled"
    FALLING = "falling"


class Game:
    """Mutable state for a single game session.

    The game owns its board and the falling piece.  Every change goes through
    :meth:`handle_event`; once :attr:`over` is set all further events are
    ignored.
    """

    def __init__(
        self,
        cols: int = WIDTH,
        rows: int = HEIGHT,
        *,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self.board = Board(cols, rows)
        self.falling: Optional[Tetromino] = None
        self.over = False
        self.lines_cleared = 0
        self._rng: RandomSource = rng if rng is not None else random.Random()

    def _random_type(self) -> TetrominoType:
        """Return a random tetromino type."""

        return self._rng.choice(STANDARD_TETROMINOS)

    def spawn_tetromino(self, shape: Optional[TetrominoType] = None) -> Tetromino:
        """Spawn and return a new falling piece.

        The piece is centred horizontally and placed just above the board.
        If it cannot drop a single row from there the game is over; the piece
        is installed regardless so the overlap can be drawn.
        """

        shape = shape or self._random_type()
        template = shape_template(shape)
        piece = Tetromino(
            shape,
            col=self.board.cols // 2 - template.cols // 2,
            row=-template.rows,
        )
        LOGGER.debug("Spawned %s at %s", shape.value, piece.position)

        if not piece.can_move(0, 1, self.board):
            self.over = True
            LOGGER.info("Game over: %s piece blocked at spawn", shape.value)

        self.falling = piece
        return piece

    def _persist_tetromino(self, piece: Tetromino) -> int:
        """Write ``piece`` into the board and clear any completed rows."""

        for col, row, block in piece.iter_blocks():
            assert self.board.get(col, row) is None, f"cell {(col, row)} already occupied"
            self.board.set(col, row, block)

        cleared = self.board.clear_full_rows()
        self.lines_cleared += cleared
        LOGGER.debug("Locked %s at %s, cleared %d row(s)", piece.shape.value, piece.position, cleared)
        return cleared

    def handle_event(self, event: GameEvent) -> None:
        """Apply a single event to the game."""

        if self.over:
            return

        if event is GameEvent.TICK:
            piece = self.falling
            if piece is not None and not piece.try_move(0, 1, self.board):
                self.falling = None
                self._persist_tetromino(piece)
            if self.falling is None:
                self.spawn_tetromino()
        elif self.falling is None:
            return
        elif event is GameEvent.MOVE_LEFT:
            self.falling.try_move(-1, 0, self.board)
        elif event is GameEvent.MOVE_RIGHT:
            self.falling.try_move(1, 0, self.board)
        elif event is GameEvent.ROTATE:
            self.falling.rotate(self.board)

    def cell_state(self, col: int, row: int) -> CellState:
        """Return what occupies ``(col, row)``; the falling piece wins."""

        if self.falling is not None and self.falling.get(col, row) is not None:
            return CellState.FALLING
        if self.board.get(col, row) is not None:
            return CellState.SETTLED
        return CellState.EMPTY


__all__ = ["Game", "GameEvent", "CellState", "RandomSource"]
