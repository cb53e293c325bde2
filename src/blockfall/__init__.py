"""Rule engine for a falling-block puzzle game."""

from .rotation import Rotation
from .board import Block, Board
from .tetromino import STANDARD_TETROMINOS, TETROMINO_SHAPES, TetrominoType, parse_tetromino
from .piece import KICKS, Tetromino
from .game import CellState, Game, GameEvent
from .utils import format_grid, render_grid

__all__ = [
    "Rotation",
    "Block",
    "Board",
    "TetrominoType",
    "TETROMINO_SHAPES",
    "STANDARD_TETROMINOS",
    "parse_tetromino",
    "Tetromino",
    "KICKS",
    "Game",
    "GameEvent",
    "CellState",
    "format_grid",
    "render_grid",
]
