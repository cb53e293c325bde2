"""Tetromino shape catalog.

Each of the seven standard shapes is parsed once, at import time, from a small
literal pattern into a :class:`~blockfall.board.Board` template.  Falling
pieces refer to a template through its :class:`TetrominoType` and never copy
or modify it.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Sequence, Tuple

from .board import Block, Board


class TetrominoType(str, Enum):
    """Enumeration of the seven standard tetromino shapes."""

    I = "I"
    O = "O"
    J = "J"
    L = "L"
    T = "T"
    S = "S"
    Z = "Z"


# Mapping from ``TetrominoType`` to the block value stored in the grid.  The
# specific numbers are not important as long as ``0`` stays free for empty
# cells.
PIECE_VALUES: Dict[TetrominoType, int] = {t: i + 1 for i, t in enumerate(TetrominoType)}


def parse_tetromino(pattern: Sequence[str], block: Block = Block()) -> Board:
    """Return a template board built from ``pattern``.

    ``pattern`` lists the rows top to bottom; ``#`` marks an occupied cell and
    any other character an empty one.  All rows must have the same length.
    """

    if not pattern or not pattern[0]:
        raise ValueError("Tetromino pattern must not be empty")
    cols = len(pattern[0])
    template = Board(cols, len(pattern))
    for row, line in enumerate(pattern):
        if len(line) != cols:
            raise ValueError(f"Ragged tetromino pattern: {list(pattern)!r}")
        for col, char in enumerate(line):
            if char == "#":
                template.set(col, row, block)
    return template


# Spawn orientation of each shape.  The I piece sits in a 4x4 box so that it
# turns around its centre rather than its corner.
_PATTERNS: Dict[TetrominoType, Tuple[str, ...]] = {
    TetrominoType.I: (
        " #  ",
        " #  ",
        " #  ",
        " #  ",
    ),
    TetrominoType.O: (
        "##",
        "##",
    ),
    TetrominoType.J: (
        " # ",
        " # ",
        "## ",
    ),
    TetrominoType.L: (
        " # ",
        " # ",
        " ##",
    ),
    TetrominoType.T: (
        "   ",
        "###",
        " # ",
    ),
    TetrominoType.S: (
        " # ",
        " ##",
        "  #",
    ),
    TetrominoType.Z: (
        " # ",
        "## ",
        "#  ",
    ),
}


TETROMINO_SHAPES: Dict[TetrominoType, Board] = {
    t_type: parse_tetromino(pattern, Block(PIECE_VALUES[t_type]))
    for t_type, pattern in _PATTERNS.items()
}

# Catalog order used for random selection.
STANDARD_TETROMINOS: Tuple[TetrominoType, ...] = tuple(TetrominoType)


def shape_template(shape: TetrominoType) -> Board:
    """Return the shared template for ``shape``.  Callers must not mutate it."""

    return TETROMINO_SHAPES[shape]


__all__ = [
    "TetrominoType",
    "PIECE_VALUES",
    "TETROMINO_SHAPES",
    "STANDARD_TETROMINOS",
    "parse_tetromino",
    "shape_template",
]
