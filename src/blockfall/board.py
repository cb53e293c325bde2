"""Board representation for the playfield and the shape templates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

import numpy as np
from numpy.typing import NDArray


# Dimensions of the standard playfield.
WIDTH = 10
HEIGHT = 20

Grid = NDArray[np.uint8]

# Value stored in the grid for an empty cell.
EMPTY = 0


@dataclass(frozen=True)
class Block:
    """Marker for an occupied cell.

    ``value`` is the integer written to the board grid.  Any non-zero value is
    accepted; the shape catalog uses it to remember which piece a block came
    from so renderers can colour settled cells.
    """

    value: int = 1

    def __post_init__(self) -> None:
        if not 0 < self.value < 256:
            raise ValueError(f"Block value must be in 1..255, got {self.value}")


def create_empty_grid(cols: int, rows: int) -> Grid:
    """Return a new empty ``(rows, cols)`` grid filled with zeros."""

    return np.zeros((rows, cols), dtype=np.uint8)


class Board:
    """Fixed-size grid of optional :class:`Block` markers.

    Cells are addressed as ``(col, row)`` with ``row`` growing downwards.
    Coordinates outside the board read as empty and writes to them are
    dropped, so callers never need to bounds-check before querying.
    """

    def __init__(self, cols: int = WIDTH, rows: int = HEIGHT) -> None:
        if cols <= 0 or rows <= 0:
            raise ValueError(f"Board dimensions must be positive, got {cols}x{rows}")
        self.cols = cols
        self.rows = rows
        self.grid: Grid = create_empty_grid(cols, rows)

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.cols and 0 <= row < self.rows

    def get(self, col: int, row: int) -> Optional[Block]:
        """Return the block at ``(col, row)`` or ``None`` if empty or off-board."""

        if not self.in_bounds(col, row):
            return None
        value = int(self.grid[row, col])
        return Block(value) if value != EMPTY else None

    def set(self, col: int, row: int, block: Optional[Block]) -> None:
        """Write ``block`` (or clear the cell for ``None``); off-board is a no-op."""

        if self.in_bounds(col, row):
            self.grid[row, col] = np.uint8(block.value if block is not None else EMPTY)

    def is_empty(self, col: int, row: int) -> bool:
        return self.get(col, row) is None

    def cell_indices(self) -> Iterator[Tuple[int, int, Optional[Block]]]:
        """Yield ``(col, row, cell)`` for every cell, column fastest."""

        for row in range(self.rows):
            for col in range(self.cols):
                yield col, row, self.get(col, row)

    def row_full(self, row: int) -> bool:
        if not 0 <= row < self.rows:
            return False
        return bool(np.all(self.grid[row] != EMPTY))

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.grid))

    def clear_full_rows(self) -> int:
        """Clear completed rows and return how many were removed.

        Rows are scanned from the bottom up.  When a row is full everything
        above it shifts down by one and the same row index is checked again,
        so stacked full rows collapse in a single pass.
        """

        cleared = 0
        row = self.rows - 1
        while row >= 0:
            if self.row_full(row):
                self.grid[1 : row + 1] = self.grid[:row].copy()
                self.grid[0] = EMPTY
                cleared += 1
            else:
                row -= 1
        return cleared

    def __repr__(self) -> str:
        return f"Board(cols={self.cols}, rows={self.rows})"


__all__ = ["Board", "Block", "Grid", "EMPTY", "WIDTH", "HEIGHT", "create_empty_grid"]
