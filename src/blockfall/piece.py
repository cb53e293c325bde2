"""The falling piece and its movement rules.

A piece is stored as a handle to a shared shape template, an anchor giving
the template's top-left corner on the board and a :class:`Rotation`.  The
rotation pivots around the template's centre: local coordinates are shifted
so the centre sits at the origin, turned, and shifted back before the anchor
is added.  This keeps the long I piece from drifting sideways as it spins.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterator, List, Optional, Tuple

from .board import Block, Board
from .rotation import Rotation, Vector
from .tetromino import TetrominoType, shape_template


# Offsets tried, in order, after a rotation to nudge the piece into a legal
# position.
KICKS: Tuple[Vector, ...] = ((0, 0), (-1, 0), (1, 0), (-1, -1), (0, -1), (1, -1))


@dataclass
class Tetromino:
    """Active falling piece in the game."""

    shape: TetrominoType
    col: int = 0
    row: int = 0
    rotation: Rotation = field(default_factory=Rotation.identity)

    @property
    def template(self) -> Board:
        return shape_template(self.shape)

    @property
    def position(self) -> Tuple[int, int]:
        """The anchor as ``(col, row)``."""

        return self.col, self.row

    def _half_extent(self) -> Vector:
        template = self.template
        return template.cols // 2, template.rows // 2

    def local_to_global(self, cell: Vector) -> Vector:
        """Map a template cell to board coordinates."""

        half_i, half_j = self._half_extent()
        i, j = self.rotation.inverse().apply((cell[0] - half_i, cell[1] - half_j))
        return i + half_i + self.col, j + half_j + self.row

    def global_to_local(self, cell: Vector) -> Vector:
        """Map board coordinates back into the template's frame."""

        half_i, half_j = self._half_extent()
        i, j = self.rotation.apply((cell[0] - self.col - half_i, cell[1] - self.row - half_j))
        return i + half_i, j + half_j

    def get(self, col: int, row: int) -> Optional[Block]:
        """Return the piece's block covering board cell ``(col, row)``, if any."""

        i, j = self.global_to_local((col, row))
        return self.template.get(i, j)

    def iter_blocks(self) -> Iterator[Tuple[int, int, Block]]:
        """Yield ``(col, row, block)`` in board space for every occupied cell."""

        for i, j, block in self.template.cell_indices():
            if block is not None:
                col, row = self.local_to_global((i, j))
                yield col, row, block

    def blocks(self) -> List[Tuple[int, int]]:
        """Return the global ``(col, row)`` coordinates of the piece."""

        return [(col, row) for col, row, _ in self.iter_blocks()]

    def can_move(self, dx: int, dy: int, board: Board) -> bool:
        """Return ``True`` if shifting by ``(dx, dy)`` keeps the piece legal.

        Cells must stay within the columns, must not pass the bottom row and
        must not overlap settled blocks.  There is no check against the top so
        freshly spawned pieces may hang above the board.
        """

        for col, row in self.blocks():
            new_col = col + dx
            new_row = row + dy
            if new_row >= board.rows or not 0 <= new_col < board.cols:
                return False
            if board.get(new_col, new_row) is not None:
                return False
        return True

    def try_move(self, dx: int, dy: int, board: Board) -> bool:
        """Move by ``(dx, dy)`` if legal; otherwise leave the piece untouched."""

        if not self.can_move(dx, dy, board):
            return False
        self.col += dx
        self.row += dy
        return True

    def rotate(self, board: Board) -> bool:
        """Turn the piece 90 degrees to the right, kicking it if needed.

        The rotated candidate is first pushed back inside the side walls, then
        each offset of :data:`KICKS` is tried in turn.  The first one that
        fits is kept.  When none fits the piece is left exactly as it was.
        """

        candidate = replace(self, rotation=self.rotation.rotate_right())

        # Left and right corrections are accumulated independently.
        dx = 0
        for col, _ in candidate.blocks():
            if col < 0:
                dx = max(dx, -col)
            if col >= board.cols:
                dx = min(dx, board.cols - 1 - col)
        candidate.col += dx

        for kick_x, kick_y in KICKS:
            if candidate.try_move(kick_x, kick_y, board):
                self.col = candidate.col
                self.row = candidate.row
                self.rotation = candidate.rotation
                return True
        return False


__all__ = ["Tetromino", "KICKS"]
