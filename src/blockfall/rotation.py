"""Integer rotation matrices for quarter turns.

A :class:`Rotation` is one of the four 2x2 matrices obtained by repeatedly
turning the identity 90 degrees to the right.  All arithmetic is exact integer
arithmetic so converting between a piece's local frame and the board never
accumulates rounding errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Matrix = Tuple[Tuple[int, int], Tuple[int, int]]
Vector = Tuple[int, int]

_RIGHT: Matrix = ((0, -1), (1, 0))


@dataclass(frozen=True)
class Rotation:
    """Immutable 2x2 integer rotation matrix."""

    matrix: Matrix = ((1, 0), (0, 1))

    @classmethod
    def identity(cls) -> "Rotation":
        return cls()

    def inverse(self) -> "Rotation":
        """Return the rotation undoing ``self``.

        Valid rotations have determinant one, so the adjugate is the inverse.
        """

        (a, b), (c, d) = self.matrix
        return Rotation(((d, -b), (-c, a)))

    def rotate_right(self) -> "Rotation":
        """Return ``self`` turned a further 90 degrees to the right.

        The quarter turn is applied on the left: ``RIGHT * self``.
        """

        return Rotation(_RIGHT) * self

    def apply(self, vector: Vector) -> Vector:
        """Return the matrix-vector product ``self * vector``."""

        (a, b), (c, d) = self.matrix
        x, y = vector
        return (a * x + b * y, c * x + d * y)

    def __mul__(self, other: "Rotation") -> "Rotation":
        if not isinstance(other, Rotation):
            return NotImplemented
        (a, b), (c, d) = self.matrix
        (e, f), (g, h) = other.matrix
        return Rotation(((a * e + b * g, a * f + b * h), (c * e + d * g, c * f + d * h)))


__all__ = ["Rotation", "Matrix", "Vector"]
