from __future__ import annotations

from itertools import product

import pytest

from blockfall.board import Block, Board
from blockfall.piece import Tetromino
from blockfall.rotation import Rotation
from blockfall.tetromino import TetrominoType


def _rotations():
    rotation = Rotation.identity()
    for _ in range(4):
        yield rotation
        rotation = rotation.rotate_right()


@pytest.mark.parametrize("shape", [TetrominoType.I, TetrominoType.O, TetrominoType.T])
def test_local_global_are_inverse(shape):
    points = list(product(range(-5, 6), repeat=2))
    for rotation in _rotations():
        piece = Tetromino(shape, col=123, row=345, rotation=rotation)
        for point in points:
            assert piece.global_to_local(piece.local_to_global(point)) == point
            assert piece.local_to_global(piece.global_to_local(point)) == point


def test_identity_blocks_offset_by_anchor():
    piece = Tetromino(TetrominoType.O, col=4, row=-2)
    assert piece.blocks() == [(4, -2), (5, -2), (4, -1), (5, -1)]


def test_get_reports_covered_cells():
    piece = Tetromino(TetrominoType.I, col=2, row=0)
    covered = {(c, r) for c in range(10) for r in range(10) if piece.get(c, r) is not None}
    assert covered == {(3, 0), (3, 1), (3, 2), (3, 3)}


def test_try_move_commits_both_coordinates():
    board = Board(10, 20)
    piece = Tetromino(TetrominoType.O, col=4, row=5)
    assert piece.try_move(1, 1, board)
    assert piece.position == (5, 6)


def test_try_move_rejects_walls_without_change():
    board = Board(10, 20)
    piece = Tetromino(TetrominoType.O, col=0, row=5)
    assert not piece.try_move(-1, 0, board)
    assert piece.position == (0, 5)

    piece = Tetromino(TetrominoType.O, col=8, row=5)
    assert not piece.try_move(1, 0, board)
    assert piece.position == (8, 5)


def test_try_move_rejects_floor_and_blocks():
    board = Board(10, 20)
    piece = Tetromino(TetrominoType.O, col=4, row=17)
    assert piece.try_move(0, 1, board)
    assert not piece.try_move(0, 1, board)
    assert piece.position == (4, 18)

    board.set(6, 18, Block())
    assert not piece.try_move(1, 0, board)
    assert piece.position == (4, 18)


def test_no_ceiling_check():
    board = Board(10, 20)
    piece = Tetromino(TetrominoType.I, col=3, row=-4)
    assert piece.try_move(0, -1, board)
    assert piece.position == (3, -5)


def test_four_rotations_restore_footprint():
    board = Board(10, 20)
    piece = Tetromino(TetrominoType.T, col=4, row=8)
    start = sorted(piece.blocks())
    for _ in range(4):
        assert piece.rotate(board)
    assert piece.rotation == Rotation.identity()
    assert sorted(piece.blocks()) == start


def test_rotate_i_piece_off_left_wall():
    board = Board(10, 20)
    piece = Tetromino(TetrominoType.I, col=-1, row=5)
    assert sorted(piece.blocks()) == [(0, 5), (0, 6), (0, 7), (0, 8)]

    assert piece.rotate(board)

    assert sorted(piece.blocks()) == [(0, 8), (1, 8), (2, 8), (3, 8)]
    assert piece.position == (0, 5)
    assert piece.rotation == Rotation.identity().rotate_right()


def test_rotate_i_piece_off_right_wall():
    board = Board(10, 20)
    piece = Tetromino(TetrominoType.I, col=8, row=5)
    assert sorted(piece.blocks()) == [(9, 5), (9, 6), (9, 7), (9, 8)]

    assert piece.rotate(board)

    assert sorted(piece.blocks()) == [(6, 8), (7, 8), (8, 8), (9, 8)]


def test_rotate_uses_first_fitting_kick():
    board = Board(10, 20)
    piece = Tetromino(TetrominoType.T, col=4, row=5)
    # Block the spot the rotated T would take without a kick.
    board.set(5, 5, Block())

    assert piece.rotate(board)

    assert piece.position == (3, 5)
    assert sorted(piece.blocks()) == [(4, 5), (4, 6), (4, 7), (5, 6)]


def test_rotation_fits_board_exactly_as_wide_as_piece():
    board = Board(4, 10)
    piece = Tetromino(TetrominoType.I, col=-1, row=2)
    assert piece.rotate(board)
    assert sorted(piece.blocks()) == [(0, 5), (1, 5), (2, 5), (3, 5)]


def test_rotation_rejected_when_board_narrower_than_piece():
    board = Board(3, 10)
    piece = Tetromino(TetrominoType.I, col=-1, row=2)
    before = sorted(piece.blocks())

    assert not piece.rotate(board)

    assert piece.position == (-1, 2)
    assert piece.rotation == Rotation.identity()
    assert sorted(piece.blocks()) == before


def test_rotation_rejected_when_boxed_in():
    board = Board(10, 20)
    piece = Tetromino(TetrominoType.I, col=3, row=16)
    # Vertical I in a one-wide shaft reaching the floor.
    for row in range(10, 20):
        board.set(3, row, Block())
        board.set(5, row, Block())

    assert not piece.rotate(board)
    assert piece.position == (3, 16)
    assert piece.rotation == Rotation.identity()
