import logging
import random

from blockfall.board import Block
from blockfall.game import Game, GameEvent
from blockfall.tetromino import TetrominoType


class FixedChoice:
    def __init__(self, shape):
        self.shape = shape

    def choice(self, seq):
        return self.shape


def _blocked_game():
    game = Game(4, 6, rng=FixedChoice(TetrominoType.O))
    game.board.set(1, 0, Block())
    return game


def test_spawn_collision_triggers_game_over():
    game = _blocked_game()
    piece = game.spawn_tetromino()
    assert game.over
    # The doomed piece is still installed so it can be drawn.
    assert game.falling is piece
    assert piece.position == (1, -2)


def test_game_over_is_terminal():
    game = _blocked_game()
    game.handle_event(GameEvent.TICK)
    assert game.over

    board_before = game.board.grid.copy()
    piece_before = (game.falling.position, game.falling.rotation)
    rng = random.Random(3)
    for _ in range(50):
        game.handle_event(rng.choice(list(GameEvent)))

    assert game.over
    assert (game.board.grid == board_before).all()
    assert (game.falling.position, game.falling.rotation) == piece_before


def test_stacking_to_the_top_ends_game():
    game = Game(4, 6, rng=FixedChoice(TetrominoType.O))
    for _ in range(100):
        game.handle_event(GameEvent.TICK)
        if game.over:
            break
    assert game.over
    # Three O pieces stack in the centre columns before the fourth is blocked.
    assert game.board.occupied_count() == 12


def test_game_over_is_logged(caplog):
    game = _blocked_game()
    with caplog.at_level(logging.INFO, logger="blockfall.game"):
        game.handle_event(GameEvent.TICK)
    assert game.over
    assert any("Game over" in message for message in caplog.messages)
