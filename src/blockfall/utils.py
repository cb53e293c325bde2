"""Rendering helpers shared by the front-ends."""

from __future__ import annotations

from typing import List

from .game import CellState, Game


CHARS = {
    CellState.EMPTY: ".",
    CellState.SETTLED: "#",
    CellState.FALLING: "@",
}


def render_grid(game: Game) -> List[List[int]]:
    """Return a copy of the board grid with the falling piece overlaid.

    Renderers get a single row-major 2D list to draw without mutating the
    board.  Cells covered by the falling piece receive that piece's block
    value.
    """

    grid = game.board.grid.tolist()
    if game.falling is not None:
        for col, row, block in game.falling.iter_blocks():
            if game.board.in_bounds(col, row):
                grid[row][col] = block.value
    return grid


def format_grid(game: Game) -> str:
    """Return the game as text, one line per row."""

    lines = []
    for row in range(game.board.rows):
        lines.append("".join(CHARS[game.cell_state(col, row)] for col in range(game.board.cols)))
    return "\n".join(lines)


__all__ = ["render_grid", "format_grid", "CHARS"]
