from __future__ import annotations

from cookie_milk.api.models import GameResult, GameStatus
from cookie_milk.core.board import Board
from cookie_milk.core.cells import glyph


def status_line(result: GameResult) -> str | None:
    if result.status == GameStatus.win and result.winner is not None:
        return f"{glyph(result.winner)} wins!"
    if result.status == GameStatus.draw:
        return "No winner."
    return None


def render_board(board: Board, result: GameResult) -> str:
    """Deterministic text view: one glyph per cell, one line per row.

    A status line follows the grid only once the game is won or drawn.
    """

    lines = ["".join(glyph(cell) for cell in row) for row in board.rows_as_cells()]
    line = status_line(result)
    if line is not None:
        lines.append(line)
    return "".join(f"{text}\n" for text in lines)
