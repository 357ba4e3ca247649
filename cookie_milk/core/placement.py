from __future__ import annotations

from cookie_milk.core.board import Board, Coord
from cookie_milk.core.cells import Cell, is_piece
from cookie_milk.errors import ColumnOverflow, InvalidPiece, OutOfBounds


def drop(board: Board, column: int, piece: Cell) -> Coord:
    """Drop `piece` into `column` and return where it landed.

    The piece falls to the lowest empty cell above the bottom wall. A full column
    raises ColumnOverflow without touching the board.
    """

    if not is_piece(piece):
        raise InvalidPiece(str(piece))
    if column not in board.playable_columns:
        raise OutOfBounds(column, board.playable_columns)

    for row in range(board.bottom_row, -1, -1):
        if board.cell(row, column) is Cell.empty:
            board.set_piece(row, column, piece)
            return row, column

    raise ColumnOverflow(column)
