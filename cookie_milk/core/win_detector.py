from __future__ import annotations

from cookie_milk.api.models import GameResult
from cookie_milk.core.board import Board, Coord
from cookie_milk.core.cells import Cell, is_piece

WIN_LENGTH = 4

Direction = tuple[int, int]

# Each family is a pair of opposite unit vectors (row delta, column delta).
DIRECTION_FAMILIES: tuple[tuple[Direction, Direction], ...] = (
    ((0, 1), (0, -1)),  # horizontal
    ((1, 0), (-1, 0)),  # vertical
    ((-1, 1), (1, -1)),  # diagonal, rising to the right
    ((1, 1), (-1, -1)),  # diagonal, falling to the right
)


def _walk(board: Board, origin: Coord, direction: Direction, piece: Cell) -> int:
    """Count consecutive `piece` cells stepping away from `origin`, excluding the origin.

    Stops after WIN_LENGTH - 1 steps, at the board edge, or at the first non-matching
    cell. Walls never match a piece, so the ring fences every direction the same way.
    """

    row, column = origin
    d_row, d_column = direction
    count = 0
    for _ in range(WIN_LENGTH - 1):
        row += d_row
        column += d_column
        if not board.in_bounds(row, column) or board.cell(row, column) is not piece:
            break
        count += 1
    return count


def winner_at(board: Board, origin: Coord) -> Cell | None:
    """Return the piece at `origin` if it sits inside a run of WIN_LENGTH in any family."""

    piece = board.cell(*origin)
    if not is_piece(piece):
        return None

    for forward, backward in DIRECTION_FAMILIES:
        run = 1 + _walk(board, origin, forward, piece) + _walk(board, origin, backward, piece)
        if run >= WIN_LENGTH:
            return piece
    return None


def check(board: Board, origin: Coord | None = None) -> GameResult:
    """Derive the game result from the board.

    With an origin (normally the cell just filled) only runs through that cell are
    considered. Without one every interior cell is scanned, which is slower but needs
    no hint about the last move.
    """

    if origin is not None:
        winner = winner_at(board, origin)
    else:
        winner = None
        for coord in board.interior_cells():
            winner = winner_at(board, coord)
            if winner is not None:
                break

    if winner is not None:
        return GameResult.win(winner)
    if not board.has_empty():
        return GameResult.draw()
    return GameResult.in_progress()
