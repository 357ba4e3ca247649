from __future__ import annotations

from enum import StrEnum

from cookie_milk.errors import InvalidPiece


class Cell(StrEnum):
    wall = "wall"
    empty = "empty"
    cookie = "cookie"
    milk = "milk"


PIECES: frozenset[Cell] = frozenset({Cell.cookie, Cell.milk})

GLYPHS: dict[Cell, str] = {
    Cell.wall: "⬜",
    Cell.empty: "⬛",
    Cell.cookie: "🍪",
    Cell.milk: "🥛",
}


def glyph(cell: Cell) -> str:
    return GLYPHS[cell]


def is_piece(cell: Cell) -> bool:
    return cell in PIECES


def parse_piece(token: str) -> Cell:
    """Map a team token to its piece.

    Accepts the canonical glyph (e.g. "🍪") or the lowercase name (e.g. "cookie").
    Walls and empty cells are not teams.
    """

    for piece in PIECES:
        if token == piece.value or token == GLYPHS[piece]:
            return piece
    raise InvalidPiece(token)
