from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cookie_milk.api.models import GameResult


class GameError(ValueError):
    """Base class for rejected game operations.

    None of these leave the board or the game result partially mutated.
    """


class OutOfBounds(GameError):
    def __init__(self, column: int, playable: range) -> None:
        self.column = column
        self.playable = playable
        super().__init__(f"Column {column} is outside the playable range {playable.start}..{playable.stop - 1}")


class ColumnOverflow(GameError):
    def __init__(self, column: int) -> None:
        self.column = column
        super().__init__(f"Column {column} is full")


class InvalidPiece(GameError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unknown team: {token!r}")


class GameOver(GameError):
    """Raised for a placement attempted after the game reached a terminal result.

    Carries the final board render (status line included) so callers can show it.
    """

    def __init__(self, *, rendered: str, result: GameResult) -> None:
        self.rendered = rendered
        self.result = result
        super().__init__("Game is over")
