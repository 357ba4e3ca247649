from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, model_validator

from cookie_milk.core.cells import PIECES, Cell


class GameStatus(StrEnum):
    in_progress = "in_progress"
    win = "win"
    draw = "draw"


class GameResult(BaseModel):
    """Outcome of the game so far: in progress, won by a piece, or drawn."""

    model_config = ConfigDict(frozen=True)

    status: GameStatus = GameStatus.in_progress
    winner: Cell | None = None

    @model_validator(mode="after")
    def _winner_matches_status(self) -> "GameResult":
        if self.status == GameStatus.win:
            if self.winner not in PIECES:
                raise ValueError("A win needs a cookie or milk winner")
        elif self.winner is not None:
            raise ValueError(f"No winner allowed when status is {self.status.value}")
        return self

    @classmethod
    def in_progress(cls) -> "GameResult":
        return cls(status=GameStatus.in_progress)

    @classmethod
    def win(cls, piece: Cell) -> "GameResult":
        return cls(status=GameStatus.win, winner=piece)

    @classmethod
    def draw(cls) -> "GameResult":
        return cls(status=GameStatus.draw)

    @property
    def is_terminal(self) -> bool:
        return self.status != GameStatus.in_progress
