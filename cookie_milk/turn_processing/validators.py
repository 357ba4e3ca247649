from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from cookie_milk.core.board import Board
from cookie_milk.core.cells import parse_piece
from cookie_milk.core.render import render_board
from cookie_milk.errors import GameOver
from cookie_milk.fsm import GameStateMachine


@dataclass(frozen=True, slots=True)
class ValidationContext:
    """Inputs available to validators.

    Keep this tight and serializable-ish so we can safely log it.
    """

    action: str
    team: str | None = None
    column: int | None = None


class MoveValidator(ABC):
    """A small, composable validation unit for an incoming write."""

    @abstractmethod
    def validate(self, *, ctx: ValidationContext, board: Board, fsm: GameStateMachine) -> None:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class PieceValidator(MoveValidator):
    """The team token must name one of the two pieces."""

    def validate(self, *, ctx: ValidationContext, board: Board, fsm: GameStateMachine) -> None:
        parse_piece(ctx.team or "")


@dataclass(frozen=True, slots=True)
class CompletedGameValidator(MoveValidator):
    """Deny writes once the game is won or drawn, reporting the final board."""

    def validate(self, *, ctx: ValidationContext, board: Board, fsm: GameStateMachine) -> None:
        if fsm.is_terminal:
            result = fsm.result
            raise GameOver(rendered=render_board(board, result), result=result)


@dataclass(frozen=True, slots=True)
class ValidatorPipeline:
    validators: tuple[MoveValidator, ...]

    def validate(self, *, ctx: ValidationContext, board: Board, fsm: GameStateMachine) -> None:
        for v in self.validators:
            v.validate(ctx=ctx, board=board, fsm=fsm)


# Order matters: a bad team is reported before a finished game.
DEFAULT_ACTION_PIPELINES: dict[str, ValidatorPipeline] = {
    "place": ValidatorPipeline(
        validators=(
            PieceValidator(),
            CompletedGameValidator(),
        )
    ),
    "reset": ValidatorPipeline(validators=()),
}


def pipeline_for_action(action: str) -> ValidatorPipeline:
    pipe = DEFAULT_ACTION_PIPELINES.get(action)
    if pipe is None:
        raise ValueError(f"Unknown action: {action}")
    return pipe
