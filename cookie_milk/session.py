from __future__ import annotations

import logging
from dataclasses import dataclass

from cookie_milk.api.models import GameResult
from cookie_milk.core import win_detector
from cookie_milk.core.board import Board, Coord
from cookie_milk.core.cells import parse_piece
from cookie_milk.core.placement import drop
from cookie_milk.core.render import render_board
from cookie_milk.errors import GameError
from cookie_milk.fsm import GameStateMachine
from cookie_milk.lock import ReadWriteLock
from cookie_milk.turn_processing.validators import ValidationContext, pipeline_for_action

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of an accepted placement.

    - `position`: (row, column) the piece landed in.
    - `result`: game result after the move.
    - `rendered`: board text after the move.
    """

    position: Coord
    result: GameResult
    rendered: str


class Session:
    """The one live game: a board plus its result, shared by every caller.

    Reads (`status`, `result`) share a read lock; `place` and `reset` hold the write
    lock for their whole duration, so each write sees the complete effect of the
    previous one.
    """

    def __init__(self, *, rows: int = 5, columns: int = 6) -> None:
        self.rows = rows
        self.columns = columns
        self._lock = ReadWriteLock()
        self._board = Board(rows, columns)
        self._fsm = GameStateMachine()

    def status(self) -> str:
        with self._lock.read():
            return render_board(self._board, self._fsm.result)

    @property
    def result(self) -> GameResult:
        with self._lock.read():
            return self._fsm.result

    def place(self, team: str, column: int) -> MoveResult:
        ctx = ValidationContext(action="place", team=team, column=column)

        with self._lock.write():
            try:
                pipeline_for_action(ctx.action).validate(ctx=ctx, board=self._board, fsm=self._fsm)
                piece = parse_piece(team)
                position = drop(self._board, column, piece)
            except GameError as e:
                logger.info("Rejected place team=%r column=%s: %s", team, column, e)
                raise

            result = win_detector.check(self._board, origin=position)
            self._fsm.advance(result)
            rendered = render_board(self._board, result)

        logger.debug("Placed %s at %s", piece.value, position)
        if result.is_terminal:
            logger.info("Game finished: %s", result.status.value if result.winner is None else f"{result.winner.value} wins")
        return MoveResult(position=position, result=result, rendered=rendered)

    def reset(self) -> str:
        ctx = ValidationContext(action="reset")

        with self._lock.write():
            pipeline_for_action(ctx.action).validate(ctx=ctx, board=self._board, fsm=self._fsm)
            self._board = Board(self.rows, self.columns)
            self._fsm = GameStateMachine()
            rendered = render_board(self._board, self._fsm.result)

        logger.info("Board reset (%dx%d)", self.rows, self.columns)
        return rendered
