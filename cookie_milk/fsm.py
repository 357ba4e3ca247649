from __future__ import annotations

from statemachine import State, StateMachine

from cookie_milk.api.models import GameResult, GameStatus
from cookie_milk.core.cells import Cell


class GameStateMachine(StateMachine):
    """Tracks the game result: in progress -> won | drawn.

    Both end states are final, so any further event raises TransitionNotAllowed.
    Transitions are driven only by win detector results via `advance`.
    """

    in_progress = State(GameStatus.in_progress.value, value=GameStatus.in_progress.value, initial=True)
    won = State(GameStatus.win.value, value=GameStatus.win.value, final=True)
    drawn = State(GameStatus.draw.value, value=GameStatus.draw.value, final=True)

    declare_win = in_progress.to(won)
    declare_draw = in_progress.to(drawn)

    def __init__(self) -> None:
        super().__init__()
        self.winner: Cell | None = None

    def on_declare_win(self, piece: Cell) -> None:
        self.winner = piece

    @property
    def is_terminal(self) -> bool:
        return bool(self.current_state.final)

    @property
    def result(self) -> GameResult:
        status = GameStatus(str(self.current_state.value))
        if status == GameStatus.win and self.winner is not None:
            return GameResult.win(self.winner)
        if status == GameStatus.draw:
            return GameResult.draw()
        return GameResult.in_progress()

    def advance(self, result: GameResult) -> None:
        if result.status == GameStatus.win and result.winner is not None:
            self.declare_win(piece=result.winner)
        elif result.status == GameStatus.draw:
            self.declare_draw()
