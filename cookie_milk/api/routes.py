from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from cookie_milk.api.deps import get_session
from cookie_milk.errors import ColumnOverflow, GameOver, InvalidPiece, OutOfBounds
from cookie_milk.session import Session

router = APIRouter()

# Handlers are plain `def` so FastAPI runs them in its thread pool; the session's
# reader/writer lock does the serialization.


@router.get("/healthcheck")
def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/board", response_class=PlainTextResponse)
def board_route(session: Session = Depends(get_session)) -> PlainTextResponse:
    return PlainTextResponse(session.status())


@router.post("/reset", response_class=PlainTextResponse)
def reset_route(session: Session = Depends(get_session)) -> PlainTextResponse:
    return PlainTextResponse(session.reset())


@router.post("/place/{team}/{column}", response_class=PlainTextResponse)
def place_route(team: str, column: int, session: Session = Depends(get_session)) -> PlainTextResponse:
    try:
        move = session.place(team, column)
    except (InvalidPiece, OutOfBounds) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except ColumnOverflow:
        return PlainTextResponse(session.status(), status_code=status.HTTP_503_SERVICE_UNAVAILABLE)
    except GameOver as e:
        return PlainTextResponse(e.rendered, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)

    return PlainTextResponse(move.rendered)
