from __future__ import annotations

from fastapi import Request

from cookie_milk.session import Session


def get_session(request: Request) -> Session:
    session = getattr(request.app.state, "session", None)
    if session is None:
        raise RuntimeError("Session not initialized. Build it at startup.")
    return session
