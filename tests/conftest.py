from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from cookie_milk.api.deps import get_session
from cookie_milk.main import app
from cookie_milk.session import Session


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's shell / .env settings out of the tests."""

    for name in ("COOKIE_MILK_ROWS", "COOKIE_MILK_COLUMNS", "COOKIE_MILK_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def session() -> Session:
    return Session(rows=5, columns=6)


@pytest.fixture()
def client(session: Session) -> Generator[TestClient, None, None]:
    """FastAPI TestClient wired to the `session` fixture instead of the startup one."""

    def _override() -> Session:
        return session

    app.dependency_overrides[get_session] = _override
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
