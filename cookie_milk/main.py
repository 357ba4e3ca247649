from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
import logging

from cookie_milk.api.routes import router
from cookie_milk.config import load_settings
from cookie_milk.session import Session

# Configure logging
logging.basicConfig(level=load_settings().log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Re-read settings so the environment at startup (not import) decides the board size.
    settings = load_settings()
    app.state.session = Session(rows=settings.rows, columns=settings.columns)
    logger.info("Session ready with a %dx%d board", settings.rows, settings.columns)
    yield


app = FastAPI(title="cookie-milk", version="0.1.0", lifespan=_lifespan)
app.include_router(router)


@app.get("/info")
async def info() -> dict[str, str]:
    return {"name": "cookie-milk", "version": "0.1.0"}
