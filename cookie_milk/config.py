from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_ROWS = 5
DEFAULT_COLUMNS = 6

# project root is one level up from this file: cookie_milk/config.py
_DEFAULT_ENV_FILE = Path(__file__).resolve().parents[1] / ".env"


@dataclass(frozen=True, slots=True)
class Settings:
    rows: int = DEFAULT_ROWS
    columns: int = DEFAULT_COLUMNS
    log_level: str = "INFO"


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def load_settings(*, env_file: Path | None = None) -> Settings:
    """Read settings from the environment.

    A `.env` file is loaded first when present; variables already set in the
    environment win over it. Board dimensions are fixed for the life of the process.
    """

    env_path = env_file or _DEFAULT_ENV_FILE
    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=False)

    return Settings(
        rows=_int_env("COOKIE_MILK_ROWS", DEFAULT_ROWS),
        columns=_int_env("COOKIE_MILK_COLUMNS", DEFAULT_COLUMNS),
        log_level=os.environ.get("COOKIE_MILK_LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )
