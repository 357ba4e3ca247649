from __future__ import annotations

from pathlib import Path

import pytest

from cookie_milk.config import Settings, load_settings


def test_defaults_without_env(tmp_path: Path) -> None:
    settings = load_settings(env_file=tmp_path / "missing.env")
    assert settings == Settings(rows=5, columns=6, log_level="INFO")


def test_env_overrides(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COOKIE_MILK_ROWS", "7")
    monkeypatch.setenv("COOKIE_MILK_COLUMNS", " 9 ")
    monkeypatch.setenv("COOKIE_MILK_LOG_LEVEL", "debug")

    settings = load_settings(env_file=tmp_path / "missing.env")

    assert settings == Settings(rows=7, columns=9, log_level="DEBUG")


def test_malformed_integer_names_the_variable(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COOKIE_MILK_ROWS", "five")

    with pytest.raises(ValueError) as e:
        load_settings(env_file=tmp_path / "missing.env")

    assert "COOKIE_MILK_ROWS" in str(e.value)


def test_dotenv_file_is_loaded_but_environment_wins(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("COOKIE_MILK_ROWS=6\nCOOKIE_MILK_COLUMNS=8\n", encoding="utf-8")
    monkeypatch.setenv("COOKIE_MILK_COLUMNS", "10")

    settings = load_settings(env_file=env_file)

    assert settings.rows == 6
    assert settings.columns == 10
