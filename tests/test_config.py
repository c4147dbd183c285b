# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from rem_tracker.config import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in (
        "REM_APP_NAME",
        "REM_LOG_LEVEL",
        "REM_DATA_DIR",
        "REM_TASKS_DB_PATH",
        "REM_LOG_DIR",
        "REM_CONSOLE_TIMESTAMPS",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.app_name == "Rem"
    assert s.log_level == "WARNING"
    assert s.console_timestamps is False
    assert s.data_dir == Path(".local/rem")
    assert s.tasks_db_path == Path(".local/rem") / "tasks.sqlite3"
    assert s.log_dir == Path(".local/rem")


def test_paths_follow_data_dir(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("REM_DATA_DIR", str(tmp_path))
    s = Settings.from_env()
    assert s.tasks_db_path == tmp_path / "tasks.sqlite3"
    assert s.log_dir == tmp_path


def test_explicit_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("REM_APP_NAME", "  ")
    monkeypatch.setenv("REM_TASKS_DB_PATH", str(tmp_path / "x.db"))
    monkeypatch.setenv("REM_CONSOLE_TIMESTAMPS", "yes")
    monkeypatch.setenv("REM_LOG_LEVEL", "debug")

    s = Settings.from_env()
    assert s.app_name == "Rem"
    assert s.tasks_db_path == tmp_path / "x.db"
    assert s.console_timestamps is True
    assert s.log_level == "debug"
