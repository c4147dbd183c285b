# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from rem_tracker.core.state import AppState
from rem_tracker.tasks.task_list import TaskList
from rem_tracker.tasks.task_store import TaskStore

from .fakes import FakeTaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the developer's environment.
    """
    return SimpleNamespace(
        app_name="Rem",
        log_level="WARNING",
        console_timestamps=False,
        data_dir=tmp_path / "data",
        tasks_db_path=tmp_path / "data" / "tasks.sqlite3",
        log_dir=tmp_path / "logs",
    )


@pytest.fixture()
def fake_store() -> FakeTaskStore:
    return FakeTaskStore()


@pytest.fixture()
def tasks() -> TaskList:
    return TaskList()


@pytest.fixture()
def state(settings: SimpleNamespace, fake_store: FakeTaskStore, tasks: TaskList) -> AppState:
    """AppState wired with the in-memory fake store."""
    return AppState(settings=settings, store=fake_store, tasks=tasks)


@pytest.fixture()
def sqlite_state(settings: SimpleNamespace) -> AppState:
    """
    AppState backed by a real SQLite TaskStore in tmp_path.

    NOTE: kept next to the fake because end-to-end persistence is part of what
    we want to test.
    """
    return AppState(settings=settings, store=TaskStore(settings.tasks_db_path), tasks=TaskList())
