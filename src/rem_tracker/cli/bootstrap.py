# src/rem_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the SQLite store and the loaded task list into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core import messages
from ..core.errors import StorageError
from ..core.ports import TaskRepo
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_db_path.parent.mkdir(parents=True, exist_ok=True)


def load_task_list(store: TaskRepo) -> tuple[TaskList, str | None]:
    """
    Load the saved list; on StorageError start empty and return a one-time warning.

    A store that can quarantine its broken file does so, so later saves work.
    """
    try:
        return TaskList(store.load()), None
    except StorageError as e:
        logger.warning("Could not load saved tasks, starting empty: %s", e)
        quarantine = getattr(store, "quarantine", None)
        if quarantine is not None:
            try:
                quarantine()
            except StorageError:
                logger.exception("Could not move the unreadable task file aside.")
        return TaskList(), messages.LOAD_FAILED.format(reason=e)


def create_initial_state(*, settings=None, store: TaskRepo | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the store) injectable makes the app easier to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if store is None:
        store = TaskStore(settings.tasks_db_path)

    tasks, warning = load_task_list(store)
    return AppState(settings=settings, store=store, tasks=tasks, startup_warning=warning)
