# src/rem_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_list import TaskList
from .ports import TaskRepo


@dataclass
class AppState:
    """Everything one session needs: settings, the store and the live task list."""

    # Store Settings on the state for easy access in connectors.
    settings: object

    store: TaskRepo
    tasks: TaskList

    # Set once by bootstrap when the saved list could not be loaded.
    startup_warning: str | None = None
