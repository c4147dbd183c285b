# src/rem_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

Commands depend on this Protocol rather than on the SQLite store, so tests can
plug in an in-memory fake.
"""

from collections.abc import Iterable
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Durable mirror of the task list. Both methods raise StorageError on failure."""

    def load(self) -> list[Task]: ...
    def save(self, tasks: Iterable[Task]) -> None: ...
