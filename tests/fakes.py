# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable

from rem_tracker.core.errors import StorageError
from rem_tracker.tasks.task_models import Task


class FakeTaskStore:
    """
    In-memory TaskRepo for unit tests.

    - Records every save as a snapshot of (kind, description, is_done, extra)
    - Can be told to fail loads or saves with StorageError
    """

    def __init__(
        self,
        tasks: list[Task] | None = None,
        *,
        fail_load: bool = False,
        fail_save: bool = False,
    ) -> None:
        self.tasks = list(tasks or [])
        self.fail_load = fail_load
        self.fail_save = fail_save
        self.saves: list[list[tuple[str, str, bool, str | None]]] = []

    def load(self) -> list[Task]:
        if self.fail_load:
            raise StorageError("fake load failure")
        return list(self.tasks)

    def save(self, tasks: Iterable[Task]) -> None:
        if self.fail_save:
            raise StorageError("disk full")
        snapshot = list(tasks)
        self.saves.append([t.as_record() for t in snapshot])
        self.tasks = snapshot
