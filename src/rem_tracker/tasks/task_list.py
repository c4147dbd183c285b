# src/rem_tracker/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..core.errors import RangeError
from .task_models import Task


class TaskList:
    """
    Ordered, single-owner list of tasks.

    Public methods take 1-based task numbers (as typed by the user) and raise
    RangeError before touching anything if the number is out of range.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def _index(self, number: int) -> int:
        if number < 1 or number > len(self._tasks):
            raise RangeError(number, len(self._tasks))
        return number - 1

    def get(self, number: int) -> Task:
        return self._tasks[self._index(number)]

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def remove(self, number: int) -> Task:
        return self._tasks.pop(self._index(number))

    def mark(self, number: int) -> Task:
        task = self.get(number)
        task.mark_done()
        return task

    def unmark(self, number: int) -> Task:
        task = self.get(number)
        task.mark_not_done()
        return task

    def find(self, keyword: str) -> list[Task]:
        """Case-sensitive substring match on descriptions, in list order."""
        return [t for t in self._tasks if keyword in t.description]

    def to_list(self) -> list[Task]:
        return list(self._tasks)
