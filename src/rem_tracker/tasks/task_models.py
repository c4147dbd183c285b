# src/rem_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TaskKind(StrEnum):
    """Task variant tag; the value is what the store persists."""

    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"

    @property
    def icon(self) -> str:
        return _ICONS[self]


_ICONS = {
    TaskKind.TODO: "T",
    TaskKind.DEADLINE: "D",
    TaskKind.EVENT: "E",
}


@dataclass(slots=True, eq=False)
class Task:
    """
    Base task: a description plus a completion flag.

    Subclasses set `kind` and may carry one extra date-or-text field
    (exposed uniformly as `extra` for storage).
    """

    description: str
    is_done: bool = False

    kind = TaskKind.TODO

    def __post_init__(self) -> None:
        if not self.description or not self.description.strip():
            raise ValueError("description is required")

    @property
    def extra(self) -> str | None:
        return None

    @property
    def done_icon(self) -> str:
        return "X" if self.is_done else " "

    def mark_done(self) -> None:
        self.is_done = True

    def mark_not_done(self) -> None:
        self.is_done = False

    def as_record(self) -> tuple[str, str, bool, str | None]:
        return (self.kind.value, self.description, self.is_done, self.extra)

    def _suffix(self) -> str:
        return ""

    def __str__(self) -> str:
        return f"[{self.kind.icon}][{self.done_icon}] {self.description}{self._suffix()}"


@dataclass(slots=True, eq=False)
class Todo(Task):
    kind = TaskKind.TODO


@dataclass(slots=True, eq=False, kw_only=True)
class Deadline(Task):
    by: str

    kind = TaskKind.DEADLINE

    @property
    def extra(self) -> str | None:
        return self.by

    def _suffix(self) -> str:
        return f" (by: {self.by})"


@dataclass(slots=True, eq=False, kw_only=True)
class Event(Task):
    at: str

    kind = TaskKind.EVENT

    @property
    def extra(self) -> str | None:
        return self.at

    def _suffix(self) -> str:
        return f" (at: {self.at})"


def task_from_record(kind: str, description: str, is_done: bool, extra: str | None) -> Task:
    """Rebuild a Task from its stored (kind, description, is_done, extra) shape."""
    try:
        task_kind = TaskKind(kind)
    except ValueError:
        raise ValueError(f"unknown task kind: {kind!r}") from None

    if task_kind is TaskKind.TODO:
        return Todo(description, is_done=bool(is_done))

    if extra is None or not str(extra).strip():
        raise ValueError(f"{task_kind.value} task is missing its date field")

    if task_kind is TaskKind.DEADLINE:
        return Deadline(description, is_done=bool(is_done), by=str(extra))
    return Event(description, is_done=bool(is_done), at=str(extra))
