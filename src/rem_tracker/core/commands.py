# src/rem_tracker/core/commands.py

"""
Command variants and their single execution contract.

Each variant is a small frozen dataclass carrying only what it needs; execute()
dispatches over all of them with one match statement.

Mutating commands save the whole list right after the in-memory change. A failed
save is reported as a warning line on the response and the change is kept.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..tasks.task_list import TaskList
from ..tasks.task_models import Task
from . import messages
from .errors import StorageError
from .ports import TaskRepo

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AddCommand:
    task: Task


@dataclass(frozen=True, slots=True)
class DeleteCommand:
    number: int


@dataclass(frozen=True, slots=True)
class MarkCommand:
    number: int


@dataclass(frozen=True, slots=True)
class UnmarkCommand:
    number: int


@dataclass(frozen=True, slots=True)
class ListCommand:
    pass


@dataclass(frozen=True, slots=True)
class FindCommand:
    keyword: str


@dataclass(frozen=True, slots=True)
class ExitCommand:
    pass


@dataclass(frozen=True, slots=True)
class UnknownCommand:
    keyword: str


Command = (
    AddCommand
    | DeleteCommand
    | MarkCommand
    | UnmarkCommand
    | ListCommand
    | FindCommand
    | ExitCommand
    | UnknownCommand
)


@dataclass(frozen=True, slots=True)
class CommandResult:
    text: str
    is_exit: bool = False


def _enumerate_tasks(tasks: list[Task]) -> list[str]:
    return [f"{i}. {t}" for i, t in enumerate(tasks, start=1)]


def _persist(store: TaskRepo, tasks: TaskList) -> str | None:
    """Save the list; on failure return a warning line instead of raising."""
    try:
        store.save(tasks.to_list())
    except StorageError as e:
        logger.error("Saving tasks failed; in-memory list kept (%d tasks): %s", len(tasks), e)
        return messages.SAVE_FAILED.format(reason=e)
    return None


def _mutated(store: TaskRepo, tasks: TaskList, lines: list[str]) -> CommandResult:
    warning = _persist(store, tasks)
    if warning:
        lines.append(warning)
    return CommandResult("\n".join(lines))


def execute(command: Command, store: TaskRepo, tasks: TaskList) -> CommandResult:
    """
    Run one command against the task list (and store, for mutations).

    Raises RangeError for task numbers outside [1, len(tasks)]; nothing is
    changed or saved in that case.
    """
    match command:
        case AddCommand(task=task):
            tasks.add(task)
            logger.debug("Added %s task (total=%d)", task.kind.value, len(tasks))
            return _mutated(
                store, tasks, [messages.TASK_ADDED, f"  {task}", messages.task_count(len(tasks))]
            )

        case DeleteCommand(number=number):
            task = tasks.remove(number)
            logger.debug("Removed task %d (total=%d)", number, len(tasks))
            return _mutated(
                store, tasks, [messages.TASK_REMOVED, f"  {task}", messages.task_count(len(tasks))]
            )

        case MarkCommand(number=number):
            task = tasks.mark(number)
            return _mutated(store, tasks, [messages.TASK_MARKED, f"  {task}"])

        case UnmarkCommand(number=number):
            task = tasks.unmark(number)
            return _mutated(store, tasks, [messages.TASK_UNMARKED, f"  {task}"])

        case ListCommand():
            if not len(tasks):
                return CommandResult(messages.LIST_EMPTY)
            return CommandResult("\n".join([messages.LIST_HEADER, *_enumerate_tasks(tasks.to_list())]))

        case FindCommand(keyword=keyword):
            found = tasks.find(keyword)
            if not found:
                return CommandResult(messages.FIND_EMPTY.format(keyword=keyword))
            return CommandResult("\n".join([messages.FIND_HEADER, *_enumerate_tasks(found)]))

        case ExitCommand():
            return CommandResult(messages.FAREWELL, is_exit=True)

        case UnknownCommand(keyword=keyword):
            logger.debug("Unknown command keyword %r", keyword)
            return CommandResult(messages.UNKNOWN_COMMAND)

    raise TypeError(f"Unsupported command: {command!r}")
