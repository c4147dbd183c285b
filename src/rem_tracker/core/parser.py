# src/rem_tracker/core/parser.py

"""
Turn one raw input line into a Command.

Vocabulary (case-sensitive, first whitespace-separated token):
    todo <desc>
    deadline <desc> /by <when>
    event <desc> /at <when>
    list
    mark <n> | unmark <n> | delete <n>
    find <keyword>
    bye

Anything else becomes UnknownCommand rather than an error. Task numbers are only
checked for being integers here; the range is checked against the live list at
execution time.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import datetime

from ..tasks.task_models import Deadline, Event, Todo
from . import messages
from .commands import (
    AddCommand,
    Command,
    DeleteCommand,
    ExitCommand,
    FindCommand,
    ListCommand,
    MarkCommand,
    UnknownCommand,
    UnmarkCommand,
)
from .errors import DateParseError, ParseError

ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
TASK_NUMBER_RE = re.compile(r"[+-]?[0-9]+")
DISPLAY_DATE_FORMAT = "%d %b %Y"


def normalize_date(when: str) -> str:
    """
    "2023-12-02" -> "02 Dec 2023"; any non YYYY-MM-DD text is returned unchanged.
    """
    if not ISO_DATE_RE.fullmatch(when):
        return when
    try:
        parsed = datetime.strptime(when, "%Y-%m-%d")
    except ValueError:
        raise DateParseError(
            f"'{when}' is not a real date. Please use a valid YYYY-MM-DD date, e.g. 2023-12-02."
        ) from None
    return parsed.strftime(DISPLAY_DATE_FORMAT)


def _split_on(args: list[str], delimiter: str, keyword: str) -> tuple[str, str]:
    usage = f"Usage: {keyword} <description> {delimiter} <date or text>"
    try:
        pos = args.index(delimiter)
    except ValueError:
        raise ParseError(
            f"Please tell me when with '{delimiter}', e.g. '{keyword} return book {delimiter} 2023-12-02'."
        ) from None

    description = " ".join(args[:pos])
    when = " ".join(args[pos + 1 :])
    if not description:
        raise ParseError(f"Please enter a task description before '{delimiter}'. {usage}")
    if not when:
        raise ParseError(f"Please enter a date or time after '{delimiter}'. {usage}")
    return description, when


def _parse_todo(args: list[str], rest: str) -> Command:
    if not args:
        raise ParseError(
            "Please enter a task description following 'todo' and I'll add it into your list. T^T"
        )
    return AddCommand(Todo(" ".join(args)))


def _parse_deadline(args: list[str], rest: str) -> Command:
    description, when = _split_on(args, "/by", "deadline")
    return AddCommand(Deadline(description, by=normalize_date(when)))


def _parse_event(args: list[str], rest: str) -> Command:
    description, when = _split_on(args, "/at", "event")
    return AddCommand(Event(description, at=normalize_date(when)))


def _parse_number(keyword: str, args: list[str]) -> int:
    valid = (
        "Please give one task number from 1 up to the number of tasks in your list, "
        f"e.g. '{keyword} 2'."
    )
    if len(args) != 1:
        raise ParseError(f"Usage: {keyword} <task number>. {valid}")
    if not TASK_NUMBER_RE.fullmatch(args[0]):
        raise ParseError(f"'{args[0]}' is not a task number. {valid}")
    return int(args[0])


def _parse_mark(args: list[str], rest: str) -> Command:
    return MarkCommand(_parse_number("mark", args))


def _parse_unmark(args: list[str], rest: str) -> Command:
    return UnmarkCommand(_parse_number("unmark", args))


def _parse_delete(args: list[str], rest: str) -> Command:
    return DeleteCommand(_parse_number("delete", args))


def _parse_list(args: list[str], rest: str) -> Command:
    return ListCommand()


def _parse_find(args: list[str], rest: str) -> Command:
    keyword = rest.strip()
    if not keyword:
        raise ParseError("Please tell me what to look for, e.g. 'find book'.")
    return FindCommand(keyword)


def _parse_bye(args: list[str], rest: str) -> Command:
    return ExitCommand()


_PARSERS: dict[str, Callable[[list[str], str], Command]] = {
    "todo": _parse_todo,
    "deadline": _parse_deadline,
    "event": _parse_event,
    "list": _parse_list,
    "mark": _parse_mark,
    "unmark": _parse_unmark,
    "delete": _parse_delete,
    "find": _parse_find,
    "bye": _parse_bye,
}


def parse(line: str) -> Command:
    """Parse a raw line; raises ParseError (or DateParseError) on bad syntax."""
    parts = line.split(None, 1)
    if not parts:
        raise ParseError(messages.EMPTY_INPUT)

    keyword = parts[0]
    rest = parts[1] if len(parts) > 1 else ""

    handler = _PARSERS.get(keyword)
    if handler is None:
        return UnknownCommand(keyword)
    return handler(rest.split(), rest)
