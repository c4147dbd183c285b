# src/rem_tracker/core/errors.py

"""
User-facing error hierarchy.

Every RemError is recoverable: str(err) is the message shown to the user and the
interactive loop keeps going.
"""

from __future__ import annotations


class RemError(Exception):
    """Base class for recoverable errors; the message is user-facing."""


class ParseError(RemError):
    """Malformed or incomplete command syntax."""


class DateParseError(ParseError):
    """A YYYY-MM-DD value that is not a real calendar date."""


class RangeError(RemError):
    """A task number outside [1, size]."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        if size == 0:
            msg = f"There is no task {index}: your list is empty. T^T"
        else:
            msg = f"There is no task {index}. Please pick a task number from 1 to {size}."
        super().__init__(msg)


class StorageError(RemError):
    """Loading or saving the task list failed."""
