# src/rem_tracker/core/engine.py

from __future__ import annotations

import logging

from .commands import CommandResult, execute
from .errors import RemError
from .parser import parse
from .state import AppState

logger = logging.getLogger(__name__)


def respond(state: AppState, line: str) -> CommandResult:
    """
    Handle one input line end to end: parse, execute (and save), format.

    Recoverable errors come back as a normal CommandResult carrying the error
    message; the task list is untouched in that case.
    """
    try:
        command = parse(line)
        result = execute(command, state.store, state.tasks)
    except RemError as e:
        logger.debug("Command rejected (%s): %s", type(e).__name__, e)
        return CommandResult(str(e))

    logger.debug("Handled %s (tasks=%d exit=%s)", type(command).__name__, len(state.tasks), result.is_exit)
    return result
