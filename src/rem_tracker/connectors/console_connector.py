# src/rem_tracker/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..core import messages
from ..core.engine import respond
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def run_console_loop(
    state: AppState,
    *,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """
    Interactive REPL: one line in, one reply out, until `bye`, EOF or Ctrl+C.

    `read`/`write` default to input()/print() and are injectable for tests.
    """
    app_name = str(getattr(state.settings, "app_name", "Rem"))
    stamp = bool(getattr(state.settings, "console_timestamps", False))

    def emit(text: str) -> None:
        write(f"[{_ts_local()}] {text}" if stamp else text)

    logger.info("Console connector started (tasks=%d).", len(state.tasks))
    emit(messages.WELCOME.format(app_name=app_name))
    if state.startup_warning:
        emit(state.startup_warning)

    while True:
        try:
            user_input = read(">>> You: ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not user_input:
            continue

        try:
            result = respond(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            emit("Internal error while handling that command.")
            continue

        emit(f"<<< {app_name}: {result.text}")
        if result.is_exit:
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")
