# src/rem_tracker/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
import sqlite3
from collections.abc import Iterable
from pathlib import Path

from ..core.errors import StorageError
from .task_models import Task, task_from_record

logger = logging.getLogger(__name__)


class TaskStore:
    """
    SQLite task store: the durable mirror of the in-memory TaskList.

    The whole list is rewritten on every save (one transaction), ordered by
    `position`. The schema is created lazily so that a corrupt file surfaces as
    a StorageError from load()/save() instead of blowing up the constructor.

    Thread-safety:
    - each method opens its own SQLite connection
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3") -> None:
        self._db_path = Path(db_path)
        logger.info("TaskStore ready db=%s exists=%s", self._db_path, self._db_path.exists())

    @property
    def path(self) -> Path:
        return self._db_path

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        return conn

    @staticmethod
    def _ensure_schema(conn: sqlite3.Connection) -> None:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS tasks (
                position INTEGER PRIMARY KEY,
                kind TEXT NOT NULL,
                description TEXT NOT NULL,
                is_done INTEGER NOT NULL DEFAULT 0,
                extra TEXT
            )
            """
        )

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return task_from_record(
            str(row["kind"] or ""),
            str(row["description"] or ""),
            bool(row["is_done"]),
            row["extra"],
        )

    # ---- public API ----

    def load(self) -> list[Task]:
        """
        Return the stored tasks in order.

        Missing database -> []. Corrupt database or invalid rows -> StorageError.
        """
        if not self._db_path.exists():
            logger.debug("No task database at %s; starting empty.", self._db_path)
            return []

        try:
            conn = self._get_conn()
        except (sqlite3.Error, OSError) as e:
            raise StorageError(f"Could not open task file {self._db_path}: {e}") from e

        try:
            self._ensure_schema(conn)
            rows = conn.execute(
                "SELECT kind, description, is_done, extra FROM tasks ORDER BY position ASC"
            ).fetchall()
            tasks = [self._row_to_task(r) for r in rows]
        except sqlite3.Error as e:
            raise StorageError(f"Task file {self._db_path} is unreadable: {e}") from e
        except ValueError as e:
            raise StorageError(f"Task file {self._db_path} has an invalid entry: {e}") from e
        finally:
            conn.close()

        logger.info("Loaded %d tasks from %s", len(tasks), self._db_path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        """Replace the stored list with `tasks` atomically."""
        records = [
            (position, kind, description, int(is_done), extra)
            for position, (kind, description, is_done, extra) in enumerate(
                (t.as_record() for t in tasks), start=1
            )
        ]

        try:
            conn = self._get_conn()
        except (sqlite3.Error, OSError) as e:
            raise StorageError(f"Could not open task file {self._db_path}: {e}") from e

        try:
            with conn:
                self._ensure_schema(conn)
                conn.execute("DELETE FROM tasks")
                conn.executemany(
                    "INSERT INTO tasks(position, kind, description, is_done, extra) "
                    "VALUES (?, ?, ?, ?, ?)",
                    records,
                )
        except sqlite3.Error as e:
            raise StorageError(f"Could not save tasks to {self._db_path}: {e}") from e
        finally:
            conn.close()

        logger.debug("Saved %d tasks to %s", len(records), self._db_path)

    def _quarantine_target(self) -> Path:
        # Never overwrite an earlier backup: .corrupt, .corrupt.1, .corrupt.2, ...
        base = self._db_path.name + ".corrupt"
        target = self._db_path.with_name(base)
        n = 0
        while target.exists():
            n += 1
            target = self._db_path.with_name(f"{base}.{n}")
        return target

    def quarantine(self) -> Path | None:
        """
        Move an unreadable database aside (`<name>.corrupt`, numbered if that
        name is taken) so the next save starts from a fresh file. Returns the
        new path, or None if nothing moved.
        """
        if not self._db_path.exists():
            return None
        target = self._quarantine_target()
        try:
            os.replace(self._db_path, target)
        except OSError as e:
            raise StorageError(f"Could not move broken task file {self._db_path} aside: {e}") from e
        # SQLite side files belong to the broken database.
        for suffix in ("-journal", "-wal", "-shm"):
            with contextlib.suppress(FileNotFoundError):
                os.remove(self._db_path.with_name(self._db_path.name + suffix))
        logger.warning("Moved unreadable task file to %s", target)
        return target
