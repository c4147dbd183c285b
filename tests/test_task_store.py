# tests/test_task_store.py

from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from rem_tracker.core.errors import StorageError
from rem_tracker.tasks.task_models import Deadline, Event, Todo
from rem_tracker.tasks.task_store import TaskStore


def test_missing_file_loads_empty(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "nested" / "tasks.sqlite3")
    assert store.load() == []
    assert not store.path.exists()


def test_save_load_roundtrip_preserves_order_and_fields(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "tasks.sqlite3")
    tasks = [
        Todo("read book"),
        Deadline("return book", by="02 Dec 2023", is_done=True),
        Event("meeting", at="Mon 2-4pm"),
        Todo("a | pipe, and 'quotes'"),
    ]
    store.save(tasks)

    loaded = TaskStore(tmp_path / "tasks.sqlite3").load()
    assert [t.as_record() for t in loaded] == [t.as_record() for t in tasks]
    assert [str(t) for t in loaded] == [str(t) for t in tasks]


def test_save_rewrites_whole_list(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "tasks.sqlite3")
    store.save([Todo("a"), Todo("b"), Todo("c")])
    store.save([Todo("c")])
    assert [t.description for t in store.load()] == ["c"]

    store.save([])
    assert store.load() == []


def test_corrupt_file_raises_storage_error(tmp_path: Path) -> None:
    db = tmp_path / "tasks.sqlite3"
    db.write_bytes(b"this is not a sqlite database " * 64)
    store = TaskStore(db)

    with pytest.raises(StorageError, match="unreadable"):
        store.load()


def test_invalid_row_raises_storage_error(tmp_path: Path) -> None:
    db = tmp_path / "tasks.sqlite3"
    store = TaskStore(db)
    store.save([Todo("ok")])

    conn = sqlite3.connect(db)
    with conn:
        conn.execute("INSERT INTO tasks(position, kind, description, is_done, extra) VALUES (2, 'chore', 'x', 0, NULL)")
    conn.close()

    with pytest.raises(StorageError, match="invalid entry"):
        store.load()


def test_quarantine_moves_broken_file_aside(tmp_path: Path) -> None:
    db = tmp_path / "tasks.sqlite3"
    db.write_bytes(b"garbage" * 200)
    store = TaskStore(db)

    moved = store.quarantine()
    assert moved == tmp_path / "tasks.sqlite3.corrupt"
    assert moved.exists()
    assert not db.exists()

    store.save([Todo("fresh start")])
    assert [t.description for t in store.load()] == ["fresh start"]


def test_quarantine_twice_keeps_both_backups(tmp_path: Path) -> None:
    db = tmp_path / "tasks.sqlite3"
    store = TaskStore(db)

    db.write_bytes(b"FIRST-BROKEN-DATA" * 100)
    first = store.quarantine()
    db.write_bytes(b"SECOND-BROKEN-DATA" * 100)
    second = store.quarantine()

    assert first == tmp_path / "tasks.sqlite3.corrupt"
    assert second == tmp_path / "tasks.sqlite3.corrupt.1"
    assert first.read_bytes().startswith(b"FIRST-BROKEN-DATA")
    assert second.read_bytes().startswith(b"SECOND-BROKEN-DATA")
    assert not db.exists()


def test_quarantine_without_file_is_noop(tmp_path: Path) -> None:
    assert TaskStore(tmp_path / "none.sqlite3").quarantine() is None


def test_save_to_unwritable_location_raises(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory")
    store = TaskStore(blocker / "tasks.sqlite3")

    with pytest.raises(StorageError):
        store.save([Todo("a")])
