# tests/test_kv_store.py

from __future__ import annotations

from pathlib import Path

from todo_keeper.cli.bootstrap import create_initial_state, shutdown_state
from todo_keeper.storage.kv_store import MemoryKeyValueStore, SqliteKeyValueStore


def test_sqlite_kv_get_set_delete(tmp_path: Path) -> None:
    kv = SqliteKeyValueStore(tmp_path / "nested" / "storage.sqlite3")

    assert kv.get("todos") is None
    kv.set("todos", "[]")
    kv.set("todos", '[{"id": 1, "text": "a", "completed": false}]')
    assert kv.get("todos") == '[{"id": 1, "text": "a", "completed": false}]'

    kv.delete("todos")
    assert kv.get("todos") is None


def test_sqlite_kv_persists_across_instances(tmp_path: Path) -> None:
    db = tmp_path / "storage.sqlite3"
    SqliteKeyValueStore(db).set("k", "v")

    assert SqliteKeyValueStore(db).get("k") == "v"


def test_memory_kv() -> None:
    kv = MemoryKeyValueStore({"a": "1"})
    assert kv.get("a") == "1"
    kv.set("b", "2")
    kv.delete("a")
    assert kv.get("a") is None
    assert kv.get("b") == "2"


def test_bootstrap_with_sqlite_survives_restart(settings) -> None:
    settings.save_debounce_seconds = 10.0

    state = create_initial_state(settings=settings)
    t = state.store.add("Write report")
    assert t is not None
    state.store.toggle(t.id)
    shutdown_state(state)

    assert settings.storage_path.exists()

    restarted = create_initial_state(settings=settings)
    assert [(x.id, x.text, x.completed) for x in restarted.store.tasks] == [
        (t.id, "Write report", True)
    ]
    assert restarted.store.stats.is_all_completed is True
