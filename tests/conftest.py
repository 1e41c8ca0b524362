# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_keeper.cli.bootstrap import create_initial_state
from todo_keeper.core.state import AppState

from .fakes import FakeKeyValueStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic. Debounce is disabled so
    every mutation is written synchronously.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        console_enabled=False,
        data_dir=tmp_path,
        storage_path=tmp_path / "storage.sqlite3",
        storage_key="todos",
        save_debounce_seconds=0.0,
        celebration_seconds=0.6,
    )


@pytest.fixture()
def kv() -> FakeKeyValueStore:
    return FakeKeyValueStore()


@pytest.fixture()
def state(settings: SimpleNamespace, kv: FakeKeyValueStore) -> AppState:
    """AppState wired with an in-memory key-value store."""
    return create_initial_state(settings=settings, kv=kv)
