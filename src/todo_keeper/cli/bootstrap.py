# src/todo_keeper/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the storage backend, celebration signal and TaskListStore into AppState.
"""

from __future__ import annotations

import contextlib
import logging
import os

from ..config import get_settings
from ..core.ports import KeyValueStore
from ..core.state import AppState
from ..storage.kv_store import SqliteKeyValueStore
from ..tasks.celebration import CelebrationSignal
from ..tasks.task_store import TaskListStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, kv: KeyValueStore | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Settings and the key-value backend are injectable for tests.
    If settings is None, falls back to get_settings().
    If kv is None, a SQLite store at settings.storage_path is used.
    """
    if settings is None:
        settings = get_settings()

    if kv is None:
        _ensure_local_dirs(settings)
        sqlite_kv = SqliteKeyValueStore(settings.storage_path)
        with contextlib.suppress(Exception):
            # Best-effort: the task list is personal data, keep the file private on disk.
            os.chmod(sqlite_kv.db_path, 0o600)
        kv = sqlite_kv

    celebration = CelebrationSignal(duration_seconds=settings.celebration_seconds)
    store = TaskListStore(
        kv,
        key=settings.storage_key,
        debounce_seconds=settings.save_debounce_seconds,
        on_completed=celebration.trigger,
    )
    return AppState(settings=settings, store=store, celebration=celebration)


def shutdown_state(state: AppState) -> None:
    """Best-effort shutdown: persist any pending change (no exceptions escape)."""
    try:
        state.store.close()
        logger.info("Saved %d tasks under key=%s", len(state.store), state.store.key)
    except Exception:
        logger.exception("Failed to flush task list on shutdown.")
