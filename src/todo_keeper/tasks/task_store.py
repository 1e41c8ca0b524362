# src/todo_keeper/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace

from ..core.ports import KeyValueStore, TimerFactory
from .debounce import DebouncedWriter
from .task_codec import TaskDecodeError, decode_tasks, encode_tasks
from .task_models import Task, TaskStats

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "todos"


class TaskListStore:
    """
    Sole owner of the task list.

    - the list is newest-first; add() prepends, toggle/delete keep order
    - the key-value store is read exactly once, here in __init__
    - every successful mutation hands the full encoded list to a debounced writer
    - malformed stored data is logged and replaced by an empty list, never raised

    Ids come from a counter seeded past the largest restored id, so they are
    unique and strictly increasing in creation order.
    """

    def __init__(
        self,
        kv: KeyValueStore,
        *,
        key: str = DEFAULT_STORAGE_KEY,
        debounce_seconds: float = 0.1,
        timer_factory: TimerFactory | None = None,
        on_completed: Callable[[int], None] | None = None,
    ) -> None:
        self._kv = kv
        self._key = key
        self._on_completed = on_completed
        self._tasks: list[Task] = self._load()
        self._next_id = max((t.id for t in self._tasks), default=0) + 1
        self._writer = DebouncedWriter(
            self._write,
            delay_seconds=debounce_seconds,
            timer_factory=timer_factory,
        )
        logger.info("TaskListStore ready key=%s total=%d", self._key, len(self._tasks))

    # ---- persistence ----

    def _load(self) -> list[Task]:
        try:
            raw = self._kv.get(self._key)
        except Exception:
            logger.exception("Failed to read tasks from storage key=%s; starting empty", self._key)
            return []

        if raw is None:
            return []

        try:
            return decode_tasks(raw)
        except TaskDecodeError as e:
            logger.warning("Failed to parse stored tasks key=%s: %s; starting empty", self._key, e)
            return []

    def _write(self, payload: str) -> None:
        self._kv.set(self._key, payload)

    def _persist(self) -> None:
        self._writer.schedule(encode_tasks(self._tasks))

    def flush(self) -> None:
        """Write any pending change now."""
        self._writer.flush()

    def close(self) -> None:
        """Flush pending changes; later mutations are written synchronously."""
        self._writer.close()

    # ---- read surface ----

    @property
    def key(self) -> str:
        return self._key

    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks)

    @property
    def stats(self) -> TaskStats:
        return TaskStats.from_tasks(self._tasks)

    def get(self, task_id: int) -> Task | None:
        for t in self._tasks:
            if t.id == task_id:
                return t
        return None

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- mutations ----

    def add(self, raw_text: str) -> Task | None:
        text = (raw_text or "").strip()
        if not text:
            return None

        task = Task(id=self._next_id, text=text, completed=False)
        self._next_id += 1
        self._tasks.insert(0, task)
        logger.debug("Task added id=%s", task.id)
        self._persist()
        return task

    def toggle(self, task_id: int) -> Task | None:
        for i, t in enumerate(self._tasks):
            if t.id != task_id:
                continue

            updated = replace(t, completed=not t.completed)
            self._tasks[i] = updated
            logger.debug("Task toggled id=%s completed=%s", task_id, updated.completed)
            self._persist()

            if updated.completed and self._on_completed is not None:
                try:
                    self._on_completed(task_id)
                except Exception:
                    logger.exception("on_completed callback failed task_id=%s", task_id)
            return updated

        logger.debug("toggle ignored: no task id=%s", task_id)
        return None

    def delete(self, task_id: int) -> bool:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                del self._tasks[i]
                logger.debug("Task deleted id=%s", task_id)
                self._persist()
                return True

        logger.debug("delete ignored: no task id=%s", task_id)
        return False
