# src/todo_keeper/tasks/celebration.py

from __future__ import annotations

import time
from collections.abc import Callable


class CelebrationSignal:
    """
    Transient marker: which task most recently became completed.

    The marker expires on its own after duration_seconds; readers see None
    afterwards. Not persisted.
    """

    def __init__(
        self,
        *,
        duration_seconds: float = 0.6,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._duration = max(0.0, float(duration_seconds))
        self._clock = clock
        self._task_id: int | None = None
        self._expires_at = 0.0

    def trigger(self, task_id: int) -> None:
        self._task_id = int(task_id)
        self._expires_at = self._clock() + self._duration

    def clear(self) -> None:
        self._task_id = None
        self._expires_at = 0.0

    @property
    def active_id(self) -> int | None:
        if self._task_id is None:
            return None
        if self._clock() >= self._expires_at:
            self.clear()
            return None
        return self._task_id

    def is_celebrating(self, task_id: int) -> bool:
        return self.active_id == task_id
