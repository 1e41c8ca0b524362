# src/todo_keeper/tasks/debounce.py

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from ..core.ports import Timer, TimerFactory

logger = logging.getLogger(__name__)


def _daemon_timer(interval: float, function: Callable[[], None]) -> Timer:
    t = threading.Timer(interval, function)
    t.daemon = True
    return t


class DebouncedWriter:
    """
    Single-slot debounced writer.

    - schedule(payload) overwrites the pending slot and restarts the timer
    - when the timer fires with no newer schedule(), the latest payload is written
    - flush() writes the pending payload now (no-op if nothing is pending)
    - close() flushes; later payloads are written synchronously

    A superseded payload is never written, and a payload is never written after
    a newer one. Write errors are logged, not raised.

    Thread-safety:
    - the timer fires on its own thread
    - _lock guards the slot; _write_lock serializes taking a payload and writing it
    - lock order is always _write_lock, then _lock
    """

    def __init__(
        self,
        write: Callable[[str], None],
        *,
        delay_seconds: float = 0.1,
        timer_factory: TimerFactory | None = None,
    ) -> None:
        self._write = write
        self._delay = max(0.0, float(delay_seconds))
        self._timer_factory: TimerFactory = timer_factory or _daemon_timer

        self._lock = threading.Lock()
        self._write_lock = threading.Lock()
        self._pending: str | None = None
        self._timer: Timer | None = None
        # Bumped on every schedule(); a timer only flushes its own generation.
        self._generation = 0
        # Generation of the last payload handed to write().
        self._written_generation = 0
        self._closed = False

    @property
    def has_pending(self) -> bool:
        with self._lock:
            return self._pending is not None

    def schedule(self, payload: str) -> None:
        with self._lock:
            self._cancel_timer_locked()
            self._generation += 1
            generation = self._generation
            immediate = self._delay <= 0 or self._closed
            if immediate:
                self._pending = None
            else:
                self._pending = payload
                timer = self._timer_factory(self._delay, lambda: self._on_timer(generation))
                self._timer = timer

        if immediate:
            with self._write_lock:
                self._write_locked(generation, payload)
            return
        timer.start()

    def flush(self) -> None:
        with self._write_lock:
            with self._lock:
                self._cancel_timer_locked()
                payload = self._pending
                generation = self._generation
                self._pending = None
            if payload is not None:
                self._write_locked(generation, payload)

    def close(self) -> None:
        with self._lock:
            self._closed = True
        self.flush()

    # ---- internals ----

    def _cancel_timer_locked(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _on_timer(self, generation: int) -> None:
        with self._write_lock:
            with self._lock:
                if generation != self._generation or self._pending is None:
                    return
                payload = self._pending
                self._pending = None
                self._timer = None
            self._write_locked(generation, payload)

    def _write_locked(self, generation: int, payload: str) -> None:
        # Caller holds _write_lock.
        if generation <= self._written_generation:
            return
        self._written_generation = generation
        try:
            self._write(payload)
        except Exception:
            logger.exception("Debounced write failed (%d bytes)", len(payload))
