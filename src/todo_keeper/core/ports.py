# src/todo_keeper/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The store depends on Protocols instead of concrete implementations.
This keeps storage backends and timers swappable and makes testing easier.
"""

from typing import Callable, Protocol


class KeyValueStore(Protocol):
    """
    Durable string key-value store.

    Both calls are synchronous from the caller's perspective.
    get() returns None when the key is absent.
    """

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class Timer(Protocol):
    def start(self) -> None: ...
    def cancel(self) -> None: ...


# Same call shape as threading.Timer(interval, function).
TimerFactory = Callable[[float, Callable[[], None]], Timer]
