# tests/fakes.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field


class FakeKeyValueStore:
    """
    In-memory KeyValueStore that records every call.

    - reads/writes: the keys passed to get()/set(), in order
    - fail_reads / fail_writes: raise on the corresponding call
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})
        self.reads: list[str] = []
        self.writes: list[tuple[str, str]] = []
        self.fail_reads = False
        self.fail_writes = False

    def get(self, key: str) -> str | None:
        self.reads.append(key)
        if self.fail_reads:
            raise OSError("read failed")
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise OSError("write failed")
        self.writes.append((key, value))
        self.data[key] = value


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@dataclass(slots=True)
class ManualTimer:
    interval: float
    function: Callable[[], None]
    started: bool = False
    cancelled: bool = False

    def start(self) -> None:
        self.started = True

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        # Mirrors threading.Timer: a cancelled timer never runs.
        if self.started and not self.cancelled:
            self.function()


@dataclass(slots=True)
class ManualTimerFactory:
    """TimerFactory whose timers only fire when the test says so."""

    timers: list[ManualTimer] = field(default_factory=list)

    def __call__(self, interval: float, function: Callable[[], None]) -> ManualTimer:
        t = ManualTimer(interval=interval, function=function)
        self.timers.append(t)
        return t

    @property
    def last(self) -> ManualTimer:
        return self.timers[-1]
