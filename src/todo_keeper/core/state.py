# src/todo_keeper/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.celebration import CelebrationSignal
from ..tasks.task_store import TaskListStore


@dataclass
class AppState:
    """
    Per-session application state.

    Built once by cli.bootstrap.create_initial_state() and passed to connectors
    and command handlers. The store is the only mutation surface for tasks.
    """

    # Settings (or a test stand-in with the same attributes).
    settings: Any

    store: TaskListStore
    celebration: CelebrationSignal
