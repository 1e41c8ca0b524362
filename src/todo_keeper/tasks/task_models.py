# src/todo_keeper/tasks/task_models.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    text: str
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "text": self.text, "completed": self.completed}


@dataclass(frozen=True, slots=True)
class TaskStats:
    """
    Aggregate counts derived from a task list.

    Always built from the live list via from_tasks(); never stored or patched.
    """

    total: int
    completed: int
    pending: int
    progress_percentage: float
    is_all_completed: bool

    @classmethod
    def from_tasks(cls, tasks: Iterable[Task]) -> TaskStats:
        total = 0
        completed = 0
        for t in tasks:
            total += 1
            if t.completed:
                completed += 1

        progress = (completed / total) * 100 if total > 0 else 0.0
        return cls(
            total=total,
            completed=completed,
            pending=total - completed,
            progress_percentage=progress,
            is_all_completed=total > 0 and completed == total,
        )
