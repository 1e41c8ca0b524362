# src/todo_keeper/tasks/task_codec.py

"""
JSON codec for the persisted task list.

Wire format: a JSON array of {"id": int, "text": str, "completed": bool}
objects, in list order (newest first). Unknown keys in a record are ignored
so older payloads carrying extra fields (e.g. "createdAt") still load.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from .task_models import Task


class TaskDecodeError(ValueError):
    """Raised when a stored payload is not a valid task list."""


def encode_tasks(tasks: Iterable[Task]) -> str:
    return json.dumps([t.to_dict() for t in tasks], ensure_ascii=False)


def _record_to_task(index: int, raw: Any) -> Task:
    if not isinstance(raw, dict):
        raise TaskDecodeError(f"item {index}: expected an object, got {type(raw).__name__}")

    task_id = raw.get("id")
    # bool is an int subclass; true/false is not a valid id.
    if not isinstance(task_id, int) or isinstance(task_id, bool):
        raise TaskDecodeError(f"item {index}: 'id' must be an integer")

    text = raw.get("text")
    if not isinstance(text, str):
        raise TaskDecodeError(f"item {index}: 'text' must be a string")
    text = text.strip()
    if not text:
        raise TaskDecodeError(f"item {index}: 'text' is empty")

    completed = raw.get("completed")
    if not isinstance(completed, bool):
        raise TaskDecodeError(f"item {index}: 'completed' must be a boolean")

    return Task(id=task_id, text=text, completed=completed)


def decode_tasks(payload: str) -> list[Task]:
    """
    Parse a stored payload back into a task list.

    Raises TaskDecodeError on invalid JSON, a non-array top level, an invalid
    record or duplicate ids.
    """
    try:
        data = json.loads(payload)
    except (TypeError, ValueError) as e:
        raise TaskDecodeError(f"invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise TaskDecodeError(f"expected a JSON array, got {type(data).__name__}")

    tasks: list[Task] = []
    seen: set[int] = set()
    for i, raw in enumerate(data):
        task = _record_to_task(i, raw)
        if task.id in seen:
            raise TaskDecodeError(f"item {i}: duplicate id {task.id}")
        seen.add(task.id)
        tasks.append(task)
    return tasks
