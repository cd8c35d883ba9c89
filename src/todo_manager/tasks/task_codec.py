# src/todo_manager/tasks/task_codec.py

from __future__ import annotations

"""
JSON codec for the whole task list.

Layout: a JSON array of {"id": str, "description": str, "completed": bool}.
The list is always written and read as a whole.
"""

import json
from collections.abc import Iterable
from typing import Any

from .task_models import Task


class TaskDataError(ValueError):
    """Persisted task payload cannot be turned back into tasks."""


def task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "description": task.description,
        "completed": task.completed,
    }


def task_from_dict(raw: Any) -> Task:
    if not isinstance(raw, dict):
        raise TaskDataError(f"task entry must be an object, got {type(raw).__name__}")

    task_id = raw.get("id")
    description = raw.get("description")
    if not isinstance(task_id, str):
        raise TaskDataError(f"task entry has no string id: {raw!r}")
    if not isinstance(description, str):
        raise TaskDataError(f"task {task_id} has no string description")

    return Task(
        description=description,
        id=task_id,
        completed=bool(raw.get("completed", False)),
    )


def serialize_tasks(tasks: Iterable[Task]) -> str:
    return json.dumps([task_to_dict(t) for t in tasks], ensure_ascii=False)


def deserialize_tasks(payload: str) -> list[Task]:
    """
    Parse a serialized list.

    Raises TaskDataError for invalid JSON, a non-array top level,
    or entries missing a string id/description.
    """
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise TaskDataError(f"invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise TaskDataError(f"expected a JSON array, got {type(data).__name__}")

    return [task_from_dict(item) for item in data]
