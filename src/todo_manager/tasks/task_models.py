# src/todo_manager/tasks/task_models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass, field


def new_task_id() -> str:
    """Random 128-bit id; safe under rapid successive creation."""
    return uuid.uuid4().hex


@dataclass(slots=True)
class Task:
    """
    One to-do item.

    Notes:
    - description is stored as given; trimming/validation is done by the manager.
    - completed is kept for persistence compatibility; nothing toggles it yet.
    """

    description: str
    id: str = field(default_factory=new_task_id)
    completed: bool = False
