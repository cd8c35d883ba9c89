# tests/test_task_models.py

from __future__ import annotations

from todo_manager.tasks.task_models import Task, new_task_id


def test_task_defaults() -> None:
    task = Task("buy milk")
    assert task.description == "buy milk"
    assert task.completed is False
    assert isinstance(task.id, str) and task.id


def test_task_keeps_explicit_id_and_raw_text() -> None:
    task = Task("  padded  ", id="abc")
    assert task.id == "abc"
    # Trimming and validation belong to the manager, not the record.
    assert task.description == "  padded  "
    assert Task("").description == ""


def test_default_ids_are_unique_under_rapid_creation() -> None:
    ids = {Task("x").id for _ in range(2000)}
    assert len(ids) == 2000


def test_new_task_id_is_hex() -> None:
    tid = new_task_id()
    assert len(tid) == 32
    int(tid, 16)
