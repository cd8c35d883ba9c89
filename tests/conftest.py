# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_manager.cli.bootstrap import create_initial_state
from todo_manager.core.manager import TaskManager
from todo_manager.core.state import AppState
from todo_manager.core.view import MemoryListView
from todo_manager.storage.memory_store import MemoryStore

from .fakes import RecordingTaskInput, ScriptedDialogs, counter_ids


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        storage_backend="json",
        storage_path=tmp_path / "storage.json",
        storage_key="tasks",
        on_corrupt="fail",
    )


@pytest.fixture()
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture()
def view() -> MemoryListView:
    return MemoryListView()


@pytest.fixture()
def dialogs() -> ScriptedDialogs:
    return ScriptedDialogs()


@pytest.fixture()
def task_input() -> RecordingTaskInput:
    return RecordingTaskInput()


@pytest.fixture()
def manager(store, view, dialogs, task_input) -> TaskManager:
    """Initialized manager over an empty in-memory store with ids t1, t2, ..."""
    m = TaskManager(
        store=store,
        view=view,
        dialogs=dialogs,
        task_input=task_input,
        id_factory=counter_ids(),
    )
    m.initialize()
    return m


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState from the real composition root, with scripted dialogs.

    NOTE: this uses the real JSON file store under tmp_path because
    persistence is part of what we want to test.
    """
    return create_initial_state(settings=settings, dialogs=ScriptedDialogs())
