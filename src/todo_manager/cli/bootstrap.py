# src/todo_manager/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- picks the key-value store backend,
- wires store, view, dialogs and input into one TaskManager,
- performs the manager's initial load + render.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_connector import ConsoleDialogs, LineInput
from ..core.manager import TaskManager
from ..core.ports import Dialogs, KeyValueStore
from ..core.state import AppState
from ..core.view import MemoryListView
from ..storage.file_store import JsonFileStore
from ..storage.memory_store import MemoryStore
from ..storage.sqlite_store import SqliteStore

logger = logging.getLogger(__name__)


def create_store(settings) -> KeyValueStore:
    backend = getattr(settings, "storage_backend", "json")
    if backend == "memory":
        logger.info("Using in-memory store; tasks will not survive a restart.")
        return MemoryStore()
    if backend == "sqlite":
        return SqliteStore(settings.storage_path)
    if backend == "json":
        logger.info("Using JSON store at %s", settings.storage_path)
        return JsonFileStore(settings.storage_path)
    raise ValueError(f"Unknown storage backend: {backend!r}")


def create_initial_state(*, settings=None, dialogs: Dialogs | None = None) -> AppState:
    """
    Build the AppState and run the manager's initial load + render.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().

    Raises ValueError (TaskDataError included) when stored data is malformed
    and settings.on_corrupt is "fail".
    """
    if settings is None:
        settings = get_settings()

    store = create_store(settings)
    view = MemoryListView()
    task_input = LineInput()
    if dialogs is None:
        dialogs = ConsoleDialogs()

    manager = TaskManager(
        store=store,
        view=view,
        dialogs=dialogs,
        task_input=task_input,
        storage_key=getattr(settings, "storage_key", "tasks"),
        on_corrupt=getattr(settings, "on_corrupt", "fail"),
    )
    manager.initialize()

    return AppState(
        settings=settings,
        store=store,
        view=view,
        dialogs=dialogs,
        task_input=task_input,
        manager=manager,
    )
