# src/todo_manager/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .manager import TaskManager
from .ports import Dialogs, KeyValueStore, TaskInput
from .view import MemoryListView


@dataclass
class AppState:
    # Settings object (config.Settings or a test stand-in).
    settings: object

    store: KeyValueStore
    view: MemoryListView
    dialogs: Dialogs
    task_input: TaskInput
    manager: TaskManager
