# src/todo_manager/core/manager.py

from __future__ import annotations

"""
Task manager: the single owner of the task list.

Every mutation is followed, synchronously and unconditionally, by:
1) persisting the whole list to the key-value store,
2) clearing and rebuilding the list view from scratch.

No diffing and no batching: the view and the store can never drift from the
in-memory list (as long as the store write succeeds).
"""

import logging
from collections.abc import Callable

from ..tasks.task_codec import TaskDataError, deserialize_tasks, serialize_tasks
from ..tasks.task_models import Task, new_task_id
from .ports import Dialogs, KeyValueStore, ListView, TaskInput
from .view import ACTION_DELETE, ACTION_EDIT, placeholder_item, task_item

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "tasks"

ON_CORRUPT_FAIL = "fail"
ON_CORRUPT_RESET = "reset"
ON_CORRUPT_CHOICES = (ON_CORRUPT_FAIL, ON_CORRUPT_RESET)

MSG_EMPTY_ON_ADD = "Task description cannot be empty!"
MSG_EMPTY_ON_EDIT = "Description cannot be empty. The task was not changed."
MSG_CONFIRM_DELETE = "Are you sure you want to delete this task?"
MSG_EDIT_PROMPT = "Edit task:"


class TaskManager:
    def __init__(
        self,
        *,
        store: KeyValueStore,
        view: ListView,
        dialogs: Dialogs,
        task_input: TaskInput | None = None,
        storage_key: str = DEFAULT_STORAGE_KEY,
        on_corrupt: str = ON_CORRUPT_FAIL,
        id_factory: Callable[[], str] = new_task_id,
    ) -> None:
        if on_corrupt not in ON_CORRUPT_CHOICES:
            raise ValueError(f"on_corrupt must be one of {ON_CORRUPT_CHOICES}, got {on_corrupt!r}")

        self._store = store
        self._view = view
        self._dialogs = dialogs
        self._task_input = task_input
        self._key = storage_key
        self._on_corrupt = on_corrupt
        self._id_factory = id_factory

        self.tasks: list[Task] = []

    # ---- lifecycle ----

    def initialize(self) -> None:
        """Load persisted tasks and draw the first frame."""
        self.tasks = self.load_tasks()
        logger.info("TaskManager ready key=%s total=%d", self._key, len(self.tasks))
        self.render_tasks()

    # ---- persistence ----

    def load_tasks(self) -> list[Task]:
        raw = self._store.get_item(self._key)
        if raw is None:
            return []
        try:
            return deserialize_tasks(raw)
        except TaskDataError:
            if self._on_corrupt != ON_CORRUPT_RESET:
                raise
            backup_key = f"{self._key}.corrupt"
            self._store.set_item(backup_key, raw)
            logger.warning(
                "Stored tasks under key=%s are malformed; copied to %s and starting empty.",
                self._key,
                backup_key,
                exc_info=True,
            )
            return []

    def save_tasks(self) -> None:
        self._store.set_item(self._key, serialize_tasks(self.tasks))

    def _commit(self) -> None:
        self.save_tasks()
        self.render_tasks()

    # ---- queries ----

    def find_task(self, task_id: str) -> Task | None:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    # ---- operations ----

    def add_task(self, description: str) -> Task | None:
        """Append a new task; alerts and returns None if the text is blank."""
        text = description.strip()
        if not text:
            self._dialogs.alert(MSG_EMPTY_ON_ADD)
            return None

        task = Task(description=text, id=self._id_factory())
        self.tasks.append(task)
        logger.debug("Task added id=%s", task.id)
        self._commit()
        return task

    def submit_input(self) -> Task | None:
        """The "add" affordance: read the input, add, then clear and refocus it."""
        if self._task_input is None:
            raise RuntimeError("TaskManager has no task input bound")

        task = self.add_task(self._task_input.value)
        if task is not None:
            self._task_input.clear()
            self._task_input.focus()
        return task

    def delete_task(self, task_id: str) -> bool:
        """Drop every task with this id. Persists and re-renders even when nothing matched."""
        before = len(self.tasks)
        self.tasks = [t for t in self.tasks if t.id != task_id]
        removed = len(self.tasks) != before
        logger.debug("Task delete id=%s removed=%s", task_id, removed)
        self._commit()
        return removed

    def edit_task(self, task_id: str, new_description: str) -> bool:
        task = self.find_task(task_id)
        if task is None:
            logger.debug("Task edit ignored, id=%s not found", task_id)
            return False

        text = new_description.strip()
        if not text:
            self._dialogs.alert(MSG_EMPTY_ON_EDIT)
            return False

        task.description = text
        logger.debug("Task edited id=%s", task_id)
        self._commit()
        return True

    # ---- user-facing flows (dialog gated) ----

    def request_delete(self, task_id: str) -> bool:
        if not self._dialogs.confirm(MSG_CONFIRM_DELETE):
            return False
        return self.delete_task(task_id)

    def request_edit(self, task_id: str) -> bool:
        task = self.find_task(task_id)
        if task is None:
            return False

        new_description = self._dialogs.prompt(MSG_EDIT_PROMPT, default=task.description)
        if new_description is None:
            return False
        return self.edit_task(task_id, new_description)

    def dispatch(self, action: str, task_id: str | None) -> bool:
        """
        Delegated item handler: maps (action, stored item id) to an operation.

        Unknown actions and rows without an id (placeholder) are ignored.
        """
        if not task_id:
            return False
        if action == ACTION_DELETE:
            return self.request_delete(task_id)
        if action == ACTION_EDIT:
            return self.request_edit(task_id)
        logger.debug("Unknown item action=%s id=%s", action, task_id)
        return False

    # ---- rendering ----

    def render_tasks(self) -> None:
        self._view.clear()

        if not self.tasks:
            self._view.append(placeholder_item())
            return

        for task in self.tasks:
            self._view.append(task_item(task.id, task.description))
