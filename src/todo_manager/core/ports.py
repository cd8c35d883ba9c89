# src/todo_manager/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The manager depends on Protocols instead of concrete implementations.
This keeps the store and the display surface swappable and makes testing easier.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .view import ListItem


class KeyValueStore(Protocol):
    """String-to-string persistent store (local storage semantics)."""

    def get_item(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: str) -> None: ...
    # Local-storage parity; the manager only reads and overwrites its key.
    def remove_item(self, key: str) -> None: ...


class ListView(Protocol):
    """Display surface the manager renders into (cleared and rebuilt each time)."""

    def clear(self) -> None: ...
    def append(self, item: ListItem) -> None: ...


class Dialogs(Protocol):
    """
    Blocking user interactions.

    - alert: show a message, returns when dismissed
    - confirm: yes/no decision
    - prompt: collect text; None means the user cancelled
    """

    def alert(self, message: str) -> None: ...
    def confirm(self, message: str) -> bool: ...
    def prompt(self, message: str, default: str = "") -> str | None: ...


class TaskInput(Protocol):
    """Text entry affordance used to add tasks."""

    @property
    def value(self) -> str: ...

    def clear(self) -> None: ...
    def focus(self) -> None: ...
