# src/todo_manager/storage/memory_store.py

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class MemoryStore:
    """Non-persistent store (TODO_STORAGE_BACKEND=memory, tests)."""

    items: dict[str, str] = field(default_factory=dict)
    writes: int = 0

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value
        self.writes += 1

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)
