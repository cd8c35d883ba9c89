# src/todo_manager/core/view.py

from __future__ import annotations

from dataclasses import dataclass, field

ACTION_EDIT = "edit"
ACTION_DELETE = "delete"
TASK_ACTIONS: tuple[str, ...] = (ACTION_EDIT, ACTION_DELETE)

EMPTY_PLACEHOLDER = "No tasks yet! Add a new one."


@dataclass(frozen=True, slots=True)
class ListItem:
    """
    One rendered row.

    task_id is the stored identifier attribute front ends read back
    when an action is activated. Placeholder rows have no id and no actions.
    """

    text: str
    task_id: str | None = None
    actions: tuple[str, ...] = ()

    @property
    def is_placeholder(self) -> bool:
        return self.task_id is None


def task_item(task_id: str, description: str) -> ListItem:
    return ListItem(text=description, task_id=task_id, actions=TASK_ACTIONS)


def placeholder_item() -> ListItem:
    return ListItem(text=EMPTY_PLACEHOLDER)


@dataclass(slots=True)
class MemoryListView:
    """ListView that keeps rendered rows in memory (console front end + tests)."""

    items: list[ListItem] = field(default_factory=list)
    render_count: int = 0

    def clear(self) -> None:
        self.items.clear()
        self.render_count += 1

    def append(self, item: ListItem) -> None:
        self.items.append(item)

    def task_items(self) -> list[ListItem]:
        return [i for i in self.items if not i.is_placeholder]

    def placeholders(self) -> list[ListItem]:
        return [i for i in self.items if i.is_placeholder]

    def item_at(self, position: int) -> ListItem | None:
        """1-based lookup among task rows (placeholder rows are not addressable)."""
        rows = self.task_items()
        if position < 1 or position > len(rows):
            return None
        return rows[position - 1]
