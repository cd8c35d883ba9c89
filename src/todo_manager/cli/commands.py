# src/todo_manager/cli/commands.py

from __future__ import annotations

from collections.abc import Callable

from ..core.state import AppState
from ..core.view import ACTION_DELETE, ACTION_EDIT

CommandHandler = Callable[[AppState, list[str]], str]


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /edit, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string ("" when there is nothing to say) or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit (aliases: /quit).")
        lines.append("Any other text adds it as a new task.")
        return "\n".join(lines)


registry = CommandRegistry()


def resolve_task_id(state: AppState, ref: str) -> str | None:
    """
    Map a user reference to the id stored on a rendered row.

    Accepts the row number shown in the list (1-based) or a raw task id.
    """
    ref = ref.strip().rstrip(".")
    if ref.isascii() and ref.isdecimal():
        item = state.view.item_at(int(ref))
        return item.task_id if item is not None else None
    if state.manager.find_task(ref) is not None:
        return ref
    return None


def _item_command(action: str, usage: str) -> CommandHandler:
    def handler(state: AppState, args: list[str]) -> str:
        if len(args) != 1:
            return usage
        task_id = resolve_task_id(state, args[0])
        if task_id is None:
            return f"No task #{args[0]}."
        state.manager.dispatch(action, task_id)
        return ""

    return handler


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    state.manager.render_tasks()
    return ""


def cmd_add(state: AppState, args: list[str]) -> str:
    # Inline shorthand for the input box; blank text is reported by the manager.
    state.manager.add_task(" ".join(args))
    return ""


cmd_edit = _item_command(ACTION_EDIT, "Usage: /edit <number>")
cmd_delete = _item_command(ACTION_DELETE, "Usage: /delete <number>")


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Redraw the task list.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add <description>.")
registry.register("edit", cmd_edit, help_text="Edit a task: /edit <number>.", aliases=["e"])
registry.register(
    "delete", cmd_delete, help_text="Delete a task: /delete <number>.", aliases=["rm", "del"]
)
