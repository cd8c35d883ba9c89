# src/todo_manager/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..core.view import MemoryListView

logger = logging.getLogger(__name__)

ReadLine = Callable[[str], str]
WriteLine = Callable[[str], None]

YES_ANSWERS = {"y", "yes"}


class ConsoleDialogs:
    """
    Blocking dialogs on the terminal.

    - prompt: an empty answer keeps the default; Ctrl+C / Ctrl+D cancels
    - confirm: only y/yes confirms; Ctrl+C / Ctrl+D declines
    """

    def __init__(self, read: ReadLine = input, write: WriteLine = print) -> None:
        self._read = read
        self._write = write

    def alert(self, message: str) -> None:
        self._write(f"[!] {message}")

    def confirm(self, message: str) -> bool:
        try:
            answer = self._read(f"{message} [y/N] ")
        except (EOFError, KeyboardInterrupt):
            self._write("")
            return False
        return answer.strip().lower() in YES_ANSWERS

    def prompt(self, message: str, default: str = "") -> str | None:
        hint = f" [{default}]" if default else ""
        try:
            answer = self._read(f"{message}{hint} ")
        except (EOFError, KeyboardInterrupt):
            self._write("")
            return None
        return default if answer == "" else answer


@dataclass(slots=True)
class LineInput:
    """TaskInput holding the last line typed at the console prompt."""

    value: str = ""
    focused: bool = False

    def clear(self) -> None:
        self.value = ""

    def focus(self) -> None:
        # The console prompt is shown again right after the redraw.
        self.focused = True


def format_view(view: MemoryListView, title: str) -> str:
    lines = [f"{title}:"]
    position = 0
    for item in view.items:
        if item.is_placeholder:
            lines.append(f"  ({item.text})")
            continue
        position += 1
        lines.append(f"  {position}. {item.text}")
    if position:
        lines.append("  -- /edit <n>, /delete <n>, /help")
    return "\n".join(lines)


def handle_line(state: AppState, line: str) -> str | None:
    """
    Route one console line.

    Slash commands go to the registry; anything else is typed into the
    task input and submitted (same as pressing Enter in the input box).
    """
    reply = command_registry.handle(state, line)
    if reply is not None:
        return reply

    state.task_input.value = line
    state.manager.submit_input()
    return None


def run_console_loop(
    state: AppState,
    *,
    read: ReadLine = input,
    write: WriteLine = print,
) -> None:
    app_name = str(getattr(state.settings, "app_name", "todo"))
    logger.info("Console connector started.")
    write(f"[{app_name}] Type a task and press Enter to add it. Use /help for commands, /exit to quit.\n")

    while True:
        write(format_view(state.view, app_name))

        try:
            user_input = read("> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        reply = handle_line(state, user_input)
        if reply:
            write(reply)

    logger.info("Console connector finished.")
