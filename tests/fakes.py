# tests/fakes.py

from __future__ import annotations

import itertools
from collections import deque
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field


class ScriptedDialogs:
    """
    Deterministic Dialogs for unit tests.

    - Captures every alert/confirm/prompt for assertions
    - Answers confirm/prompt from pre-loaded scripts (default: decline / cancel)
    """

    def __init__(
        self,
        confirms: Iterable[bool] = (),
        prompts: Iterable[str | None] = (),
    ) -> None:
        self.confirm_answers: deque[bool] = deque(confirms)
        self.prompt_answers: deque[str | None] = deque(prompts)
        self.alerts: list[str] = []
        self.confirms: list[str] = []
        self.prompts: list[tuple[str, str]] = []

    def alert(self, message: str) -> None:
        self.alerts.append(message)

    def confirm(self, message: str) -> bool:
        self.confirms.append(message)
        return self.confirm_answers.popleft() if self.confirm_answers else False

    def prompt(self, message: str, default: str = "") -> str | None:
        self.prompts.append((message, default))
        return self.prompt_answers.popleft() if self.prompt_answers else None


@dataclass(slots=True)
class RecordingTaskInput:
    value: str = ""
    clears: int = 0
    focuses: int = 0

    def clear(self) -> None:
        self.value = ""
        self.clears += 1

    def focus(self) -> None:
        self.focuses += 1


def counter_ids(prefix: str = "t") -> Callable[[], str]:
    """Predictable id factory: t1, t2, ..."""
    counter = itertools.count(1)
    return lambda: f"{prefix}{next(counter)}"


@dataclass(slots=True)
class ScriptedConsole:
    """read/write pair for the console connector; EOF once the script runs out."""

    lines: deque[str] = field(default_factory=deque)
    output: list[str] = field(default_factory=list)
    asked: list[str] = field(default_factory=list)

    @classmethod
    def of(cls, *lines: str) -> ScriptedConsole:
        return cls(lines=deque(lines))

    def read(self, prompt: str) -> str:
        self.asked.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.popleft()

    def write(self, text: str) -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)
