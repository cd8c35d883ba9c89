# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo_manager.config import Settings

ALL_VARS = (
    "TODO_APP_NAME",
    "TODO_LOG_LEVEL",
    "TODO_DATA_DIR",
    "TODO_STORAGE_BACKEND",
    "TODO_STORAGE_PATH",
    "TODO_STORAGE_KEY",
    "TODO_ON_CORRUPT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ALL_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.app_name == "todo"
    assert s.log_level == "WARNING"
    assert s.data_dir == Path(".local/todo")
    assert s.storage_backend == "json"
    assert s.storage_path == Path(".local/todo/storage.json")
    assert s.storage_key == "tasks"
    assert s.on_corrupt == "fail"


def test_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODO_APP_NAME", "chores")
    monkeypatch.setenv("TODO_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TODO_STORAGE_BACKEND", "SQLite")
    monkeypatch.setenv("TODO_STORAGE_KEY", "home")
    monkeypatch.setenv("TODO_ON_CORRUPT", "reset")

    s = Settings.from_env()
    assert s.app_name == "chores"
    assert s.storage_backend == "sqlite"
    assert s.storage_path == tmp_path / "storage.sqlite3"
    assert s.storage_key == "home"
    assert s.on_corrupt == "reset"


def test_explicit_storage_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODO_STORAGE_PATH", str(tmp_path / "mine.json"))
    assert Settings.from_env().storage_path == tmp_path / "mine.json"


def test_invalid_choices_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODO_STORAGE_BACKEND", "redis")
    monkeypatch.setenv("TODO_ON_CORRUPT", "ignore")
    s = Settings.from_env()
    assert s.storage_backend == "json"
    assert s.on_corrupt == "fail"


def test_blank_values_use_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODO_APP_NAME", "  ")
    monkeypatch.setenv("TODO_STORAGE_KEY", "")
    s = Settings.from_env()
    assert s.app_name == "todo"
    assert s.storage_key == "tasks"
