# src/todo_manager/storage/file_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class JsonFileStore:
    """
    Key-value store kept in one JSON object on disk.

    - the file is read once, on first access
    - every write rewrites the whole file (tmp file + os.replace)
    - a missing file is an empty store
    """

    def __init__(self, path: str | Path = "storage.json") -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._items: dict[str, str] | None = None

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, str]:
        if self._items is not None:
            return self._items

        if not self._path.exists():
            self._items = {}
            return self._items

        try:
            data = json.loads(self._path.read_text("utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"{self._path} is not a valid JSON key-value file: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"{self._path} must hold a JSON object, got {type(data).__name__}")

        bad_keys = [key for key, value in data.items() if not isinstance(value, str)]
        if bad_keys:
            raise ValueError(f"{self._path} holds non-string values for keys: {', '.join(bad_keys)}")
        items: dict[str, str] = data
        self._items = items
        logger.debug("Loaded %d keys from %s", len(items), self._path)
        return items

    def _flush(self) -> None:
        items = self._load()
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(json.dumps(items, ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, self._path)
        with contextlib.suppress(OSError):
            # Task text is personal data; keep the file private on disk.
            os.chmod(self._path, 0o600)

    def get_item(self, key: str) -> str | None:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        self._load()[key] = value
        self._flush()

    def remove_item(self, key: str) -> None:
        items = self._load()
        if key not in items:
            return
        del items[key]
        self._flush()
