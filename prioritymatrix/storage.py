"""
Priority Matrix Storage — key-value persistence for tasks and settings.

Two fixed keys hold the whole state:
  TASKS_KEY    → JSON array of task objects (camelCase)
  SETTINGS_KEY → JSON object {"impactThreshold": .., "urgencyThreshold": ..}

Reads never raise: a missing, unparseable or wrongly-shaped value falls back
to an empty task list / default settings. Writes to a file-backed store
raise StorageError on I/O failure.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol, Union

from pydantic import ValidationError as PydanticValidationError

from prioritymatrix.constants import SETTINGS_KEY, TASKS_KEY
from prioritymatrix.engine.errors import StorageError
from prioritymatrix.engine.logging import log, log_storage_fallback
from prioritymatrix.records.settings import Settings
from prioritymatrix.records.task import Task

logger = logging.getLogger("prioritymatrix.storage")


class KeyValueStore(Protocol):
    """String-to-string store with browser local-storage semantics."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    """In-process store. Used by tests and throwaway boards."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def __contains__(self, key: str) -> bool:
        return key in self._data


class JsonFileStore:
    """
    Store backed by a single JSON document mapping key → raw string.

    An unreadable document is treated as empty; the next write replaces it.
    Writes go to a sibling ".tmp" file that is then moved over the document.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> Dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Store file %s unreadable, treating as empty: %s", self._path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Store file %s is not a JSON object, treating as empty", self._path)
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            # Readers see either the old document or the new one
            os.replace(tmp_path, self._path)
        except OSError as e:
            raise StorageError(
                f"Could not write '{key}' to {self._path}: {e}",
                key=key,
                path=str(self._path),
            ) from e


def _fallback(key: str, reason: str) -> None:
    logger.warning("Falling back to defaults for '%s': %s", key, reason)
    log(log_storage_fallback(key, reason))


def load_tasks(store: KeyValueStore) -> List[Task]:
    """
    Load the task list. Missing or corrupt content yields [].

    Entries that fail to load as a Task are skipped individually.
    """
    raw = store.get(TASKS_KEY)
    if not raw:
        return []
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as e:
        _fallback(TASKS_KEY, f"invalid JSON: {e}")
        return []
    if not isinstance(parsed, list):
        _fallback(TASKS_KEY, f"expected a list, got {type(parsed).__name__}")
        return []

    tasks: List[Task] = []
    for index, item in enumerate(parsed):
        try:
            tasks.append(Task.model_validate(item))
        except PydanticValidationError as e:
            logger.warning("Skipping unreadable task at index %d: %s", index, e)
    return tasks


def save_tasks(store: KeyValueStore, tasks: Iterable[Task]) -> None:
    store.set(TASKS_KEY, json.dumps([t.to_storage() for t in tasks]))


def load_settings(store: KeyValueStore) -> Settings:
    """
    Load thresholds. Missing fields take their defaults; missing, corrupt
    or out-of-range content yields default settings.
    """
    defaults = Settings.defaults()
    raw = store.get(SETTINGS_KEY)
    if not raw:
        return defaults
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as e:
        _fallback(SETTINGS_KEY, f"invalid JSON: {e}")
        return defaults
    if not isinstance(parsed, dict):
        _fallback(SETTINGS_KEY, f"expected an object, got {type(parsed).__name__}")
        return defaults

    merged = defaults.to_storage()
    merged.update({k: v for k, v in parsed.items() if k in merged and v is not None})
    try:
        return Settings.model_validate(merged)
    except PydanticValidationError as e:
        _fallback(SETTINGS_KEY, f"invalid thresholds: {e.errors()[0]['msg']}")
        return defaults


def save_settings(store: KeyValueStore, settings: Settings) -> None:
    store.set(SETTINGS_KEY, json.dumps(settings.to_storage()))
