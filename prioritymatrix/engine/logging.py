"""
Priority Matrix Logging — Structured JSON-lines file logging.

Implements:
- LogEntry: a structured entry destined for one object-type/category file
- FileLogger: per-object-type, per-category log files (daily rotation),
  read back by query() for a task's history
- Entry builders for task operations, settings changes and storage faults
- A module-level logger that is a no-op until init_logging() is called

Writes are synchronous; the package is single-user and single-threaded.
Module code also logs through ordinary ``logging.getLogger`` loggers.
"""

from __future__ import annotations

import json
import logging
from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

logger = logging.getLogger("prioritymatrix.engine.logging")

OBJECT_TYPE_CATEGORIES = {
    "tasks": ["execution"],
    "settings": ["execution"],
    "storage": ["errors"],
}


class LogEntry:
    """A structured log entry destined for a specific file."""

    __slots__ = ("object_type", "category", "data")

    def __init__(self, object_type: str, category: str, data: Dict[str, Any]):
        self.object_type = object_type
        self.category = category
        self.data = data

    def to_json(self) -> str:
        return json.dumps(self.data, default=str, separators=(",", ":"))


class FileLogger:
    """
    Writes structured JSON log entries to per-object-type, per-category files.
    Files rotate daily: {log_dir}/{object_type}/{category}/{YYYY-MM-DD}.jsonl
    """

    def __init__(self, log_dir: str = "logs"):
        self._log_dir = Path(log_dir)
        self._ensure_directories()

    def _ensure_directories(self) -> None:
        for obj_type, categories in OBJECT_TYPE_CATEGORIES.items():
            for cat in categories:
                (self._log_dir / obj_type / cat).mkdir(parents=True, exist_ok=True)

    def write(self, entry: LogEntry) -> None:
        """Write a single log entry to the appropriate file."""
        file_path = self._resolve_path(entry.object_type, entry.category)
        with open(file_path, "a", encoding="utf-8") as f:
            f.write(entry.to_json())
            f.write("\n")

    def _resolve_path(self, object_type: str, category: str) -> Path:
        if category not in OBJECT_TYPE_CATEGORIES.get(object_type, ()):
            raise ValueError(f"Unknown log target: {object_type}/{category}")
        today = date.today().isoformat()
        return self._log_dir / object_type / category / f"{today}.jsonl"

    def query(
        self,
        object_type: str,
        category: str,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        filters: Optional[Dict[str, Any]] = None,
        limit: int = 500,
    ) -> List[Dict[str, Any]]:
        """
        Read entries back for an object_type/category between two dates.

        Args:
            start_date: Earliest date to include (defaults to 7 days ago).
            end_date: Latest date to include (defaults to today).
            filters: Only entries whose top-level keys equal ALL given values.
            limit: Max number of entries to return.

        Returns:
            Parsed entry dicts in chronological order.
        """
        if end_date is None:
            end_date = date.today()
        if start_date is None:
            start_date = end_date - timedelta(days=7)

        log_base = self._log_dir / object_type / category
        if not log_base.exists():
            return []

        results: List[Dict[str, Any]] = []
        current = start_date
        while current <= end_date and len(results) < limit:
            file_path = log_base / f"{current.isoformat()}.jsonl"
            if file_path.exists():
                results.extend(self._read_jsonl(file_path, filters, limit - len(results)))
            current += timedelta(days=1)
        return results

    @staticmethod
    def _read_jsonl(
        path: Path,
        filters: Optional[Dict[str, Any]],
        remaining: int,
    ) -> List[Dict[str, Any]]:
        entries: List[Dict[str, Any]] = []
        try:
            with open(path, "r", encoding="utf-8") as f:
                for line in f:
                    line = line.strip()
                    if not line:
                        continue
                    try:
                        data = json.loads(line)
                    except json.JSONDecodeError:
                        continue
                    if filters and not all(data.get(k) == v for k, v in filters.items()):
                        continue
                    entries.append(data)
                    if len(entries) >= remaining:
                        break
        except OSError as exc:
            logger.warning("Could not read log file %s: %s", path, exc)
        return entries


# ---------------------------------------------------------------------------
# Entry builders
# ---------------------------------------------------------------------------

def _base_entry(event: str, level: str, **extra: Any) -> Dict[str, Any]:
    entry: Dict[str, Any] = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "level": level,
        "event": event,
    }
    entry.update({k: v for k, v in extra.items() if v is not None})
    return entry


def log_task_operation(
    operation: str,
    task_id: str,
    quadrant: Optional[str] = None,
    fields_changed: Optional[List[str]] = None,
) -> LogEntry:
    """Build a task create/update/archive/delete entry."""
    data = _base_entry(
        event=f"task_{operation}",
        level="INFO",
        operation=operation,
        task_id=task_id,
        quadrant=quadrant,
    )
    if fields_changed:
        data["fields_changed"] = fields_changed
    return LogEntry("tasks", "execution", data)


def log_settings_change(
    impact_threshold: int,
    urgency_threshold: int,
    previous: Optional[Dict[str, int]] = None,
) -> LogEntry:
    data = _base_entry(
        event="settings_changed",
        level="INFO",
        impact_threshold=impact_threshold,
        urgency_threshold=urgency_threshold,
        previous=previous,
    )
    return LogEntry("settings", "execution", data)


def log_storage_fallback(key: str, reason: str) -> LogEntry:
    """Build an entry recording that a stored value was unreadable."""
    data = _base_entry(event="storage_fallback", level="WARNING", key=key, reason=reason)
    return LogEntry("storage", "errors", data)


# ---------------------------------------------------------------------------
# Global file logger
# ---------------------------------------------------------------------------

_file_logger: Optional[FileLogger] = None


def init_logging(log_dir: str = "logs") -> FileLogger:
    """Initialize the global structured file logger."""
    global _file_logger
    _file_logger = FileLogger(log_dir=log_dir)
    return _file_logger


def get_file_logger() -> Optional[FileLogger]:
    return _file_logger


def log(entry: LogEntry) -> bool:
    """Write an entry if structured logging is enabled. Returns True if written."""
    if _file_logger is None:
        return False
    try:
        _file_logger.write(entry)
    except OSError as exc:
        logger.warning("Structured log write failed for %s/%s: %s",
                       entry.object_type, entry.category, exc)
        return False
    return True


def shutdown_logging() -> None:
    global _file_logger
    _file_logger = None
