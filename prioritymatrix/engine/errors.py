"""
Priority Matrix Error Hierarchy — Structured exceptions with serializable context.

The scoring core never raises for malformed data. These errors belong to the
collaborators around it: the data-entry boundary, the board service, the
key-value store and the configuration loader.

Hierarchy:
    PriorityMatrixError
    ├── ValidationError       — Task or settings rejected at data entry
    ├── RecordNotFoundError   — Task id not present on the board
    ├── StorageError          — Key-value store write failed
    └── ConfigError           — Invalid priority_matrix.yaml
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


class PriorityMatrixError(Exception):
    """
    Base error for all Priority Matrix failures.
    All context is serializable to JSON for the structured log.
    """

    def __init__(self, message: str, **context: Any):
        self.message = message
        self.error_type: str = self.__class__.__name__
        self.context: Dict[str, Any] = context
        self.timestamp: str = datetime.now(timezone.utc).isoformat()
        super().__init__(message)

    # Keys promoted to top-level attributes by subclasses
    _promoted: tuple = ()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize error to a JSON-compatible dict."""
        return {
            "error_type": self.error_type,
            "message": self.message,
            "timestamp": self.timestamp,
            "context": {
                k: str(v) for k, v in self.context.items()
                if k not in self._promoted
            },
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), default=str)

    def __repr__(self) -> str:
        parts = [f"{self.error_type}: {self.message}"]
        for key in self._promoted:
            value = self.context.get(key)
            if value:
                parts.append(f"{key}={value}")
        return " | ".join(parts)


class ValidationError(PriorityMatrixError):
    """
    A task or settings record failed data-entry validation.
    Carries the user-facing messages in ``validation_errors``.
    """

    _promoted = ("validation_errors", "record_id")

    def __init__(self, message: str, **context: Any):
        self.validation_errors: List[str] = list(context.get("validation_errors") or [])
        self.record_id: Optional[str] = context.get("record_id")
        super().__init__(message, **context)

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d["validation_errors"] = self.validation_errors
        d["record_id"] = self.record_id
        return d


class RecordNotFoundError(PriorityMatrixError):
    """Task lookup by id failed."""

    _promoted = ("record_id", "operation")

    def __init__(self, message: str, **context: Any):
        self.record_id: Optional[str] = context.get("record_id")
        self.operation: Optional[str] = context.get("operation")
        super().__init__(message, **context)

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d["record_id"] = self.record_id
        d["operation"] = self.operation
        return d


class StorageError(PriorityMatrixError):
    """Writing to the key-value store failed."""

    _promoted = ("key", "path")

    def __init__(self, message: str, **context: Any):
        self.key: Optional[str] = context.get("key")
        self.path: Optional[str] = context.get("path")
        super().__init__(message, **context)

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d["key"] = self.key
        d["path"] = self.path
        return d


class ConfigError(PriorityMatrixError):
    """Configuration error — unreadable or invalid priority_matrix.yaml."""
    pass
