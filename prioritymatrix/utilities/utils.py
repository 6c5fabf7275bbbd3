"""
Priority Matrix Shared Utilities — common helpers used across the package.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, Optional


def parse_date(value: Any) -> Optional[date]:
    """
    Normalize a due-date value to a calendar ``date``.

    Accepts:
      - None or ""            → None
      - datetime instance     → its date part
      - date instance         → returned unchanged
      - ISO string, optionally with a time part ('2026-10-20', '2026-10-20T09:00:00')

    Anything else, or an unparseable string, yields None.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    try:
        return date.fromisoformat(text.split("T", 1)[0])
    except ValueError:
        return None


def utcnow() -> datetime:
    """Timezone-aware current UTC time."""
    return datetime.now(timezone.utc)


def local_now() -> datetime:
    """Timezone-aware current local time. Due dates are local calendar days."""
    return datetime.now().astimezone()
