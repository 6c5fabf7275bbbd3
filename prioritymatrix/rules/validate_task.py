"""Validation rule — check task data at the data-entry boundary before it is saved."""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from prioritymatrix.constants import MAX_SCORE, MIN_SCORE
from prioritymatrix.engine.errors import ValidationError
from prioritymatrix.records.task import Score, Task
from prioritymatrix.rules.scoring import derive_deadline_proximity
from prioritymatrix.utilities.utils import local_now

TITLE_REQUIRED = "Task title is required."
IMPACT_OUT_OF_RANGE = "Impact scores must be between 0 and 3."
URGENCY_OUT_OF_RANGE = "Urgency scores must be between 0 and 3."
MINUTES_NOT_POSITIVE = "Estimated minutes must be a positive number."


def clamp_score(value: Any) -> int:
    """Clamp a user-entered score to 0-3. Non-numeric input becomes 0."""
    try:
        score = int(value)
    except (TypeError, ValueError):
        return MIN_SCORE
    return max(MIN_SCORE, min(MAX_SCORE, score))


# Whole points only; 2.0 passes, 2.5 does not
_VALID_SCORES = range(MIN_SCORE, MAX_SCORE + 1)


def _in_range(value: Score) -> bool:
    return value in _VALID_SCORES


def validate_task(task: Task) -> List[str]:
    """
    Collect every user-facing problem with ``task``.
    An empty list means the task may be saved.
    """
    errors = []
    if not task.title.strip():
        errors.append(TITLE_REQUIRED)
    if not all(_in_range(v) for v in task.impact_scores.as_dict().values()):
        errors.append(IMPACT_OUT_OF_RANGE)
    if not all(_in_range(v) for v in task.urgency_scores.as_dict().values()):
        errors.append(URGENCY_OUT_OF_RANGE)
    if task.estimated_minutes is not None and task.estimated_minutes <= 0:
        errors.append(MINUTES_NOT_POSITIVE)
    return errors


def prepare_task(task: Task, now: Optional[datetime] = None) -> Task:
    """
    Validate and normalize a task coming from an editing form.

    Unless deadline proximity is overridden, the derived value is written
    into the urgency scores first, so validation and the saved record both
    see what scoring will use. Then trims title and notes and refreshes
    ``updated_at``. ``created_at`` is kept as assigned when the record was
    built.

    Raises:
        ValidationError: with the collected messages in ``validation_errors``.
    """
    now = now or local_now()
    urgency = task.urgency_scores
    if not task.override_deadline_proximity:
        urgency = urgency.model_copy(
            update={"deadline_proximity": derive_deadline_proximity(task.due_date, now)}
        )
    candidate = task.model_copy(update={"urgency_scores": urgency})

    errors = validate_task(candidate)
    if errors:
        raise ValidationError(
            f"Task '{task.id}' failed validation",
            validation_errors=errors,
            record_id=task.id,
        )

    return candidate.touch(
        now,
        title=task.title.strip(),
        notes=task.notes.strip(),
    )
