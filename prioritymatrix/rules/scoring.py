"""Scoring rules — impact/urgency totals, deadline proximity and quadrant classification.

Every function here is pure: no I/O, no logging, no clock reads except the
documented ``now`` default of ``urgency_total``. Stored per-dimension scores
are summed as-is, without clamping to 0-3, so a corrupted record still
yields a defined result.
"""

from __future__ import annotations

import math
from datetime import date, datetime, time, timedelta
from typing import Any, Dict, NamedTuple, Optional, Union

from prioritymatrix.constants import (
    QUADRANT_DESCRIPTIONS,
    QUADRANT_LABELS,
    QUADRANT_NEXT_STEP,
    Quadrant,
    UrgencyKey,
)
from prioritymatrix.records.settings import Settings
from prioritymatrix.records.task import Score, Task
from prioritymatrix.utilities.utils import parse_date

Moment = Union[date, datetime]

_ONE_DAY = timedelta(days=1)

# (max days until due, score); first match wins
_PROXIMITY_BANDS = ((2, 3), (7, 2), (14, 1))


class TaskScore(NamedTuple):
    impact_total: Score
    urgency_total: Score
    important: bool
    urgent: bool
    quadrant: Quadrant

    @property
    def label(self) -> str:
        return QUADRANT_LABELS[self.quadrant]

    @property
    def description(self) -> str:
        return QUADRANT_DESCRIPTIONS[self.quadrant]

    @property
    def next_step(self) -> str:
        return QUADRANT_NEXT_STEP[self.quadrant]


def _days_until(due: date, now: Moment) -> int:
    """
    Whole days from ``now`` to ``due``, rounded up; negative when past due.

    With a datetime ``now`` the due date is taken as midnight in now's
    timezone, so anything later today counts as 0 and tomorrow as 1.
    """
    if isinstance(now, datetime):
        due_start = datetime.combine(due, time.min, tzinfo=now.tzinfo)
        return math.ceil((due_start - now) / _ONE_DAY)
    return (due - now).days


def derive_deadline_proximity(due_date: Any, now: Moment) -> int:
    """
    Derive the deadline-proximity urgency sub-score (0-3) from a due date.

    Missing or unparseable due dates score 0. Past-due and due-today
    dates score 3, the same as anything due within two days.
    """
    due = parse_date(due_date)
    if due is None:
        return 0
    diff_days = _days_until(due, now)
    for max_days, score in _PROXIMITY_BANDS:
        if diff_days <= max_days:
            return score
    return 0


def impact_total(task: Task) -> Score:
    return sum(task.impact_scores.as_dict().values())


def effective_urgency_scores(task: Task, now: Moment) -> Dict[UrgencyKey, Score]:
    """
    Urgency sub-scores as used for scoring.

    With the override flag set the stored values are returned unchanged.
    Otherwise ``deadlineProximity`` is replaced by the value derived from
    the task's due date. The task itself is never modified.
    """
    scores = task.urgency_scores.as_dict()
    if task.override_deadline_proximity:
        return scores
    scores[UrgencyKey.DEADLINE_PROXIMITY] = derive_deadline_proximity(task.due_date, now)
    return scores


def urgency_total(task: Task, now: Optional[Moment] = None) -> Score:
    if now is None:
        now = datetime.now()
    return sum(effective_urgency_scores(task, now).values())


def is_important(impact: int, impact_threshold: int) -> bool:
    return impact >= impact_threshold


def is_urgent(urgency: int, urgency_threshold: int) -> bool:
    return urgency >= urgency_threshold


def classify(
    impact: int,
    urgency: int,
    impact_threshold: int,
    urgency_threshold: int,
) -> Quadrant:
    """
    Map totals and thresholds to a quadrant.

        important + urgent  → DO_NOW
        important only      → SCHEDULED
        urgent only         → QUICK_WINS
        neither             → DROP

    Both comparisons are inclusive.
    """
    important = is_important(impact, impact_threshold)
    urgent = is_urgent(urgency, urgency_threshold)

    if important and urgent:
        return Quadrant.DO_NOW
    if important:
        return Quadrant.SCHEDULED
    if urgent:
        return Quadrant.QUICK_WINS
    return Quadrant.DROP


def score_task(task: Task, settings: Settings, now: Optional[Moment] = None) -> TaskScore:
    """Compute both totals, both flags and the quadrant for one task."""
    if now is None:
        now = datetime.now()
    impact = impact_total(task)
    urgency = urgency_total(task, now)
    return TaskScore(
        impact_total=impact,
        urgency_total=urgency,
        important=is_important(impact, settings.impact_threshold),
        urgent=is_urgent(urgency, settings.urgency_threshold),
        quadrant=classify(impact, urgency, settings.impact_threshold, settings.urgency_threshold),
    )


def classify_task(task: Task, settings: Settings, now: Optional[Moment] = None) -> Quadrant:
    return score_task(task, settings, now).quadrant
