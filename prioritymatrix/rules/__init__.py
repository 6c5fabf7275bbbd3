"""Priority Matrix Rules — scoring core and data-entry validation."""

from .scoring import (
    TaskScore,
    classify,
    classify_task,
    derive_deadline_proximity,
    effective_urgency_scores,
    impact_total,
    is_important,
    is_urgent,
    score_task,
    urgency_total,
)
from .validate_task import clamp_score, prepare_task, validate_task

__all__ = [
    "TaskScore",
    "classify",
    "classify_task",
    "derive_deadline_proximity",
    "effective_urgency_scores",
    "impact_total",
    "is_important",
    "is_urgent",
    "score_task",
    "urgency_total",
    "clamp_score",
    "prepare_task",
    "validate_task",
]
