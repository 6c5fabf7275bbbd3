"""
Priority Matrix — impact/urgency task prioritization.
Version: 1.0

Tasks are rated on four impact and three urgency dimensions (0-3 each) and
classified into Do Now, Scheduled, Quick Wins or Drop against two thresholds.

    from prioritymatrix import Task, Settings, impact_total, urgency_total, classify
"""

__version__ = "1.0.0"

from prioritymatrix.constants import ImpactKey, Quadrant, TaskStatus, UrgencyKey  # noqa: E402
from prioritymatrix.records import ImpactScores, Settings, Task, UrgencyScores  # noqa: E402
from prioritymatrix.rules.scoring import (  # noqa: E402
    TaskScore,
    classify,
    classify_task,
    derive_deadline_proximity,
    effective_urgency_scores,
    impact_total,
    score_task,
    urgency_total,
)

__all__ = [
    "ImpactKey",
    "UrgencyKey",
    "Quadrant",
    "TaskStatus",
    "Task",
    "ImpactScores",
    "UrgencyScores",
    "Settings",
    "TaskScore",
    "classify",
    "classify_task",
    "derive_deadline_proximity",
    "effective_urgency_scores",
    "impact_total",
    "score_task",
    "urgency_total",
]
