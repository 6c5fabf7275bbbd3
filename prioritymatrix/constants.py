"""
Priority Matrix — Constants.

Fixed dimension keys, quadrant tags and their display strings, and the two
storage keys. Keys match the camelCase names used in persisted JSON.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Tuple


class ImpactKey(str, Enum):
    """The four impact dimensions. Each is scored 0-3."""
    GOAL_ALIGNMENT = "goalAlignment"
    CONSEQUENCE_COST = "consequenceCost"
    HARD_TO_DELEGATE = "hardToDelegate"
    COMPOUNDING_VALUE = "compoundingValue"


class UrgencyKey(str, Enum):
    """The three urgency dimensions. Each is scored 0-3."""
    DEADLINE_PROXIMITY = "deadlineProximity"
    LATE_PENALTY = "latePenalty"
    DEPENDENCY_PRESSURE = "dependencyPressure"


class Quadrant(str, Enum):
    DO_NOW = "DO_NOW"
    SCHEDULED = "SCHEDULED"
    QUICK_WINS = "QUICK_WINS"
    DROP = "DROP"


class TaskStatus(str, Enum):
    ACTIVE = "active"
    ARCHIVED = "archived"


MIN_SCORE = 0
MAX_SCORE = 3

MAX_IMPACT_TOTAL = MAX_SCORE * len(ImpactKey)    # 12
MAX_URGENCY_TOTAL = MAX_SCORE * len(UrgencyKey)  # 9

DEFAULT_IMPACT_THRESHOLD = 7
DEFAULT_URGENCY_THRESHOLD = 5

# Key-value storage keys
TASKS_KEY = "priority-matrix-tasks"
SETTINGS_KEY = "priority-matrix-settings"

QUADRANT_ORDER: List[Quadrant] = [
    Quadrant.DO_NOW,
    Quadrant.SCHEDULED,
    Quadrant.QUICK_WINS,
    Quadrant.DROP,
]

QUADRANT_LABELS: Dict[Quadrant, str] = {
    Quadrant.DO_NOW: "Do Now",
    Quadrant.SCHEDULED: "Scheduled",
    Quadrant.QUICK_WINS: "Quick Wins",
    Quadrant.DROP: "Drop",
}

QUADRANT_DESCRIPTIONS: Dict[Quadrant, str] = {
    Quadrant.DO_NOW: "High impact and time-sensitive priorities.",
    Quadrant.SCHEDULED: "Important work to plan intentionally.",
    Quadrant.QUICK_WINS: "Fast wins to clear quickly.",
    Quadrant.DROP: "Low value items to remove or defer.",
}

QUADRANT_NEXT_STEP: Dict[Quadrant, str] = {
    Quadrant.DO_NOW: "Start now. Define the first 5-minute action and do it.",
    Quadrant.SCHEDULED: "Schedule it. Pick a start date and protect a time block.",
    Quadrant.QUICK_WINS: "Keep it small. Finish in one short pass or delegate if possible.",
    Quadrant.DROP: "Drop it. Archive the task or move to Someday.",
}

# (label, helper question) per dimension, in form order
IMPACT_FIELDS: Dict[ImpactKey, Tuple[str, str]] = {
    ImpactKey.GOAL_ALIGNMENT: (
        "Goal Alignment",
        "Does this directly advance a priority goal this week or month?",
    ),
    ImpactKey.CONSEQUENCE_COST: (
        "Consequence Cost",
        "If I don’t do this, how costly is it?",
    ),
    ImpactKey.HARD_TO_DELEGATE: (
        "Hard to Delegate",
        "Does this require me specifically?",
    ),
    ImpactKey.COMPOUNDING_VALUE: (
        "Compounding Value",
        "Will this make future work meaningfully easier or higher quality?",
    ),
}

URGENCY_FIELDS: Dict[UrgencyKey, Tuple[str, str]] = {
    UrgencyKey.DEADLINE_PROXIMITY: (
        "Deadline Proximity",
        "Auto-scored from the due date by default.",
    ),
    UrgencyKey.LATE_PENALTY: (
        "Late Penalty",
        "If this is late, how bad is the outcome?",
    ),
    UrgencyKey.DEPENDENCY_PRESSURE: (
        "Dependency Pressure",
        "Are others waiting on me to move forward?",
    ),
}
