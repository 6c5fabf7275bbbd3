"""Seed tasks for a fresh board, spread across Do Now, Quick Wins and Drop."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import List, Optional

from prioritymatrix.records.task import ImpactScores, Task, UrgencyScores
from prioritymatrix.utilities.utils import utcnow

# id, title, notes, due in days (None = no due date), minutes, impact (4), urgency (3)
_SAMPLES = [
    ("sample-1", "Finalize quarterly roadmap",
     "Align milestones with team leads and update leadership deck.",
     1, 120, (3, 3, 2, 2), (3, 2, 2)),
    ("sample-2", "Prep customer demo rehearsal",
     "Run through the new analytics flow and capture feedback.",
     3, 60, (3, 2, 1, 1), (2, 3, 1)),
    ("sample-3", "Refine onboarding email copy",
     "Shorten welcome series and add usage tips.",
     10, 30, (2, 1, 0, 2), (1, 1, 0)),
    ("sample-4", "Set Q2 leadership sync agenda",
     "Draft agenda topics and send invites.",
     6, 15, (2, 2, 1, 1), (2, 1, 1)),
    ("sample-5", "Clear support inbox backlog",
     "Handle quick triage responses for simple tickets.",
     0, 30, (1, 1, 1, 0), (3, 2, 2)),
    ("sample-6", "Approve expense reports",
     "Sign off on finance queue for the week.",
     2, 15, (0, 1, 0, 0), (3, 2, 1)),
    ("sample-7", "Organize team brand assets",
     "Move outdated files to archive and update structure.",
     20, 60, (1, 0, 0, 1), (0, 0, 0)),
    ("sample-8", "Review conference swag options",
     "Collect quotes and decide if needed this quarter.",
     None, 30, (1, 0, 0, 0), (0, 0, 0)),
]

SAMPLE_TASK_IDS = [row[0] for row in _SAMPLES]


def build_sample_tasks(now: Optional[datetime] = None) -> List[Task]:
    """Build the seed tasks with due dates relative to ``now``."""
    now = now or utcnow()
    today = now.date()
    tasks = []
    for task_id, title, notes, due_in, minutes, impact, urgency in _SAMPLES:
        tasks.append(Task(
            id=task_id,
            title=title,
            notes=notes,
            due_date=today + timedelta(days=due_in) if due_in is not None else None,
            estimated_minutes=minutes,
            impact_scores=ImpactScores(
                goal_alignment=impact[0],
                consequence_cost=impact[1],
                hard_to_delegate=impact[2],
                compounding_value=impact[3],
            ),
            urgency_scores=UrgencyScores(
                deadline_proximity=urgency[0],
                late_penalty=urgency[1],
                dependency_pressure=urgency[2],
            ),
            created_at=now,
            updated_at=now,
        ))
    return tasks
