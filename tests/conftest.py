"""
Priority Matrix Test Suite — Shared fixtures and configuration.

Run:  pytest tests/ -v
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional, Sequence

import pytest

from prioritymatrix.records.task import ImpactScores, Task, UrgencyScores
from prioritymatrix.storage import MemoryStore

# Fixed reference moment for every date-dependent test
NOW = datetime(2026, 10, 19, 9, 0)


@pytest.fixture(autouse=True)
def _isolate_globals():
    """Reset module-level singletons between tests."""
    import prioritymatrix.engine.config as cfg_mod
    import prioritymatrix.engine.logging as log_mod

    cfg_mod._config = None
    log_mod._file_logger = None
    yield
    cfg_mod._config = None
    log_mod._file_logger = None


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


def build_task(
    title: str = "Write report",
    impact: Sequence[int] = (0, 0, 0, 0),
    urgency: Sequence[int] = (0, 0, 0),
    due_in: Optional[int] = None,
    override: bool = False,
    **extra,
) -> Task:
    """Task factory: scores as tuples in dimension order, due date as days from NOW."""
    return Task(
        title=title,
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
        due_date=NOW.date() + timedelta(days=due_in) if due_in is not None else None,
        override_deadline_proximity=override,
        **extra,
    )


@pytest.fixture
def make_task():
    return build_task
