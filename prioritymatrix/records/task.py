"""Task record — one unit of work with fixed impact and urgency dimensions."""

from __future__ import annotations

import uuid
from datetime import date, datetime
from typing import Any, Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from prioritymatrix.constants import ImpactKey, TaskStatus, UrgencyKey
from prioritymatrix.utilities.utils import parse_date, utcnow


# Stored sub-scores are summed as-is, fractional values included
Score = Union[int, float]


def _new_task_id() -> str:
    return f"task-{uuid.uuid4().hex[:12]}"


class _CamelModel(BaseModel):
    # Persisted JSON uses camelCase keys; Python code uses snake_case.
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class _ScoreSet(_CamelModel):
    @field_validator("*", mode="before")
    @classmethod
    def null_score(cls, v: Any) -> Any:
        return 0 if v is None else v


class ImpactScores(_ScoreSet):
    """
    The four impact sub-scores. Nominal range per field is 0-3.

    Values are not range-checked and a missing (null) value reads as 0, so
    a corrupted persisted record still loads and scores. Range checks live
    in rules.validate_task.
    """

    goal_alignment: Score = 0
    consequence_cost: Score = 0
    hard_to_delegate: Score = 0
    compounding_value: Score = 0

    def as_dict(self) -> Dict[ImpactKey, Score]:
        return {key: getattr(self, _IMPACT_FIELDS[key]) for key in ImpactKey}


class UrgencyScores(_ScoreSet):
    """The three urgency sub-scores. Same leniency as ImpactScores."""

    deadline_proximity: Score = 0
    late_penalty: Score = 0
    dependency_pressure: Score = 0

    def as_dict(self) -> Dict[UrgencyKey, Score]:
        return {key: getattr(self, _URGENCY_FIELDS[key]) for key in UrgencyKey}


_IMPACT_FIELDS = {
    ImpactKey.GOAL_ALIGNMENT: "goal_alignment",
    ImpactKey.CONSEQUENCE_COST: "consequence_cost",
    ImpactKey.HARD_TO_DELEGATE: "hard_to_delegate",
    ImpactKey.COMPOUNDING_VALUE: "compounding_value",
}

_URGENCY_FIELDS = {
    UrgencyKey.DEADLINE_PROXIMITY: "deadline_proximity",
    UrgencyKey.LATE_PENALTY: "late_penalty",
    UrgencyKey.DEPENDENCY_PRESSURE: "dependency_pressure",
}


class Task(_CamelModel):
    """
    A task to be prioritized.

    When ``override_deadline_proximity`` is False the stored
    ``urgency_scores.deadline_proximity`` is a placeholder; scoring replaces
    it with the value derived from ``due_date``.
    """

    id: str = Field(default_factory=_new_task_id)
    title: str
    notes: str = ""
    due_date: Optional[date] = None
    estimated_minutes: Optional[int] = None
    impact_scores: ImpactScores = Field(default_factory=ImpactScores)
    urgency_scores: UrgencyScores = Field(default_factory=UrgencyScores)
    override_deadline_proximity: bool = False
    status: TaskStatus = TaskStatus.ACTIVE
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @field_validator("due_date", mode="before")
    @classmethod
    def lenient_due_date(cls, v: Any) -> Optional[date]:
        # Unparseable persisted dates count as "no due date"
        return parse_date(v)

    @field_validator("notes", mode="before")
    @classmethod
    def notes_default(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def missing_timestamp(cls, v: Any) -> Any:
        return utcnow() if v in (None, "") else v

    @property
    def is_active(self) -> bool:
        return self.status == TaskStatus.ACTIVE

    @property
    def deadline_proximity_source(self) -> Tuple[str, Optional[Score]]:
        """("manual", value) when overridden, else ("derived", None)."""
        if self.override_deadline_proximity:
            return ("manual", self.urgency_scores.deadline_proximity)
        return ("derived", None)

    def touch(self, now: Optional[datetime] = None, **changes: Any) -> "Task":
        """Return a copy with ``changes`` applied and ``updated_at`` refreshed."""
        changes["updated_at"] = now or utcnow()
        return self.model_copy(update=changes)

    def to_storage(self) -> Dict[str, Any]:
        """Serialize to the camelCase JSON shape used by the key-value store."""
        return self.model_dump(mode="json", by_alias=True)
