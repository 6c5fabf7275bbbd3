"""Settings record — the two classification thresholds."""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from prioritymatrix.constants import (
    DEFAULT_IMPACT_THRESHOLD,
    DEFAULT_URGENCY_THRESHOLD,
    MAX_IMPACT_TOTAL,
    MAX_URGENCY_TOTAL,
)


class Settings(BaseModel):
    """
    Per-user thresholds read by the classifier on every computation.

    A total equal to its threshold counts as important / urgent. Changing
    a threshold never touches stored tasks: quadrants are always recomputed.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    impact_threshold: int = Field(default=DEFAULT_IMPACT_THRESHOLD, ge=0, le=MAX_IMPACT_TOTAL)
    urgency_threshold: int = Field(default=DEFAULT_URGENCY_THRESHOLD, ge=0, le=MAX_URGENCY_TOTAL)

    @classmethod
    def defaults(cls) -> "Settings":
        return cls()

    def to_storage(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
