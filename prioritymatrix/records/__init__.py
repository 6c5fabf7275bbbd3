"""Priority Matrix Records. Each record is defined in its own module."""

from .settings import Settings
from .task import ImpactScores, Task, UrgencyScores

__all__ = ["Task", "ImpactScores", "UrgencyScores", "Settings"]
