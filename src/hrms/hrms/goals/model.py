from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import GoalStatus


@dataclass(frozen=True)
class Goal:
    subject_id: str
    title: str
    deadline: date
    status: GoalStatus = GoalStatus.IN_PROGRESS
    progress: int = 0
    description: Optional[str] = None

    def is_overdue(self, today: date) -> bool:
        return self.deadline < today and self.status == GoalStatus.IN_PROGRESS


@dataclass(frozen=True)
class GoalSummary:
    in_progress: int = 0
    completed: int = 0
    cancelled: int = 0
    overdue: int = 0
