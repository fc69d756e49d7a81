from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..attendance.model import DayStatus
from ..core.enums import Scope


@dataclass(frozen=True)
class MetricBundle:
    scope: Scope
    total_employees: int = 0
    present_today: int = 0
    pending_payslips: int = 0
    avg_performance: float = 0
    active_goals: int = 0
    performance_label: str = "No reviews yet"
    # Own day status; only filled for own-scope dashboards.
    attendance_today: Optional[DayStatus] = None
    recent_activity: tuple[str, ...] = ()
    # Record sets that were not supplied and were zeroed.
    missing: tuple[str, ...] = ()
