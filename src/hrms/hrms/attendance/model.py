from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import local_wall_time
from ..core.enums import AttendanceEventType, DayState


@dataclass(frozen=True)
class AttendanceEvent:
    """Domain entity: one clock-in or clock-out entry of the append-only log."""

    subject_id: str
    event_type: AttendanceEventType
    timestamp: datetime
    subject_name: Optional[str] = None


@dataclass(frozen=True)
class DayStatus:
    """Derived attendance state of one subject on one calendar day."""

    day: date
    state: DayState
    subject_id: Optional[str] = None
    clock_in_time: Optional[datetime] = None
    clock_out_time: Optional[datetime] = None
    events: tuple[AttendanceEvent, ...] = ()
    # Events that had no effect on the state (duplicates, stray clock-outs).
    ignored: tuple[AttendanceEvent, ...] = ()

    @property
    def is_present(self) -> bool:
        return self.clock_in_time is not None

    @property
    def worked_minutes(self) -> int:
        if not self.clock_in_time or not self.clock_out_time:
            return 0
        start, end = self.clock_in_time, self.clock_out_time
        if (start.tzinfo is None) != (end.tzinfo is None):
            start, end = local_wall_time(start), local_wall_time(end)
        return max(int((end - start).total_seconds() // 60), 0)
