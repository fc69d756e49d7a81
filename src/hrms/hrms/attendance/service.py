from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..core.enums import Action, AttendanceEventType, Resource
from ..identity.model import Principal
from ..permissions.service import PermissionEvaluator
from .model import AttendanceEvent, DayStatus
from .repository import AttendanceEventRepository
from .state_machine import AttendanceStateMachine


class AttendanceService:
    """Use case: a principal clocks in or out on their own record."""

    def __init__(
        self,
        events: AttendanceEventRepository,
        permissions: PermissionEvaluator,
        *,
        state_machine: Optional[AttendanceStateMachine] = None,
    ):
        self._events = events
        self._permissions = permissions
        self._machine = state_machine or AttendanceStateMachine()

    def clock_in(self, principal: Principal, *, now: Optional[datetime] = None, name: Optional[str] = None) -> DayStatus:
        return self._record(principal, AttendanceEventType.CLOCK_IN, now=now, name=name)

    def clock_out(self, principal: Principal, *, now: Optional[datetime] = None, name: Optional[str] = None) -> DayStatus:
        return self._record(principal, AttendanceEventType.CLOCK_OUT, now=now, name=name)

    def today_status(self, principal: Principal, today: Optional[date] = None) -> DayStatus:
        self._permissions.require(principal.role, Resource.ATTENDANCE, Action.VIEW)
        history = self._events.list_for_subject(principal.subject_id)
        return self._machine.derive_day_status(history, today or self._machine.today(), subject_id=principal.subject_id)

    def history(self, principal: Principal, *, limit: int = 15) -> list[DayStatus]:
        self._permissions.require(principal.role, Resource.ATTENDANCE, Action.VIEW)
        history = self._events.list_for_subject(principal.subject_id)
        return self._machine.daily_history(history, subject_id=principal.subject_id)[:limit]

    def _record(
        self,
        principal: Principal,
        event_type: AttendanceEventType,
        *,
        now: Optional[datetime],
        name: Optional[str],
    ) -> DayStatus:
        self._permissions.require(principal.role, Resource.ATTENDANCE, Action.ACT)

        event = AttendanceEvent(
            subject_id=principal.subject_id,
            event_type=event_type,
            timestamp=now or self._machine.now(),
            subject_name=name,
        )
        history = self._events.list_for_subject(principal.subject_id)
        status = self._machine.validate_next(history, event)
        self._events.append(event)
        return status
