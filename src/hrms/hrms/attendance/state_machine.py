from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Iterable, Optional, Sequence
from zoneinfo import ZoneInfo

from ..common.datetime_utils import local_date, local_wall_time, now_local
from ..core.enums import AttendanceEventType, DayState
from ..core.exceptions import InvalidTransition, ValidationError
from .model import AttendanceEvent, DayStatus

logger = logging.getLogger(__name__)

_TRANSITIONS = {
    (DayState.NOT_STARTED, AttendanceEventType.CLOCK_IN): DayState.OPEN,
    (DayState.OPEN, AttendanceEventType.CLOCK_OUT): DayState.CLOSED,
}

_REJECTION_MESSAGES = {
    (DayState.OPEN, AttendanceEventType.CLOCK_IN): "Already clocked in today",
    (DayState.CLOSED, AttendanceEventType.CLOCK_IN): "Day already closed, cannot clock in again",
    (DayState.NOT_STARTED, AttendanceEventType.CLOCK_OUT): "Clock in before clocking out",
    (DayState.CLOSED, AttendanceEventType.CLOCK_OUT): "Already clocked out today",
}


class AttendanceStateMachine:
    """NotStarted -> Open -> Closed, per subject per local calendar day.

    Apart from ``now``/``today``, every method is a pure function of the events passed in.
    """

    def __init__(self, *, tz: Optional[ZoneInfo] = None):
        self._tz = tz

    def local_day(self, event: AttendanceEvent) -> date:
        return local_date(event.timestamp, self._tz)

    def now(self) -> datetime:
        return now_local(self._tz)

    def today(self) -> date:
        """Current calendar day in the configured zone."""
        return self.now().date()

    def transition(self, state: DayState, event_type: AttendanceEventType) -> DayState:
        nxt = _TRANSITIONS.get((state, event_type))
        if nxt is None:
            message = _REJECTION_MESSAGES.get((state, event_type), "Invalid attendance event")
            raise InvalidTransition(message, state=state, event_type=event_type)
        return nxt

    def _events_for_day(
        self, events: Iterable[AttendanceEvent], day: date, subject_id: Optional[str]
    ) -> tuple[list[AttendanceEvent], Optional[str]]:
        todays = [
            e for e in events
            if self.local_day(e) == day and (subject_id is None or e.subject_id == subject_id)
        ]
        todays.sort(key=lambda e: local_wall_time(e.timestamp, self._tz))

        if subject_id is None:
            subjects = {e.subject_id for e in todays}
            if len(subjects) > 1:
                raise ValidationError("Events belong to more than one subject; pass subject_id")
            subject_id = next(iter(subjects), None)
        return todays, subject_id

    def derive_day_status(
        self, events: Iterable[AttendanceEvent], day: date, *, subject_id: Optional[str] = None
    ) -> DayStatus:
        """Earliest clock-in and the earliest clock-out after it decide the day.

        Later duplicates are no-ops for the state and are returned in ``ignored``.
        """

        todays, subject_id = self._events_for_day(events, day, subject_id)

        state = DayState.NOT_STARTED
        clock_in = clock_out = None
        ignored: list[AttendanceEvent] = []
        for event in todays:
            if (state, event.event_type) not in _TRANSITIONS:
                ignored.append(event)
                continue
            state = _TRANSITIONS[(state, event.event_type)]
            if event.event_type == AttendanceEventType.CLOCK_IN:
                clock_in = event.timestamp
            else:
                clock_out = event.timestamp

        return DayStatus(
            day=day,
            state=state,
            subject_id=subject_id,
            clock_in_time=clock_in,
            clock_out_time=clock_out,
            events=tuple(todays),
            ignored=tuple(ignored),
        )

    def replay(
        self, events: Iterable[AttendanceEvent], day: date, *, subject_id: Optional[str] = None
    ) -> DayStatus:
        """Strict replay: the first out-of-order event raises InvalidTransition."""

        todays, subject_id = self._events_for_day(events, day, subject_id)

        status = DayStatus(day=day, state=DayState.NOT_STARTED, subject_id=subject_id)
        for event in todays:
            status = self._apply(status, event)
        return status

    def validate_next(self, events: Iterable[AttendanceEvent], event: AttendanceEvent) -> DayStatus:
        """Status the day would have after appending ``event``; rejects invalid events."""

        day = self.local_day(event)
        current = self.derive_day_status(events, day, subject_id=event.subject_id)
        try:
            return self._apply(current, event)
        except InvalidTransition:
            logger.info(
                "Rejected %s for subject %s on %s (state %s)",
                event.event_type.value, event.subject_id, day, current.state.value,
            )
            raise

    def _apply(self, status: DayStatus, event: AttendanceEvent) -> DayStatus:
        state = self.transition(status.state, event.event_type)
        clock_in, clock_out = status.clock_in_time, status.clock_out_time
        if event.event_type == AttendanceEventType.CLOCK_IN:
            clock_in = event.timestamp
        else:
            clock_out = event.timestamp
        return DayStatus(
            day=status.day,
            state=state,
            subject_id=status.subject_id,
            clock_in_time=clock_in,
            clock_out_time=clock_out,
            events=status.events + (event,),
            ignored=status.ignored,
        )

    def count_distinct_present(self, events: Iterable[AttendanceEvent], day: date) -> int:
        return len(
            {
                e.subject_id for e in events
                if e.event_type == AttendanceEventType.CLOCK_IN and self.local_day(e) == day
            }
        )

    def daily_history(
        self, events: Sequence[AttendanceEvent], *, subject_id: Optional[str] = None
    ) -> list[DayStatus]:
        """One DayStatus per day that has events, newest day first."""

        mine = [e for e in events if subject_id is None or e.subject_id == subject_id]
        days = sorted({self.local_day(e) for e in mine}, reverse=True)
        return [self.derive_day_status(mine, d, subject_id=subject_id) for d in days]
