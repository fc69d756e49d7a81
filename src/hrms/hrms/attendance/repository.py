from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceEvent


class AttendanceEventRepository(Protocol):
    """Where the calling context reads and appends clock events."""

    def list_for_subject(self, subject_id: str) -> Sequence[AttendanceEvent]:
        raise NotImplementedError

    def append(self, event: AttendanceEvent) -> str:
        raise NotImplementedError
