from __future__ import annotations

from typing import Sequence

from ..attendance.model import AttendanceEvent
from .model import RecordSets
from .store import ATTENDANCE, RecordStore


class RecordStoreAttendanceRepository:
    """AttendanceEventRepository over the attendance collection of a RecordStore."""

    def __init__(self, store: RecordStore):
        self._store = store

    def list_for_subject(self, subject_id: str) -> Sequence[AttendanceEvent]:
        docs = self._store.query(ATTENDANCE, {"uid": subject_id})
        return RecordSets.from_documents({ATTENDANCE: docs}).attendance

    def append(self, event: AttendanceEvent) -> str:
        doc = {
            "uid": event.subject_id,
            "type": event.event_type.value,
            "timestamp": event.timestamp,
        }
        if event.subject_name:
            doc["name"] = event.subject_name
        return self._store.add(ATTENDANCE, doc)
