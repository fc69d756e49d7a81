from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Protocol, Sequence

ATTENDANCE = "attendance"
EMPLOYEES = "employees"
PAYROLL = "payroll"
PERFORMANCE = "performance"
GOALS = "goals"

COLLECTIONS = (ATTENDANCE, EMPLOYEES, PAYROLL, PERFORMANCE, GOALS)


@dataclass(frozen=True)
class Range:
    """Half-open range filter: start <= value < end. Either bound may be omitted."""

    start: Any = None
    end: Any = None

    def contains(self, value: Any) -> bool:
        if value is None:
            return False
        if self.start is not None and value < self.start:
            return False
        if self.end is not None and value >= self.end:
            return False
        return True


Filters = Mapping[str, Any]


class RecordStore(Protocol):
    """Document store: filtered reads (equality and range only) and appends."""

    def query(self, collection: str, filters: Optional[Filters] = None) -> Sequence[dict]:
        raise NotImplementedError

    def add(self, collection: str, document: Mapping[str, Any]) -> str:
        raise NotImplementedError


def matches(document: Mapping[str, Any], filters: Optional[Filters]) -> bool:
    """Range bounds must be comparable with the stored values; a TypeError propagates."""
    for field_name, expected in (filters or {}).items():
        value = document.get(field_name)
        if isinstance(expected, Range):
            if not expected.contains(value):
                return False
        elif value != expected:
            return False
    return True


class InMemoryRecordStore:
    """Dict-of-lists store for tests and local runs."""

    def __init__(self, documents: Optional[Mapping[str, Iterable[dict]]] = None):
        self._documents: dict[str, list[dict]] = {
            name: [dict(d) for d in docs] for name, docs in (documents or {}).items()
        }

    def add(self, collection: str, document: Mapping[str, Any]) -> str:
        docs = self._documents.setdefault(collection, [])
        doc = dict(document)
        doc.setdefault("id", f"{collection}-{len(docs) + 1}")
        docs.append(doc)
        return str(doc["id"])

    def query(self, collection: str, filters: Optional[Filters] = None) -> list[dict]:
        return [dict(d) for d in self._documents.get(collection, []) if matches(d, filters)]
