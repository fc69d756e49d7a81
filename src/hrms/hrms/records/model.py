from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Iterable, Optional

from ..attendance.model import AttendanceEvent
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..goals.model import Goal
from ..payroll.calculator.base import PayrollCalculator
from ..payroll.model import Payslip
from ..performance.model import PerformanceReview
from . import mappers
from .store import ATTENDANCE, EMPLOYEES, GOALS, PAYROLL, PERFORMANCE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordSets:
    """Snapshot handed to the dashboard. ``None`` means the slice was not supplied."""

    attendance: Optional[tuple[AttendanceEvent, ...]] = None
    employees: Optional[tuple[Employee, ...]] = None
    payroll: Optional[tuple[Payslip, ...]] = None
    performance: Optional[tuple[PerformanceReview, ...]] = None
    goals: Optional[tuple[Goal, ...]] = None

    @classmethod
    def from_documents(
        cls,
        documents: Mapping[str, Optional[Iterable[Mapping[str, Any]]]],
        *,
        calculator: Optional[PayrollCalculator] = None,
    ) -> "RecordSets":
        """Build from raw store documents. Malformed documents are skipped and logged.

        Payslip breakdowns are recomputed with ``calculator`` so they follow the
        configured money precision.
        """

        return cls(
            attendance=_map_all(documents.get(ATTENDANCE), mappers.attendance_event_from_doc, ATTENDANCE),
            employees=_map_all(documents.get(EMPLOYEES), mappers.employee_from_doc, EMPLOYEES),
            payroll=_map_all(
                documents.get(PAYROLL), partial(mappers.payslip_from_doc, calculator=calculator), PAYROLL
            ),
            performance=_map_all(documents.get(PERFORMANCE), mappers.review_from_doc, PERFORMANCE),
            goals=_map_all(documents.get(GOALS), mappers.goal_from_doc, GOALS),
        )


def _map_all(docs: Optional[Iterable[Mapping[str, Any]]], mapper: Callable, collection: str) -> Optional[tuple]:
    if docs is None:
        return None

    out = []
    for doc in docs:
        if not isinstance(doc, Mapping):
            logger.warning("Skipping malformed %s record: not a document (%r)", collection, doc)
            continue
        try:
            out.append(mapper(doc))
        except (ValidationError, ValueError, TypeError) as e:
            logger.warning("Skipping malformed %s record %s: %s", collection, doc.get("id", "?"), e)
    return tuple(out)
