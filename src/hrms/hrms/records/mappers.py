"""Stored document -> domain object.

Documents keep the field names the HR app writes (``uid``, ``employeeId``,
``basicSalary``...); snake_case spellings are accepted as well.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from ..common.datetime_utils import coerce_date, coerce_datetime
from ..common.validators import require_non_empty, require_number_in_range, to_decimal
from ..core import constants
from ..core.enums import AttendanceEventType, PayslipStatus
from ..core.exceptions import ValidationError
from ..attendance.model import AttendanceEvent
from ..employees.model import Employee
from ..goals.model import Goal
from ..goals.service import parse_goal_status, validate_progress
from ..payroll.calculator.base import PayrollCalculator
from ..payroll.calculator.standard_calculator import StandardPayrollCalculator
from ..payroll.model import Payslip
from ..performance.model import PerformanceReview
from ..performance.scorer import PerformanceScorer


def _pick(doc: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if doc.get(key) is not None:
            return doc[key]
    return default


def attendance_event_from_doc(doc: Mapping[str, Any]) -> AttendanceEvent:
    raw_type = str(_pick(doc, "type", "event_type", default="")).strip().lower()
    try:
        event_type = AttendanceEventType(raw_type)
    except ValueError:
        raise ValidationError(f"Unknown attendance event type: {raw_type!r}") from None

    timestamp = _pick(doc, "timestamp")
    if timestamp is None:
        raise ValidationError("Attendance event has no timestamp")

    return AttendanceEvent(
        subject_id=require_non_empty(_pick(doc, "uid", "subject_id", default=""), "Subject"),
        event_type=event_type,
        timestamp=coerce_datetime(timestamp),
        subject_name=_pick(doc, "name", "subject_name"),
    )


def employee_from_doc(doc: Mapping[str, Any]) -> Employee:
    return Employee(
        employee_id=require_non_empty(_pick(doc, "id", "uid", "employee_id", default=""), "Employee id"),
        name=str(_pick(doc, "name", default="")),
        email=_pick(doc, "email"),
        department=_pick(doc, "department"),
        designation=_pick(doc, "designation"),
        salary=to_decimal(_pick(doc, "salary")),
    )


def payslip_from_doc(doc: Mapping[str, Any], calculator: Optional[PayrollCalculator] = None) -> Payslip:
    calculator = calculator or StandardPayrollCalculator()
    breakdown = calculator.compute_breakdown(
        _pick(doc, "basicSalary", "basic_salary"),
        _pick(doc, "allowances"),
        _pick(doc, "deductions"),
    )
    raw_status = str(_pick(doc, "status", default=PayslipStatus.PENDING.value)).strip().lower()
    try:
        status = PayslipStatus(raw_status)
    except ValueError:
        raise ValidationError(f"Unknown payslip status: {raw_status!r}") from None

    return Payslip(
        payslip_id=_pick(doc, "id"),
        employee_id=require_non_empty(_pick(doc, "employeeId", "employee_id", default=""), "Employee"),
        employee_name=str(_pick(doc, "employeeName", "employee_name", default="")),
        month=int(_pick(doc, "month", default=0)),
        year=int(_pick(doc, "year", default=0)),
        breakdown=breakdown,
        status=status,
    )


def review_from_doc(doc: Mapping[str, Any]) -> PerformanceReview:
    ratings = _pick(doc, "ratings", default={})
    if not isinstance(ratings, Mapping):
        raise ValidationError("Review ratings must be a mapping")

    PerformanceScorer().validate(ratings)

    score = _pick(doc, "overallScore", "overall_score")
    if score is not None:
        score = float(require_number_in_range(score, "Overall score", 0, constants.RATING_MAX))

    return PerformanceReview(
        employee_id=require_non_empty(_pick(doc, "employeeId", "employee_id", default=""), "Employee"),
        employee_name=_pick(doc, "employeeName", "employee_name"),
        reviewer_id=_pick(doc, "reviewerId", "reviewer_id"),
        period=str(_pick(doc, "period", default="")),
        ratings=dict(ratings),
        overall_score=score,
        comments=_pick(doc, "comments"),
    )


def goal_from_doc(doc: Mapping[str, Any]) -> Goal:
    deadline = _pick(doc, "deadline")
    if deadline is None:
        raise ValidationError("Goal has no deadline")
    try:
        deadline = coerce_date(deadline)
    except ValueError as e:
        raise ValidationError(str(e)) from None

    return Goal(
        subject_id=require_non_empty(_pick(doc, "employeeId", "subject_id", default=""), "Employee"),
        title=str(_pick(doc, "title", default="")),
        description=_pick(doc, "description"),
        deadline=deadline,
        status=parse_goal_status(_pick(doc, "status", default="in-progress")),
        progress=validate_progress(_pick(doc, "progress", default=0)),
    )
