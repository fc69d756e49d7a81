from __future__ import annotations

from datetime import date
from typing import Optional

from ..attendance.state_machine import AttendanceStateMachine
from ..core.enums import Action, GoalStatus, PayslipStatus, Resource, Scope
from ..performance.scorer import PerformanceScorer, rating_label
from ..permissions.service import PermissionEvaluator
from ..records.model import RecordSets
from .model import MetricBundle

_SLICES = ("attendance", "employees", "payroll", "performance", "goals")


class DashboardAggregator:
    """Role-dependent dashboard metrics over a caller-supplied snapshot.

    Own-scope roles only ever see figures computed from their own records: the
    snapshot is filtered by subject before any metric is derived.
    """

    def __init__(
        self,
        permissions: PermissionEvaluator,
        *,
        state_machine: Optional[AttendanceStateMachine] = None,
        scorer: Optional[PerformanceScorer] = None,
    ):
        self._permissions = permissions
        self._machine = state_machine or AttendanceStateMachine()
        self._scorer = scorer or PerformanceScorer()

    def aggregate(self, role, subject_id: str, record_sets: RecordSets, *, today: Optional[date] = None) -> MetricBundle:
        today = today or self._machine.today()
        missing = tuple(name for name in _SLICES if getattr(record_sets, name) is None)

        if self._permissions.view_scope(role, Resource.ATTENDANCE) == Scope.ORGANIZATION:
            return self._organization(role, record_sets, today, missing)
        return self._own(str(subject_id), record_sets, today, missing)

    def _own(self, subject_id: str, rs: RecordSets, today: date, missing: tuple[str, ...]) -> MetricBundle:
        events = [e for e in rs.attendance or () if e.subject_id == subject_id]
        reviews = [r for r in rs.performance or () if r.employee_id == subject_id]
        goals = [g for g in rs.goals or () if g.subject_id == subject_id]

        status = self._machine.derive_day_status(events, today, subject_id=subject_id)
        avg = self._scorer.average_score(reviews)
        active_goals = sum(1 for g in goals if g.status == GoalStatus.IN_PROGRESS)

        activity = []
        if status.clock_in_time:
            activity.append(f"Clocked in at {status.clock_in_time:%H:%M:%S}")
        if status.clock_out_time:
            activity.append(f"Clocked out at {status.clock_out_time:%H:%M:%S}")
        if reviews:
            activity.append(f"{len(reviews)} performance review(s) received")
        if active_goals:
            activity.append(f"{active_goals} active goal(s) in progress")

        return MetricBundle(
            scope=Scope.OWN,
            total_employees=1,
            present_today=1 if status.is_present else 0,
            pending_payslips=0,
            avg_performance=avg,
            active_goals=active_goals,
            performance_label=rating_label(avg),
            attendance_today=status,
            recent_activity=tuple(activity) or ("No recent activity",),
            missing=missing,
        )

    def _organization(self, role, rs: RecordSets, today: date, missing: tuple[str, ...]) -> MetricBundle:
        total_employees = len(rs.employees or ())
        present = self._machine.count_distinct_present(rs.attendance or (), today)
        reviews = rs.performance or ()
        avg = self._scorer.average_score(reviews)
        active_goals = sum(1 for g in rs.goals or () if g.status == GoalStatus.IN_PROGRESS)

        pending = 0
        if self._permissions.is_allowed(role, Resource.PAYROLL, Action.VIEW):
            pending = sum(1 for p in rs.payroll or () if p.status == PayslipStatus.PENDING)

        activity = [
            f"{total_employees} total employees registered",
            f"{present} employees present today",
            f"{len(reviews)} performance reviews completed",
            f"{active_goals} active goals in progress",
        ]
        if pending:
            activity.append(f"{pending} pending payslips to process")

        return MetricBundle(
            scope=Scope.ORGANIZATION,
            total_employees=total_employees,
            present_today=present,
            pending_payslips=pending,
            avg_performance=avg,
            active_goals=active_goals,
            performance_label=rating_label(avg),
            recent_activity=tuple(activity),
            missing=missing,
        )
