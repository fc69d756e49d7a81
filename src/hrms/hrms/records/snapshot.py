from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional

from ..attendance.state_machine import AttendanceStateMachine
from ..core.enums import Action, Resource, Scope
from ..identity.model import Principal
from ..payroll.calculator.base import PayrollCalculator
from ..permissions.service import PermissionEvaluator
from .model import RecordSets
from .store import ATTENDANCE, EMPLOYEES, GOALS, PAYROLL, PERFORMANCE, RecordStore

# Field naming the owning subject in each collection.
SUBJECT_FIELDS = {
    ATTENDANCE: "uid",
    EMPLOYEES: "id",
    PAYROLL: "employeeId",
    PERFORMANCE: "employeeId",
    GOALS: "employeeId",
}

_RESOURCES = {
    ATTENDANCE: Resource.ATTENDANCE,
    EMPLOYEES: Resource.EMPLOYEES,
    PAYROLL: Resource.PAYROLL,
    PERFORMANCE: Resource.PERFORMANCE,
    GOALS: Resource.GOALS,
}


def load_record_sets(
    store: RecordStore,
    principal: Principal,
    permissions: PermissionEvaluator,
    *,
    day: Optional[date] = None,
    state_machine: Optional[AttendanceStateMachine] = None,
    calculator: Optional[PayrollCalculator] = None,
) -> RecordSets:
    """Fetch what a dashboard for ``principal`` needs, scoped by the permission table.

    Organisation-wide collections are read whole; everything else is filtered
    to the principal's own records. Payroll is not read at all for roles that
    may not view it. When ``day`` is given, attendance is limited to events on
    that local calendar day. The day is checked after mapping, because stored
    timestamps come back as datetimes, ISO strings or store-specific types.
    """

    documents = {}
    organization_wide = permissions.view_scope(principal.role, Resource.ATTENDANCE) == Scope.ORGANIZATION
    for collection, resource in _RESOURCES.items():
        if resource == Resource.PAYROLL and not permissions.is_allowed(principal.role, resource, Action.VIEW):
            documents[collection] = []
            continue

        filters = {}
        if not organization_wide or permissions.view_scope(principal.role, resource) == Scope.OWN:
            filters[SUBJECT_FIELDS[collection]] = principal.subject_id

        documents[collection] = store.query(collection, filters)

    sets = RecordSets.from_documents(documents, calculator=calculator)
    if day is None:
        return sets

    machine = state_machine or AttendanceStateMachine()
    return replace(sets, attendance=tuple(e for e in sets.attendance if machine.local_day(e) == day))
