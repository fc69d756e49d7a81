from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from src.hrms.hrms.attendance.state_machine import AttendanceStateMachine
from src.hrms.hrms.core.enums import Role
from src.hrms.hrms.dashboard.aggregator import DashboardAggregator
from src.hrms.hrms.identity.model import Principal
from src.hrms.hrms.permissions.service import PermissionEvaluator
from src.hrms.hrms.records.snapshot import load_record_sets
from src.hrms.hrms.records.store import InMemoryRecordStore



def seeded_store():
    return InMemoryRecordStore(
        {
            "attendance": [
                {"uid": "u1", "type": "in", "timestamp": datetime(2026, 3, 2, 9)},
                {"uid": "u2", "type": "in", "timestamp": datetime(2026, 3, 2, 8)},
                {"uid": "u2", "type": "in", "timestamp": datetime(2026, 3, 1, 8)},
            ],
            "employees": [{"id": "u1", "name": "An"}, {"id": "u2", "name": "Binh"}],
            "payroll": [
                {"employeeId": "u1", "month": 2, "year": 2026, "basicSalary": 1000, "status": "pending"},
                {"employeeId": "u2", "month": 2, "year": 2026, "basicSalary": 1000, "status": "pending"},
            ],
            "performance": [
                {"employeeId": "u1", "period": "Q1", "overallScore": 8},
                {"employeeId": "u2", "period": "Q1", "overallScore": 5},
            ],
            "goals": [
                {"employeeId": "u1", "title": "A", "deadline": "2026-04-01"},
                {"employeeId": "u2", "title": "B", "deadline": "2026-04-01"},
            ],
        }
    )


def test_employee_snapshot_contains_only_own_records():
    sets = load_record_sets(seeded_store(), Principal("u1", Role.EMPLOYEE), PermissionEvaluator(), day=date(2026, 3, 2))

    assert {e.subject_id for e in sets.attendance} == {"u1"}
    assert [e.employee_id for e in sets.employees] == ["u1"]
    assert sets.payroll == ()
    assert {r.employee_id for r in sets.performance} == {"u1"}
    assert {g.subject_id for g in sets.goals} == {"u1"}


def test_hr_snapshot_is_organization_wide_for_the_day():
    sets = load_record_sets(seeded_store(), Principal("hr", Role.HR), PermissionEvaluator(), day=date(2026, 3, 2))

    assert len(sets.attendance) == 2
    assert len(sets.employees) == 2
    assert len(sets.payroll) == 2
    assert len(sets.goals) == 2


def test_senior_manager_snapshot_skips_payroll():
    sets = load_record_sets(seeded_store(), Principal("sm", Role.SENIOR_MANAGER), PermissionEvaluator())

    assert sets.payroll == ()
    assert len(sets.attendance) == 3
    assert len(sets.performance) == 2


def test_day_filter_accepts_iso_string_timestamps():
    store = InMemoryRecordStore(
        {
            "attendance": [
                {"uid": "u1", "type": "in", "timestamp": "2026-03-02T08:55:00"},
                {"uid": "u2", "type": "in", "timestamp": "2026-03-01T08:55:00"},
            ],
            "employees": [{"id": "u1", "name": "An"}, {"id": "u2", "name": "Binh"}],
        }
    )
    permissions = PermissionEvaluator()

    org = load_record_sets(store, Principal("hr", Role.HR), permissions, day=date(2026, 3, 2))
    own = load_record_sets(store, Principal("u1", Role.EMPLOYEE), permissions, day=date(2026, 3, 2))
    bundle = DashboardAggregator(permissions).aggregate(Role.HR, "hr", org, today=date(2026, 3, 2))

    assert [e.subject_id for e in org.attendance] == ["u1"]
    assert [e.subject_id for e in own.attendance] == ["u1"]
    assert bundle.present_today == 1


def test_day_filter_uses_the_machine_time_zone():
    store = InMemoryRecordStore(
        {"attendance": [{"uid": "u1", "type": "in", "timestamp": "2026-03-01T23:30:00+00:00"}]}
    )
    machine = AttendanceStateMachine(tz=timezone(timedelta(hours=7)))

    sets = load_record_sets(
        store, Principal("u1", Role.EMPLOYEE), PermissionEvaluator(), day=date(2026, 3, 2), state_machine=machine
    )

    assert len(sets.attendance) == 1
