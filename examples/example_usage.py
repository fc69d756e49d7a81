"""Example: drive the rule layer without any web framework.

Records come from an in-memory store here; a real deployment points
RECORD_STORE at MySQL and gets the principal from the Flask session.
"""

from datetime import date

from src.hrms.hrms.container import build_container
from src.hrms.hrms.core.enums import Role
from src.hrms.hrms.identity.model import Principal
from src.hrms.hrms.records.store import InMemoryRecordStore


def main():
    store = InMemoryRecordStore(
        {
            "attendance": [{"uid": "u1", "name": "An", "type": "in", "timestamp": "2026-03-02T08:55:00"}],
            "employees": [{"id": "u1", "name": "An"}, {"id": "u2", "name": "Binh"}],
            "payroll": [{"employeeId": "u2", "month": 2, "year": 2026, "basicSalary": 50000, "status": "pending"}],
            "performance": [{"employeeId": "u1", "period": "Q1", "ratings": {"quality": 8, "productivity": 6}}],
            "goals": [{"employeeId": "u1", "title": "Onboarding", "deadline": "2026-03-31"}],
        }
    )
    container = build_container(record_store=store)
    today = date(2026, 3, 2)

    for principal in (Principal("u1", Role.EMPLOYEE), Principal("hr1", Role.HR)):
        sets = container.snapshot(principal, day=today)
        bundle = container.dashboard.aggregate(principal.role, principal.subject_id, sets, today=today)
        print(principal.role.value, bundle.recent_activity)


if __name__ == "__main__":
    main()
