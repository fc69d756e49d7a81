from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Roles a principal can hold. Values are what the user records store."""

    EMPLOYEE = "Employee"
    HR = "HR"
    SENIOR_MANAGER = "Senior Manager"
    ADMIN = "Admin"
    MANAGEMENT_ADMIN = "Management Admin"


class Resource(str, Enum):
    ATTENDANCE = "Attendance"
    EMPLOYEES = "Employees"
    PAYROLL = "Payroll"
    PERFORMANCE = "Performance"
    GOALS = "Goals"


class Action(str, Enum):
    VIEW = "View"
    EDIT = "Edit"
    # Clock in/out on one's own attendance record.
    ACT = "Act"


class Decision(str, Enum):
    ALLOW = "Allow"
    DENY = "Deny"


class Scope(str, Enum):
    """How much of a resource a role sees when viewing it."""

    OWN = "own"
    ORGANIZATION = "organization"


class AttendanceEventType(str, Enum):
    CLOCK_IN = "in"
    CLOCK_OUT = "out"


class DayState(str, Enum):
    NOT_STARTED = "NotStarted"
    OPEN = "Open"
    CLOSED = "Closed"


class GoalStatus(str, Enum):
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PayslipStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
