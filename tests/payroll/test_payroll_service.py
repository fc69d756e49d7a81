from __future__ import annotations

from decimal import Decimal

import pytest

from src.hrms.hrms.core.enums import PayslipStatus, Role
from src.hrms.hrms.core.exceptions import AuthorizationError, ValidationError
from src.hrms.hrms.identity.model import Principal
from src.hrms.hrms.payroll.calculator.standard_calculator import StandardPayrollCalculator
from src.hrms.hrms.payroll.service import PayrollService, summarize_payslips
from src.hrms.hrms.payroll.templates import default_components
from src.hrms.hrms.permissions.service import PermissionEvaluator

HR = Principal(subject_id="hr1", role=Role.HR)


def make_slip(svc, employee_id="e1", basic=50000, **kwargs):
    return svc.generate_payslip(
        HR,
        employee_id=employee_id,
        employee_name="Lan",
        month=kwargs.get("month", 1),
        year=kwargs.get("year", 2026),
        basic_salary=basic,
        allowances={"hra": 5000},
        deductions={"tax": 3000},
    )


def test_default_components_template():
    allowances, deductions = default_components(50000)

    assert allowances == {"hra": Decimal("5000.00"), "transport": Decimal("2000.00"), "medical": Decimal("1000.00")}
    assert deductions == {"tax": Decimal("3000.00"), "pf": Decimal("2000.00"), "other": Decimal("0.00")}


def test_default_components_rejects_bad_salary():
    with pytest.raises(ValidationError):
        default_components("n/a")


def test_generate_payslip_is_pending():
    slip = make_slip(PayrollService(PermissionEvaluator()))

    assert slip.status == PayslipStatus.PENDING
    assert slip.breakdown.net_salary == Decimal("52000.00")
    assert (slip.month, slip.year) == (1, 2026)


@pytest.mark.parametrize("role", [Role.EMPLOYEE, Role.SENIOR_MANAGER])
def test_only_payroll_editors_generate_payslips(role):
    svc = PayrollService(PermissionEvaluator())

    with pytest.raises(AuthorizationError):
        svc.generate_payslip(
            Principal(subject_id="x", role=role),
            employee_id="e1",
            employee_name="Lan",
            month=1,
            year=2026,
            basic_salary=1000,
        )


@pytest.mark.parametrize("month, year", [(0, 2026), (13, 2026), ("x", 2026), (1, 1800)])
def test_invalid_period(month, year):
    with pytest.raises(ValidationError):
        make_slip(PayrollService(PermissionEvaluator()), month=month, year=year)


def test_mark_paid_only_once():
    svc = PayrollService(PermissionEvaluator())
    slip = make_slip(svc)

    paid = svc.mark_paid(HR, slip)

    assert paid.status == PayslipStatus.PAID
    assert slip.status == PayslipStatus.PENDING
    with pytest.raises(ValidationError):
        svc.mark_paid(HR, paid)


def test_summarize_payslips():
    svc = PayrollService(PermissionEvaluator())
    a = make_slip(svc, "e1")
    b = svc.mark_paid(HR, make_slip(svc, "e2", basic=40000))
    c = make_slip(svc, "e1", month=2)

    summary = summarize_payslips([a, b, c])

    assert summary.pending_count == 2
    assert summary.paid_count == 1
    assert summary.pending_net_total == Decimal("104000.00")
    assert summary.paid_net_total == Decimal("42000.00")
    assert summary.employees == frozenset({"e1", "e2"})


def test_service_template_follows_calculator_precision():
    svc = PayrollService(PermissionEvaluator(), calculator=StandardPayrollCalculator(decimal_places=0))

    allowances, deductions = svc.default_components(12345)

    assert str(allowances["hra"]) == "1235"
    assert str(deductions["pf"]) == "494"
