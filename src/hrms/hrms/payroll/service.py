from __future__ import annotations

from dataclasses import replace
from decimal import Decimal
from typing import Any, Iterable, Mapping, Optional

from ..common.validators import require_non_empty
from ..core.enums import Action, PayslipStatus, Resource
from ..core.exceptions import ValidationError
from ..identity.model import Principal
from ..permissions.service import PermissionEvaluator
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import Payslip, PayrollSummary
from .templates import default_components


class PayrollService:
    """Use cases around payslips. Returns values; persisting them is the caller's job."""

    def __init__(self, permissions: PermissionEvaluator, *, calculator: Optional[PayrollCalculator] = None):
        self._permissions = permissions
        self._calculator = calculator or StandardPayrollCalculator()

    def default_components(self, basic_salary: Any) -> tuple[dict[str, Decimal], dict[str, Decimal]]:
        """Template allowances and deductions, rounded to this service's money precision."""
        return default_components(basic_salary, decimal_places=self._calculator.decimal_places)

    def generate_payslip(
        self,
        principal: Principal,
        *,
        employee_id: str,
        employee_name: str,
        month: int,
        year: int,
        basic_salary: Any,
        allowances: Optional[Mapping[str, Any]] = None,
        deductions: Optional[Mapping[str, Any]] = None,
    ) -> Payslip:
        self._permissions.require(principal.role, Resource.PAYROLL, Action.EDIT)

        employee_id = require_non_empty(employee_id, "Employee")
        month, year = _validate_period(month, year)
        breakdown = self._calculator.compute_breakdown(basic_salary, allowances, deductions)

        return Payslip(
            employee_id=employee_id,
            employee_name=(employee_name or "").strip(),
            month=month,
            year=year,
            breakdown=breakdown,
            status=PayslipStatus.PENDING,
        )

    def mark_paid(self, principal: Principal, payslip: Payslip) -> Payslip:
        self._permissions.require(principal.role, Resource.PAYROLL, Action.EDIT)
        if payslip.status != PayslipStatus.PENDING:
            raise ValidationError("Only pending payslips can be marked as paid")
        return replace(payslip, status=PayslipStatus.PAID)


def _validate_period(month: Any, year: Any) -> tuple[int, int]:
    try:
        month, year = int(month), int(year)
    except (TypeError, ValueError):
        raise ValidationError("Payslip period must be a numeric month and year") from None
    if not 1 <= month <= 12:
        raise ValidationError("Month must be between 1 and 12")
    if year < 1900:
        raise ValidationError("Year is not valid")
    return month, year


def summarize_payslips(payslips: Iterable[Payslip]) -> PayrollSummary:
    pending = paid = 0
    pending_total = paid_total = Decimal(0)
    employees = set()
    for p in payslips:
        employees.add(p.employee_id)
        if p.status == PayslipStatus.PAID:
            paid += 1
            paid_total += p.breakdown.net_salary
        else:
            pending += 1
            pending_total += p.breakdown.net_salary
    return PayrollSummary(
        pending_count=pending,
        paid_count=paid,
        pending_net_total=pending_total,
        paid_net_total=paid_total,
        employees=frozenset(employees),
    )
