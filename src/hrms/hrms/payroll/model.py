from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Mapping, Optional

from ..core.enums import PayslipStatus


@dataclass(frozen=True)
class SalaryBreakdown:
    """Monetary breakdown of one payslip. Amounts are already rounded."""

    basic_salary: Decimal
    allowances: Mapping[str, Decimal]
    deductions: Mapping[str, Decimal]
    allowance_total: Decimal
    deduction_total: Decimal
    gross_salary: Decimal
    net_salary: Decimal
    warnings: tuple[str, ...] = ()

    @property
    def is_negative(self) -> bool:
        return self.net_salary < 0


@dataclass(frozen=True)
class Payslip:
    employee_id: str
    employee_name: str
    month: int
    year: int
    breakdown: SalaryBreakdown
    status: PayslipStatus = PayslipStatus.PENDING
    payslip_id: Optional[str] = None


@dataclass(frozen=True)
class PayrollSummary:
    pending_count: int = 0
    paid_count: int = 0
    pending_net_total: Decimal = Decimal(0)
    paid_net_total: Decimal = Decimal(0)
    employees: frozenset = field(default_factory=frozenset)
