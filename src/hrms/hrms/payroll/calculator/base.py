from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from ...core.constants import DEFAULT_MONEY_DECIMAL_PLACES
from ..model import SalaryBreakdown


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    # Money precision the calculator rounds to.
    decimal_places: int = DEFAULT_MONEY_DECIMAL_PLACES

    @abstractmethod
    def compute_breakdown(
        self,
        basic_salary: Any,
        allowances: Optional[Mapping[str, Any]] = None,
        deductions: Optional[Mapping[str, Any]] = None,
    ) -> SalaryBreakdown:
        raise NotImplementedError
