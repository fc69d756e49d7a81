from __future__ import annotations

import logging
from collections.abc import Mapping as MappingABC
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Mapping, Optional

from ...common.validators import to_decimal
from ...core.constants import DEFAULT_MONEY_DECIMAL_PLACES, SUPPORTED_MONEY_DECIMAL_PLACES
from ...core.exceptions import ValidationError
from ..model import SalaryBreakdown
from .base import PayrollCalculator

logger = logging.getLogger(__name__)


class StandardPayrollCalculator(PayrollCalculator):
    """gross = basic + allowances, net = gross - deductions.

    Every amount is rounded half-up to the currency unit first and totals are
    summed from the rounded amounts, so the same inputs always give the same
    figures. A negative net is reported as a warning, not clamped.
    """

    def __init__(self, *, decimal_places: int = DEFAULT_MONEY_DECIMAL_PLACES):
        if decimal_places not in SUPPORTED_MONEY_DECIMAL_PLACES:
            raise ValidationError(f"Unsupported money precision: {decimal_places}")
        self.decimal_places = decimal_places
        self._quantum = Decimal(1).scaleb(-decimal_places)

    def round(self, amount: Decimal) -> Decimal:
        return amount.quantize(self._quantum, rounding=ROUND_HALF_UP)

    def compute_breakdown(
        self,
        basic_salary: Any,
        allowances: Optional[Mapping[str, Any]] = None,
        deductions: Optional[Mapping[str, Any]] = None,
    ) -> SalaryBreakdown:
        if basic_salary is None:
            raise ValidationError("Basic salary is required")
        basic = to_decimal(basic_salary)
        if basic is None:
            raise ValidationError(f"Basic salary must be a finite number, got {basic_salary!r}")
        if basic < 0:
            raise ValidationError("Basic salary cannot be negative")
        basic = self.round(basic)

        warnings: list[str] = []
        clean_allowances = self._clean_components(allowances, "allowance", warnings)
        clean_deductions = self._clean_components(deductions, "deduction", warnings)

        allowance_total = sum(clean_allowances.values(), Decimal(0))
        deduction_total = sum(clean_deductions.values(), Decimal(0))
        gross = basic + allowance_total
        net = gross - deduction_total
        if net < 0:
            warnings.append(f"Deductions ({deduction_total}) exceed gross salary ({gross})")

        for message in warnings:
            logger.warning("Payroll: %s", message)

        return SalaryBreakdown(
            basic_salary=basic,
            allowances=clean_allowances,
            deductions=clean_deductions,
            allowance_total=self.round(allowance_total),
            deduction_total=self.round(deduction_total),
            gross_salary=self.round(gross),
            net_salary=self.round(net),
            warnings=tuple(warnings),
        )

    def _clean_components(self, components: Any, kind: str, warnings: list[str]) -> dict[str, Decimal]:
        if components is None:
            return {}
        if not isinstance(components, MappingABC):
            warnings.append(f"Ignored {kind}s: expected a name-to-amount mapping, got {type(components).__name__}")
            return {}

        out: dict[str, Decimal] = {}
        for name in sorted(components, key=str):
            raw = components[name]
            if raw is None or (isinstance(raw, str) and not raw.strip()):
                out[str(name)] = self.round(Decimal(0))
                continue

            amount = to_decimal(raw)
            if amount is None:
                warnings.append(f"{kind.capitalize()} {name!s}: {raw!r} is not a number, counted as 0")
                amount = Decimal(0)
            elif amount < 0:
                warnings.append(f"{kind.capitalize()} {name!s}: negative amount {raw!r} counted as 0")
                amount = Decimal(0)
            out[str(name)] = self.round(amount)
        return out
