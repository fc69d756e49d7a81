from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from ..common.validators import to_decimal
from ..core import constants
from ..core.exceptions import ValidationError


def default_components(basic_salary: Any, *, decimal_places: int = constants.DEFAULT_MONEY_DECIMAL_PLACES):
    """Pre-filled allowances and deductions offered when a payslip is started.

    Returns ``(allowances, deductions)``.
    """

    basic = to_decimal(basic_salary)
    if basic is None or basic < 0:
        raise ValidationError("Basic salary must be a non-negative number")

    quantum = Decimal(1).scaleb(-decimal_places)

    def pct(rate: str) -> Decimal:
        return (basic * Decimal(rate)).quantize(quantum, rounding=ROUND_HALF_UP)

    def flat(amount: int) -> Decimal:
        return Decimal(amount).quantize(quantum)

    allowances = {
        "hra": pct(constants.DEFAULT_HRA_RATE),
        "transport": flat(constants.DEFAULT_TRANSPORT_ALLOWANCE),
        "medical": flat(constants.DEFAULT_MEDICAL_ALLOWANCE),
    }
    deductions = {
        "tax": pct(constants.DEFAULT_TAX_RATE),
        "pf": pct(constants.DEFAULT_PF_RATE),
        "other": flat(0),
    }
    return allowances, deductions
