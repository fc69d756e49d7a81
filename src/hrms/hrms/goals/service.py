from __future__ import annotations

from datetime import date
from typing import Any, Iterable

from ..core import constants
from ..core.enums import GoalStatus
from ..core.exceptions import ValidationError
from .model import Goal, GoalSummary


def validate_progress(value: Any) -> int:
    if isinstance(value, bool):
        raise ValidationError("Progress must be a whole number")
    try:
        progress = int(value)
    except (TypeError, ValueError):
        raise ValidationError("Progress must be a whole number") from None
    if progress != value and str(progress) != str(value).strip():
        raise ValidationError("Progress must be a whole number")
    if not constants.GOAL_PROGRESS_MIN <= progress <= constants.GOAL_PROGRESS_MAX:
        raise ValidationError(
            f"Progress must be between {constants.GOAL_PROGRESS_MIN} and {constants.GOAL_PROGRESS_MAX}"
        )
    return progress


def parse_goal_status(value: Any) -> GoalStatus:
    if isinstance(value, GoalStatus):
        return value
    text = str(value or "").strip().lower().replace(" ", "-").replace("_", "-")
    try:
        return GoalStatus(text)
    except ValueError:
        raise ValidationError(f"Unknown goal status: {value!r}") from None


def summarize_goals(goals: Iterable[Goal], today: date) -> GoalSummary:
    counts = {status: 0 for status in GoalStatus}
    overdue = 0
    for goal in goals:
        counts[goal.status] += 1
        if goal.is_overdue(today):
            overdue += 1
    return GoalSummary(
        in_progress=counts[GoalStatus.IN_PROGRESS],
        completed=counts[GoalStatus.COMPLETED],
        cancelled=counts[GoalStatus.CANCELLED],
        overdue=overdue,
    )
