from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class PerformanceReview:
    employee_id: str
    period: str
    ratings: Mapping[str, Any] = field(default_factory=dict)
    overall_score: Optional[float] = None
    reviewer_id: Optional[str] = None
    employee_name: Optional[str] = None
    comments: Optional[str] = None


@dataclass(frozen=True)
class ReviewSummary:
    total_reviews: int
    average_score: float
    employees_reviewed: int
    label: str
