from __future__ import annotations

from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable, Optional

from ..common.validators import require_number_in_range
from ..core import constants
from ..core.exceptions import ValidationError
from .model import PerformanceReview, ReviewSummary

_SCORE_QUANTUM = Decimal(1).scaleb(-constants.SCORE_DECIMAL_PLACES)


def _round_score(value: Decimal) -> float:
    return float(value.quantize(_SCORE_QUANTUM, rounding=ROUND_HALF_UP))


class PerformanceScorer:
    """Mean of the rated dimensions, 0 when nothing is rated."""

    dimensions = constants.RATING_DIMENSIONS

    def validate(self, ratings: Optional[Mapping[str, Any]]) -> dict[str, Decimal]:
        if ratings is None:
            return {}
        if not isinstance(ratings, Mapping):
            raise ValidationError("Ratings must be a mapping of dimension to score")

        unknown = sorted(str(k) for k in ratings if k not in self.dimensions)
        if unknown:
            raise ValidationError(f"Unknown rating dimension(s): {', '.join(unknown)}")

        present = {}
        for name in self.dimensions:
            value = ratings.get(name)
            if value is None:
                continue
            present[name] = require_number_in_range(
                value, name.capitalize(), constants.RATING_MIN, constants.RATING_MAX
            )
        return present

    def score(self, ratings: Optional[Mapping[str, Any]]) -> float:
        present = self.validate(ratings)
        if not present:
            return 0
        return _round_score(sum(present.values(), Decimal(0)) / len(present))

    def review_score(self, review: PerformanceReview) -> float:
        """Stored overall score when the review carries one, computed from ratings otherwise."""
        if review.overall_score is not None:
            return _round_score(Decimal(str(review.overall_score)))
        return self.score(review.ratings)

    def average_score(self, reviews: Iterable[PerformanceReview]) -> float:
        scores = [Decimal(str(self.review_score(r))) for r in reviews]
        if not scores:
            return 0
        return _round_score(sum(scores, Decimal(0)) / len(scores))

    def summarize(self, reviews: Iterable[PerformanceReview]) -> ReviewSummary:
        reviews = list(reviews)
        average = self.average_score(reviews)
        return ReviewSummary(
            total_reviews=len(reviews),
            average_score=average,
            employees_reviewed=len({r.employee_id for r in reviews}),
            label=rating_label(average),
        )


def rating_label(score: float) -> str:
    if score >= constants.EXCELLENT_SCORE:
        return "Excellent"
    if score >= constants.GOOD_SCORE:
        return "Good"
    if score > 0:
        return "Needs improvement"
    return "No reviews yet"
