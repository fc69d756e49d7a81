from __future__ import annotations

import pytest

from src.hrms.hrms.core.exceptions import ValidationError
from src.hrms.hrms.performance.model import PerformanceReview
from src.hrms.hrms.performance.scorer import PerformanceScorer, rating_label


def test_mean_of_present_dimensions():
    assert PerformanceScorer().score({"quality": 8, "productivity": 6}) == 7.00


def test_empty_ratings_score_zero():
    scorer = PerformanceScorer()

    assert scorer.score({}) == 0
    assert scorer.score(None) == 0
    assert scorer.score({"quality": None, "teamwork": None}) == 0


def test_missing_dimensions_are_not_zeros():
    assert PerformanceScorer().score({"quality": 9, "teamwork": None, "leadership": 7}) == 8.0


@pytest.mark.parametrize(
    "ratings, expected",
    [
        ({"quality": 8, "productivity": 7, "teamwork": 7}, 7.33),
        ({"quality": 8, "productivity": 8, "teamwork": 7}, 7.67),
        ({"quality": 10, "productivity": 10, "teamwork": 10, "communication": 10, "leadership": 10}, 10.0),
        ({"quality": "6", "productivity": 7.5}, 6.75),
    ],
)
def test_two_decimal_rounding(ratings, expected):
    assert PerformanceScorer().score(ratings) == expected


def test_scoring_is_repeatable():
    scorer = PerformanceScorer()
    ratings = {"quality": 7, "productivity": 8, "teamwork": 9}

    assert repr(scorer.score(ratings)) == repr(scorer.score(ratings))


@pytest.mark.parametrize("value", [0, 11, -3, 10.01, "high", True])
def test_out_of_range_or_non_numeric_is_a_validation_error(value):
    with pytest.raises(ValidationError):
        PerformanceScorer().score({"quality": value})


def test_unknown_dimension_is_rejected():
    with pytest.raises(ValidationError):
        PerformanceScorer().score({"quality": 5, "punctuality": 5})


def test_review_score_prefers_stored_overall_score():
    scorer = PerformanceScorer()

    stored = PerformanceReview(employee_id="u1", period="Q1", ratings={"quality": 2}, overall_score=9.5)
    computed = PerformanceReview(employee_id="u1", period="Q2", ratings={"quality": 6, "teamwork": 8})

    assert scorer.review_score(stored) == 9.5
    assert scorer.review_score(computed) == 7.0
    assert scorer.average_score([stored, computed]) == 8.25


def test_summarize_reviews():
    scorer = PerformanceScorer()
    reviews = [
        PerformanceReview(employee_id="u1", period="Q1", overall_score=8),
        PerformanceReview(employee_id="u1", period="Q2", overall_score=9),
        PerformanceReview(employee_id="u2", period="Q1", overall_score=7),
    ]

    summary = scorer.summarize(reviews)

    assert summary.total_reviews == 3
    assert summary.average_score == 8.0
    assert summary.employees_reviewed == 2
    assert summary.label == "Excellent"
    assert scorer.summarize([]).label == "No reviews yet"


@pytest.mark.parametrize(
    "score, label",
    [(8, "Excellent"), (6.5, "Good"), (3, "Needs improvement"), (0, "No reviews yet")],
)
def test_rating_label(score, label):
    assert rating_label(score) == label


def test_stored_overall_score_is_rounded_half_up():
    review = PerformanceReview(employee_id="u1", period="Q1", overall_score=8.125)

    assert PerformanceScorer().review_score(review) == 8.13
