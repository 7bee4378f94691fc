"""Club review aggregation feeding the fit scorer and review summaries."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from statistics import fmean
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

from clubfit.models import ClubReview, Opportunity


CATEGORY_KEYS: Tuple[str, ...] = (
    "Salary Punctuality",
    "Training Conditions",
    "Club Management",
    "Fair Salary",
)


@dataclass(frozen=True)
class ClubReviewSummary:
    club_id: Optional[int]
    review_count: int
    avg_overall: float
    avg_punctuality: float
    avg_conditions: float
    avg_management: float
    avg_fair_salary: float
    reviews: List[ClubReview] = field(default_factory=list)


def aggregate_club_rating(reviews: Sequence[ClubReview]) -> Tuple[Optional[float], int]:
    """Mean overall rating and review count; ``(None, 0)`` without reviews."""

    if not reviews:
        return None, 0
    return fmean(review.overall_rating for review in reviews), len(reviews)


def _group_by_club(reviews: Iterable[ClubReview]) -> Mapping[int, List[ClubReview]]:
    grouped: dict[int, List[ClubReview]] = defaultdict(list)
    for review in reviews:
        grouped[review.club_id].append(review)
    return grouped


def attach_club_ratings(
    opportunities: Sequence[Opportunity],
    reviews: Iterable[ClubReview],
) -> List[Opportunity]:
    """Return copies of ``opportunities`` carrying their posting club's rating."""

    grouped = _group_by_club(reviews)
    enriched: List[Opportunity] = []
    for opportunity in opportunities:
        rating, count = aggregate_club_rating(grouped.get(opportunity.created_by_club_id, []))
        enriched.append(opportunity.model_copy(update={"club_rating": rating, "review_count": count}))
    return enriched


def _weighted_score(review: ClubReview) -> float:
    present = [
        review.category_ratings[key]
        for key in CATEGORY_KEYS
        if isinstance(review.category_ratings.get(key), (int, float))
    ]
    category_average = fmean(present) if present else review.overall_rating
    return review.overall_rating * 0.5 + category_average * 0.5


def summarize_club_reviews(
    reviews: Sequence[ClubReview],
    *,
    club_id: Optional[int] = None,
) -> ClubReviewSummary:
    """Blend overall and category ratings into a single club summary."""

    count = len(reviews)
    if count == 0:
        return ClubReviewSummary(
            club_id=club_id,
            review_count=0,
            avg_overall=0.0,
            avg_punctuality=0.0,
            avg_conditions=0.0,
            avg_management=0.0,
            avg_fair_salary=0.0,
        )

    sums = {key: 0.0 for key in CATEGORY_KEYS}
    total_weighted = 0.0
    for review in reviews:
        total_weighted += _weighted_score(review)
        for key in CATEGORY_KEYS:
            sums[key] += review.category_ratings.get(key) or 0.0

    return ClubReviewSummary(
        club_id=club_id,
        review_count=count,
        avg_overall=total_weighted / count,
        avg_punctuality=sums["Salary Punctuality"] / count,
        avg_conditions=sums["Training Conditions"] / count,
        avg_management=sums["Club Management"] / count,
        avg_fair_salary=sums["Fair Salary"] / count,
        reviews=list(reviews),
    )


__all__ = [
    "CATEGORY_KEYS",
    "ClubReviewSummary",
    "aggregate_club_rating",
    "attach_club_ratings",
    "summarize_club_reviews",
]
