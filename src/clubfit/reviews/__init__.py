"""Club review aggregation helpers."""

from .aggregate import (
    CATEGORY_KEYS,
    ClubReviewSummary,
    aggregate_club_rating,
    attach_club_ratings,
    summarize_club_reviews,
)

__all__ = [
    "CATEGORY_KEYS",
    "ClubReviewSummary",
    "aggregate_club_rating",
    "attach_club_ratings",
    "summarize_club_reviews",
]
