"""Configuration helpers for positions, club countries and appeal reasons."""

from .positions import (
    CLUB_APPEAL_REASONS,
    AppealReason,
    get_similar_positions,
    iter_positions,
    resolve_club_country,
)

__all__ = [
    "CLUB_APPEAL_REASONS",
    "AppealReason",
    "get_similar_positions",
    "iter_positions",
    "resolve_club_country",
]
