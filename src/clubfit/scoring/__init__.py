"""Fit scoring for player/opportunity pairings."""

from .service import (
    calculate_fit_score,
    derive_seed,
    fit_label,
    fit_tier,
    random_club_appeal_bonus,
    round_half_up,
    seeded_random,
)

__all__ = [
    "calculate_fit_score",
    "derive_seed",
    "fit_label",
    "fit_tier",
    "random_club_appeal_bonus",
    "round_half_up",
    "seeded_random",
]
