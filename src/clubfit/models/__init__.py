"""Pydantic models shared by every clubfit layer."""

from .opportunity import ClubReview, FitReason, FitResult, Opportunity, PlayerProfile
from .stats import PlayerStatLine

__all__ = [
    "ClubReview",
    "FitReason",
    "FitResult",
    "Opportunity",
    "PlayerProfile",
    "PlayerStatLine",
]
