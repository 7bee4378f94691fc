"""Pydantic models for API I/O."""

from .fit import (
    FitRequest,
    FitResponse,
    RankRequest,
    RankResponse,
    SavedToggleResponse,
    ScoredOpportunityResponse,
)
from .stats import (
    PercentileRequest,
    PercentileResponse,
    PlayerPercentileResponse,
    ReviewSummaryRequest,
    ReviewSummaryResponse,
)

__all__ = [
    "FitRequest",
    "FitResponse",
    "RankRequest",
    "RankResponse",
    "SavedToggleResponse",
    "ScoredOpportunityResponse",
    "PercentileRequest",
    "PercentileResponse",
    "PlayerPercentileResponse",
    "ReviewSummaryRequest",
    "ReviewSummaryResponse",
]
