"""Opportunity ranking utilities (scoring, filtering, browsing)."""

from .browse import (
    ALL_POSITIONS,
    BrowseResult,
    OpportunityFilter,
    ScoredOpportunity,
    browse_opportunities,
    filter_opportunities,
    rank_opportunities,
    unique_positions,
)

__all__ = [
    "ALL_POSITIONS",
    "BrowseResult",
    "OpportunityFilter",
    "ScoredOpportunity",
    "browse_opportunities",
    "filter_opportunities",
    "rank_opportunities",
    "unique_positions",
]
