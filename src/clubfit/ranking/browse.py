"""Rank and filter opportunities for a player's browsing view."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from clubfit.models import ClubReview, FitResult, Opportunity, PlayerProfile
from clubfit.reviews import attach_club_ratings
from clubfit.scoring import calculate_fit_score, fit_label, fit_tier


logger = logging.getLogger(__name__)

ALL_POSITIONS = "all"


@dataclass(frozen=True)
class ScoredOpportunity:
    """Opportunity annotated with its fit result."""

    opportunity: Opportunity
    fit: FitResult

    @property
    def score(self) -> int:
        return self.fit.score

    @property
    def label(self) -> str:
        return fit_label(self.fit.score)

    @property
    def tier(self) -> str:
        return fit_tier(self.fit.score)


@dataclass(frozen=True)
class OpportunityFilter:
    """Browsing filters; ``position`` of ``None`` or ``"all"`` keeps every position."""

    position: Optional[str] = None
    min_fit_score: int = 0
    search: str = ""


@dataclass(frozen=True)
class BrowseResult:
    opportunities: List[ScoredOpportunity]
    total: int
    matched: int
    positions: List[str]


def rank_opportunities(
    opportunities: Iterable[Opportunity],
    profile: PlayerProfile,
) -> List[ScoredOpportunity]:
    """Score every opportunity and order by fit, best first.

    Equal scores keep their input order.
    """

    scored = [
        ScoredOpportunity(opportunity=opportunity, fit=calculate_fit_score(opportunity, profile))
        for opportunity in opportunities
    ]
    scored.sort(key=lambda item: -item.fit.score)
    return scored


def _matches_search(opportunity: Opportunity, term: str) -> bool:
    needle = term.lower()
    haystacks = (opportunity.posting_club_name, opportunity.position_needed, opportunity.notes or "")
    return any(needle in value.lower() for value in haystacks)


def _passes_filter(item: ScoredOpportunity, criteria: OpportunityFilter) -> bool:
    if criteria.position and criteria.position != ALL_POSITIONS:
        if item.opportunity.position_needed != criteria.position:
            return False
    if item.fit.score < criteria.min_fit_score:
        return False
    if criteria.search and not _matches_search(item.opportunity, criteria.search):
        return False
    return True


def filter_opportunities(
    scored: Sequence[ScoredOpportunity],
    criteria: OpportunityFilter,
) -> List[ScoredOpportunity]:
    return [item for item in scored if _passes_filter(item, criteria)]


def unique_positions(scored: Iterable[ScoredOpportunity]) -> List[str]:
    return sorted({item.opportunity.position_needed for item in scored})


def browse_opportunities(
    opportunities: Sequence[Opportunity],
    profile: PlayerProfile,
    *,
    reviews: Optional[Iterable[ClubReview]] = None,
    criteria: Optional[OpportunityFilter] = None,
) -> BrowseResult:
    """Join review ratings, rank by fit and apply browsing filters."""

    if reviews is not None:
        opportunities = attach_club_ratings(opportunities, reviews)
    ranked = rank_opportunities(opportunities, profile)
    selected = filter_opportunities(ranked, criteria or OpportunityFilter())
    logger.info(
        "Ranked %s opportunities for %s; %s matched filters",
        len(ranked),
        profile.primary_position or "unknown position",
        len(selected),
    )
    return BrowseResult(
        opportunities=selected,
        total=len(ranked),
        matched=len(selected),
        positions=unique_positions(ranked),
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
