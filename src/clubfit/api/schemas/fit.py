from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from clubfit.models import ClubReview, FitReason, Opportunity, PlayerProfile


class FitRequest(BaseModel):
    opportunity: Opportunity
    profile: PlayerProfile


class FitResponse(BaseModel):
    need_id: int
    score: int
    label: str
    tier: str
    reasons: List[FitReason]


class RankRequest(BaseModel):
    profile: PlayerProfile
    opportunities: List[Opportunity] = Field(default_factory=list)
    reviews: List[ClubReview] | None = None
    position: str | None = None
    min_fit_score: int = Field(default=0, ge=0, le=95)
    search: str | None = None
    player_key: str | None = None


class ScoredOpportunityResponse(BaseModel):
    opportunity: Opportunity
    score: int
    label: str
    tier: str
    reasons: List[FitReason]
    saved: bool = False


class RankResponse(BaseModel):
    total: int
    matched: int
    positions: List[str]
    opportunities: List[ScoredOpportunityResponse]


class SavedToggleResponse(BaseModel):
    player_key: str
    need_id: int
    saved: bool
