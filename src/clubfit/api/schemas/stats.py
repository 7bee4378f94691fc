from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field

from clubfit.models import ClubReview, PlayerStatLine


class ReviewSummaryRequest(BaseModel):
    club_id: int | None = None
    reviews: List[ClubReview] = Field(default_factory=list)


class ReviewSummaryResponse(BaseModel):
    club_id: int | None
    review_count: int
    avg_overall: float
    avg_punctuality: float
    avg_conditions: float
    avg_management: float
    avg_fair_salary: float


class PercentileRequest(BaseModel):
    position: str | None = None
    players: List[PlayerStatLine] = Field(default_factory=list)


class PlayerPercentileResponse(BaseModel):
    player: PlayerStatLine
    percentiles: Dict[str, int]
    ranks: Dict[str, int]
    total_players: int


class PercentileResponse(BaseModel):
    position: str | None
    total_players: int
    players: List[PlayerPercentileResponse]
    message: str | None = None
