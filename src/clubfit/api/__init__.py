"""REST API for clubfit opportunity scoring."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from fastapi import FastAPI, HTTPException

from clubfit.api.schemas import (
    FitRequest,
    FitResponse,
    PercentileRequest,
    PercentileResponse,
    PlayerPercentileResponse,
    RankRequest,
    RankResponse,
    ReviewSummaryRequest,
    ReviewSummaryResponse,
    SavedToggleResponse,
    ScoredOpportunityResponse,
)
from clubfit.persistence import SavedOpportunityStore
from clubfit.ranking import OpportunityFilter, ScoredOpportunity, browse_opportunities
from clubfit.reviews import summarize_club_reviews
from clubfit.scoring import calculate_fit_score, fit_label, fit_tier
from clubfit.stats import rank_player_stats


logger = logging.getLogger(__name__)


def _scored_to_response(item: ScoredOpportunity, *, saved: bool = False) -> ScoredOpportunityResponse:
    return ScoredOpportunityResponse(
        opportunity=item.opportunity,
        score=item.score,
        label=item.label,
        tier=item.tier,
        reasons=list(item.fit.reasons),
        saved=saved,
    )


def _validate_player_key(player_key: str) -> str:
    key = player_key.strip()
    if not key:
        raise HTTPException(status_code=400, detail="player_key must not be blank")
    return key


def create_app(db_path: Path | str | None = None) -> FastAPI:
    app = FastAPI(title="clubfit")
    store = SavedOpportunityStore(db_path or Path(__file__).resolve().parent.parent / "clubfit.sqlite")
    app.state.saved_store = store

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/fit", response_model=FitResponse)
    async def fit(request: FitRequest) -> FitResponse:
        result = calculate_fit_score(request.opportunity, request.profile)
        return FitResponse(
            need_id=request.opportunity.need_id,
            score=result.score,
            label=fit_label(result.score),
            tier=fit_tier(result.score),
            reasons=list(result.reasons),
        )

    @app.post("/opportunities/rank", response_model=RankResponse)
    async def rank(request: RankRequest) -> RankResponse:
        criteria = OpportunityFilter(
            position=request.position,
            min_fit_score=request.min_fit_score,
            search=request.search or "",
        )
        result = browse_opportunities(
            request.opportunities,
            request.profile,
            reviews=request.reviews,
            criteria=criteria,
        )
        saved_ids: set[int] = set()
        if request.player_key:
            saved_ids = set(store.list_saved(_validate_player_key(request.player_key)))
        return RankResponse(
            total=result.total,
            matched=result.matched,
            positions=result.positions,
            opportunities=[
                _scored_to_response(item, saved=item.opportunity.need_id in saved_ids)
                for item in result.opportunities
            ],
        )

    @app.post("/reviews/summary", response_model=ReviewSummaryResponse)
    async def review_summary(request: ReviewSummaryRequest) -> ReviewSummaryResponse:
        club_ids = {review.club_id for review in request.reviews}
        if request.club_id is not None and club_ids - {request.club_id}:
            raise HTTPException(status_code=400, detail="reviews belong to a different club")
        summary = summarize_club_reviews(request.reviews, club_id=request.club_id)
        return ReviewSummaryResponse(
            club_id=summary.club_id,
            review_count=summary.review_count,
            avg_overall=summary.avg_overall,
            avg_punctuality=summary.avg_punctuality,
            avg_conditions=summary.avg_conditions,
            avg_management=summary.avg_management,
            avg_fair_salary=summary.avg_fair_salary,
        )

    @app.post("/stats/percentiles", response_model=PercentileResponse)
    async def percentiles(request: PercentileRequest) -> PercentileResponse:
        ranked = rank_player_stats(request.players, position=request.position)
        message = None
        if not ranked:
            message = "No players found with stats for this position"
        return PercentileResponse(
            position=request.position,
            total_players=len(ranked),
            players=[
                PlayerPercentileResponse(
                    player=item.player,
                    percentiles=item.percentiles,
                    ranks=item.ranks,
                    total_players=item.total_players,
                )
                for item in ranked
            ],
            message=message,
        )

    @app.get("/saved/{player_key}")
    async def list_saved(player_key: str) -> dict[str, Any]:
        key = _validate_player_key(player_key)
        return {"player_key": key, "need_ids": store.list_saved(key)}

    @app.post("/saved/{player_key}/{need_id}/toggle", response_model=SavedToggleResponse)
    async def toggle_saved(player_key: str, need_id: int) -> SavedToggleResponse:
        key = _validate_player_key(player_key)
        saved = store.toggle(key, need_id)
        logger.info("Player %s %s opportunity %s", key, "saved" if saved else "unsaved", need_id)
        return SavedToggleResponse(player_key=key, need_id=need_id, saved=saved)

    return app
