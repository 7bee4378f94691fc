"""Canonical recruitment models shared across ingestion, scoring and the API."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict


class Opportunity(BaseModel):
    """A club's posted recruitment need, optionally joined with review aggregates."""

    need_id: int
    position_needed: str
    min_age: Optional[int] = Field(default=None, ge=0)
    max_age: Optional[int] = Field(default=None, ge=0)
    salary_range: Optional[str] = None
    preferred_foot: Optional[str] = None
    created_by_club_id: Optional[int] = None
    posting_club_name: str = ""
    notes: Optional[str] = None
    club_rating: Optional[float] = Field(default=None, ge=0.0, le=5.0)
    review_count: int = Field(default=0, ge=0)
    posting_club_logo_url: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_age_window(self) -> "Opportunity":
        if self.min_age is not None and self.max_age is not None and self.min_age > self.max_age:
            raise ValueError(f"min_age {self.min_age} is greater than max_age {self.max_age}")
        return self


class PlayerProfile(BaseModel):
    """Preferences of the player viewing opportunities."""

    playing_positions: List[str] = Field(default_factory=list)
    preferred_countries: List[str] = Field(default_factory=list)
    current_salary_range: Optional[str] = None
    desired_salary_range: Optional[str] = None
    languages: List[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def primary_position(self) -> Optional[str]:
        return self.playing_positions[0] if self.playing_positions else None


class FitReason(BaseModel):
    icon: str
    text: str

    model_config = ConfigDict(frozen=True)


class FitResult(BaseModel):
    score: int = Field(..., ge=0, le=95)
    reasons: List[FitReason] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class ClubReview(BaseModel):
    club_id: int
    overall_rating: float = Field(..., ge=0.0, le=5.0)
    category_ratings: Dict[str, float] = Field(default_factory=dict)
    comment: Optional[str] = None

    model_config = ConfigDict(frozen=True)
