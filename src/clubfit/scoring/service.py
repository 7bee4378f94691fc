"""Fit scoring between a player profile and a club recruitment need."""

from __future__ import annotations

import logging
import math
import os
from typing import List, Tuple

from clubfit.config import CLUB_APPEAL_REASONS, get_similar_positions, resolve_club_country
from clubfit.models import FitReason, FitResult, Opportunity, PlayerProfile


logger = logging.getLogger(__name__)

_CLUB_APPEAL_ENV = "CLUBFIT_CLUB_APPEAL"
_CLUB_APPEAL_CHOICES = ("seeded", "off")

BASE_SCORE = 60
MAX_SCORE = 95
EXACT_POSITION_BONUS = 25
SIMILAR_POSITION_BONUS = 10
SALARY_MATCH_BONUS = 15
SALARY_COMPETITIVE_BONUS = 8
PREFERRED_COUNTRY_BONUS = 12
HIGH_RATING_BONUS = 15
GOOD_RATING_BONUS = 8

_CURRENCY_MARK = "€"


def _env_choice(name: str, default: str, choices: Tuple[str, ...]) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value not in choices:
        logger.warning("Invalid value for %s: %s; using default %s", name, raw, default)
        return default
    return value


def _club_appeal_enabled() -> bool:
    return _env_choice(_CLUB_APPEAL_ENV, "seeded", _CLUB_APPEAL_CHOICES) == "seeded"


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def derive_seed(opportunity: Opportunity, profile: PlayerProfile) -> int:
    """Seed from the need id plus the code point of the primary position's first letter."""

    primary = profile.primary_position
    return opportunity.need_id + (ord(primary[0]) if primary else 0)


def seeded_random(seed: int, minimum: float, maximum: float, offset: int = 0) -> float:
    """Stable pseudo-random value in ``[minimum, maximum)`` for ``seed + offset``."""

    x = math.sin(seed + offset) * 10000
    return (x - math.floor(x)) * (maximum - minimum) + minimum


def random_club_appeal_bonus(seed: int) -> Tuple[float, List[FitReason]]:
    """Pick one to three canned club appeal reasons and their seeded bonus points.

    Placeholder signal: the draws carry no information about the club. Repeat
    draws of the same reason are dropped, so fewer reasons than requested may
    come back.
    """

    pool_size = len(CLUB_APPEAL_REASONS)
    wanted = int(math.floor(seeded_random(seed, 1, 4)))
    picked: list[int] = []
    points = 0.0
    for i in range(wanted):
        index = int(math.floor(seeded_random(seed, 0, pool_size, i)))
        if index in picked:
            continue
        picked.append(index)
        points += seeded_random(seed, 3, 8, i + 10)
    reasons = [
        FitReason(icon=CLUB_APPEAL_REASONS[index].icon, text=CLUB_APPEAL_REASONS[index].text)
        for index in picked
    ]
    return points, reasons


def _position_bonus(opportunity: Opportunity, profile: PlayerProfile) -> Tuple[int, FitReason | None]:
    needed = opportunity.position_needed
    positions = profile.playing_positions
    if needed in positions:
        return EXACT_POSITION_BONUS, FitReason(
            icon="target",
            text=f"Perfect position match - You're exactly what they're looking for as a {needed}",
        )
    if any(needed in get_similar_positions(position) for position in positions):
        return SIMILAR_POSITION_BONUS, FitReason(
            icon="users",
            text=f"Your {profile.primary_position} experience translates well to {needed}",
        )
    return 0, None


def _salary_bonus(opportunity: Opportunity, profile: PlayerProfile) -> Tuple[int, FitReason | None]:
    offered = opportunity.salary_range
    wanted = profile.desired_salary_range or profile.current_salary_range
    if not offered or not wanted:
        return 0, None
    if offered == wanted:
        return SALARY_MATCH_BONUS, FitReason(
            icon="trending-up",
            text="Salary range perfectly matches your current expectations",
        )
    if _CURRENCY_MARK in offered and _CURRENCY_MARK in wanted:
        return SALARY_COMPETITIVE_BONUS, FitReason(
            icon="trending-up",
            text="Competitive salary package that could advance your career",
        )
    return 0, None


def _country_bonus(opportunity: Opportunity, profile: PlayerProfile) -> Tuple[int, FitReason | None]:
    if not profile.preferred_countries:
        return 0, None
    country = resolve_club_country(opportunity.posting_club_name)
    if country and country in profile.preferred_countries:
        return PREFERRED_COUNTRY_BONUS, FitReason(
            icon="map-pin",
            text=f"Located in {country} - one of your preferred countries",
        )
    return 0, None


def _format_rating(rating: float) -> str:
    """One decimal place, halves rounded up (4.25 -> "4.3")."""

    return f"{round_half_up(rating * 10) / 10:.1f}"


def _rating_bonus(opportunity: Opportunity) -> Tuple[int, FitReason | None]:
    rating = opportunity.club_rating
    count = opportunity.review_count
    if not rating or not count:
        return 0, None
    if rating >= 4.0 and count >= 4:
        return HIGH_RATING_BONUS, FitReason(
            icon="award",
            text=f"Highly-rated club with excellent player feedback ({_format_rating(rating)}/5.0)",
        )
    if rating >= 3.5:
        return GOOD_RATING_BONUS, FitReason(
            icon="trophy",
            text=f"Well-regarded club with positive player reviews ({_format_rating(rating)}/5.0)",
        )
    return 0, None


def calculate_fit_score(opportunity: Opportunity, profile: PlayerProfile) -> FitResult:
    """Score how well ``profile`` fits ``opportunity``.

    Every rule only adds points to the base of 60; the total is rounded half
    up and capped at 95. Missing optional fields skip their rule.
    """

    seed = derive_seed(opportunity, profile)
    score: float = BASE_SCORE
    reasons: list[FitReason] = []

    for points, reason in (
        _position_bonus(opportunity, profile),
        _salary_bonus(opportunity, profile),
    ):
        score += points
        if reason is not None:
            reasons.append(reason)

    if _club_appeal_enabled():
        appeal_points, appeal_reasons = random_club_appeal_bonus(seed)
        score += appeal_points
        reasons.extend(appeal_reasons)

    for points, reason in (
        _country_bonus(opportunity, profile),
        _rating_bonus(opportunity),
    ):
        score += points
        if reason is not None:
            reasons.append(reason)

    final = max(0, min(round_half_up(score), MAX_SCORE))
    logger.debug("Need %s scored %s (raw %.2f, %s reasons)", opportunity.need_id, final, score, len(reasons))
    return FitResult(score=final, reasons=reasons)


def fit_label(score: int) -> str:
    if score >= 85:
        return "Excellent Fit"
    if score >= 70:
        return "Good Fit"
    if score >= 55:
        return "Potential Fit"
    return "Limited Fit"


def fit_tier(score: int) -> str:
    """Badge tier used for colour coding."""

    if score >= 85:
        return "excellent"
    if score >= 70:
        return "good"
    return "neutral"
