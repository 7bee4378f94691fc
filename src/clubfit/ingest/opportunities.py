"""Helpers to load opportunity, review and profile files into canonical models."""

from __future__ import annotations

import csv
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional, Sequence, Tuple

from pydantic import BaseModel, ValidationError

from clubfit.models import ClubReview, Opportunity, PlayerProfile
from clubfit.reviews import CATEGORY_KEYS


logger = logging.getLogger(__name__)

DEFAULT_OPPORTUNITY_MAPPING = {
    "need_id": "need_id",
    "position_needed": "position_needed",
    "min_age": "min_age",
    "max_age": "max_age",
    "salary_range": "salary_range",
    "preferred_foot": "preferred_foot",
    "created_by_club_id": "created_by_club_id",
    "posting_club_name": "posting_club_name",
    "notes": "notes",
}


class OpportunityRow(BaseModel):
    raw_need_id: str
    raw_position: str
    raw_min_age: Optional[str] = None
    raw_max_age: Optional[str] = None
    raw_salary_range: Optional[str] = None
    raw_preferred_foot: Optional[str] = None
    raw_club_id: Optional[str] = None
    raw_club_name: str = ""
    raw_notes: Optional[str] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, str], mapping: Mapping[str, str]) -> "OpportunityRow":
        def extract(key: str, *, default: Optional[str] = None) -> Optional[str]:
            spec = mapping.get(key, key)
            if "|" in spec:
                parts = [row.get(col.strip(), "").strip() for col in spec.split("|") if row.get(col.strip())]
                return " ".join(parts) if parts else default
            value = row.get(spec)
            if value is None:
                return default
            value = value.strip()
            return value if value else default

        return cls(
            raw_need_id=extract("need_id", default="") or "",
            raw_position=extract("position_needed", default="") or "",
            raw_min_age=extract("min_age"),
            raw_max_age=extract("max_age"),
            raw_salary_range=extract("salary_range"),
            raw_preferred_foot=extract("preferred_foot"),
            raw_club_id=extract("created_by_club_id"),
            raw_club_name=extract("posting_club_name", default="") or "",
            raw_notes=extract("notes"),
        )


@dataclass
class LoadReport:
    total_rows: int = 0
    loaded_rows: int = 0
    skipped_rows: List[str] = field(default_factory=list)


def _parse_int(raw: Optional[str], *, label: str) -> Optional[int]:
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{label} '{raw}' is not an integer") from exc


def load_opportunity_csv(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[OpportunityRow]:
    mapping = {**DEFAULT_OPPORTUNITY_MAPPING, **(mapping or {})}
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        rows = [OpportunityRow.from_mapping(row, mapping) for row in reader]
    return rows


def rows_to_opportunities(rows: Sequence[OpportunityRow]) -> Tuple[List[Opportunity], LoadReport]:
    """Convert raw rows, skipping (and reporting) rows that cannot be parsed."""

    report = LoadReport(total_rows=len(rows))
    opportunities: List[Opportunity] = []
    for line_no, row in enumerate(rows, start=2):
        label = f"line {line_no}: {row.raw_club_name or '?'} {row.raw_position or '?'}".strip()
        try:
            need_id = _parse_int(row.raw_need_id or None, label="need_id")
            if need_id is None:
                raise ValueError("need_id is missing")
            if not row.raw_position:
                raise ValueError("position_needed is missing")
            opportunity = Opportunity(
                need_id=need_id,
                position_needed=row.raw_position,
                min_age=_parse_int(row.raw_min_age, label="min_age"),
                max_age=_parse_int(row.raw_max_age, label="max_age"),
                salary_range=row.raw_salary_range,
                preferred_foot=row.raw_preferred_foot,
                created_by_club_id=_parse_int(row.raw_club_id, label="created_by_club_id"),
                posting_club_name=row.raw_club_name,
                notes=row.raw_notes,
            )
        except (ValueError, ValidationError) as exc:
            logger.warning("Skipping opportunity %s (%s)", label, exc)
            report.skipped_rows.append(label)
            continue
        opportunities.append(opportunity)

    report.loaded_rows = len(opportunities)
    return opportunities, report


def load_opportunities_from_csv(
    path: Path,
    *,
    mapping: Mapping[str, str] | None = None,
) -> Tuple[List[Opportunity], LoadReport]:
    return rows_to_opportunities(load_opportunity_csv(path, mapping=mapping))


def load_reviews_csv(path: Path) -> List[ClubReview]:
    """Read ``club_id,overall_rating`` rows plus any category rating columns."""

    reviews: List[ClubReview] = []
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        for line_no, row in enumerate(reader, start=2):
            try:
                categories = {
                    key: float(row[key])
                    for key in CATEGORY_KEYS
                    if row.get(key) not in (None, "")
                }
                reviews.append(
                    ClubReview(
                        club_id=int(row["club_id"]),
                        overall_rating=float(row["overall_rating"]),
                        category_ratings=categories,
                        comment=(row.get("comment") or None),
                    )
                )
            except (KeyError, TypeError, ValueError) as exc:
                logger.warning("Skipping review on line %s of %s: %s", line_no, path, exc)
    return reviews


def load_player_profile(path: Path) -> PlayerProfile:
    """Load a player profile JSON document, raising ``ValueError`` when invalid."""

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid profile JSON in {path}: {exc}") from exc
    try:
        return PlayerProfile.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid player profile in {path}: {exc}") from exc
