"""Static lookup tables for positions, club countries and club appeal reasons."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, Optional, Tuple


@dataclass(frozen=True)
class AppealReason:
    icon: str
    text: str


_SIMILAR_POSITIONS: Dict[str, FrozenSet[str]] = {
    "Centre Forward": frozenset({"Winger", "Attacking Midfielder"}),
    "Winger": frozenset({"Centre Forward", "Attacking Midfielder", "Full Back"}),
    "Centre Back": frozenset({"Full Back", "Defensive Midfielder"}),
    "Full Back": frozenset({"Centre Back", "Winger", "Defensive Midfielder"}),
    "Central Midfielder": frozenset({"Attacking Midfielder", "Defensive Midfielder"}),
    "Attacking Midfielder": frozenset({"Central Midfielder", "Centre Forward", "Winger"}),
    "Defensive Midfielder": frozenset({"Central Midfielder", "Centre Back"}),
    "Goalkeeper": frozenset(),
}

# Order matters: the first fragment contained in the club name wins.
_CLUB_COUNTRIES: Tuple[Tuple[str, str], ...] = (
    ("Valencia", "Spain"),
    ("Betis", "Spain"),
    ("Sevilla", "Spain"),
    ("Ajax", "Netherlands"),
    ("PSV", "Netherlands"),
    ("Feyenoord", "Netherlands"),
    ("Porto", "Portugal"),
    ("Benfica", "Portugal"),
    ("Sporting", "Portugal"),
    ("Roma", "Italy"),
    ("Milan", "Italy"),
    ("Inter", "Italy"),
    ("Lyon", "France"),
    ("Lille", "France"),
    ("Monaco", "France"),
)

CLUB_APPEAL_REASONS: Tuple[AppealReason, ...] = (
    AppealReason("trophy", "Club has strong track record of developing players in your position"),
    AppealReason("star", "Perfect stepping stone to top European leagues"),
    AppealReason("growth", "Club showing upward trajectory with recent investments"),
    AppealReason("award", "Excellent coaching staff known for tactical development"),
    AppealReason("map-pin", "Great location with international exposure opportunities"),
    AppealReason("heart", "Club culture aligns with your professional values"),
    AppealReason("zap", "High probability of regular first-team appearances"),
    AppealReason("target", "Club specifically targeting players with your profile"),
    AppealReason("users", "Training facilities and sports science program match your needs"),
    AppealReason("star", "Strong network of scouts from bigger clubs regularly watch here"),
)


def iter_positions() -> Iterable[str]:
    """Return the standard positions known to the similarity table."""

    return _SIMILAR_POSITIONS.keys()


def get_similar_positions(position: str) -> FrozenSet[str]:
    """Positions that translate well from ``position``; empty when unknown."""

    return _SIMILAR_POSITIONS.get(position, frozenset())


def resolve_club_country(club_name: Optional[str]) -> Optional[str]:
    """Guess a club's country from well-known fragments of its name."""

    if not club_name:
        return None
    for fragment, country in _CLUB_COUNTRIES:
        if fragment in club_name:
            return country
    return None

