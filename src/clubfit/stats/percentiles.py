"""Percentiles and ranks of season statistics within a positional peer group."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from clubfit.models import PlayerStatLine
from clubfit.scoring import round_half_up


STAT_CONFIG: Tuple[Tuple[str, bool], ...] = (
    ("rating", True),
    ("goals", True),
    ("assists", True),
    ("appearances", True),
    ("minutesPlayed", True),
    ("accuratePassesPercentage", True),
    ("totalDuelsWonPercentage", True),
    ("successfulDribblesPercentage", True),
    ("aerialDuelsWonPercentage", True),
    ("ballRecovery", True),
    ("keyPasses", True),
    ("shotsOnTarget", True),
    ("goalConversionPercentage", True),
    ("clearances", True),
    ("accurateCrossesPercentage", True),
    ("yellowCards", False),
    ("redCards", False),
    ("fouls", False),
)


@dataclass(frozen=True)
class PlayerPercentiles:
    player: PlayerStatLine
    percentiles: Dict[str, int]
    ranks: Dict[str, int]
    total_players: int


def calculate_percentile(value: float, values: Sequence[float], higher_is_better: bool = True) -> int:
    """Share of the peer group strictly below ``value``, as a whole percentage.

    Values above every peer count as 100 (or 0 when lower is better).
    """

    sorted_values = sorted(values)
    n = len(sorted_values)
    index = bisect_left(sorted_values, value)
    if index >= n:
        return 100 if higher_is_better else 0
    percentile = round_half_up(index / n * 100)
    return percentile if higher_is_better else 100 - percentile


def calculate_rank(value: float, values: Sequence[float], higher_is_better: bool = True) -> int:
    """1-based rank of ``value`` with the best value first; 0 when absent."""

    ordered = sorted(values, reverse=higher_is_better)
    try:
        return ordered.index(value) + 1
    except ValueError:
        return 0


def rank_player_stats(
    players: Sequence[PlayerStatLine],
    *,
    position: Optional[str] = None,
) -> List[PlayerPercentiles]:
    """Percentiles and ranks per configured stat, ordered by match rating."""

    peers = [player for player in players if position is None or player.position == position]
    if not peers:
        return []

    columns = {key: [player.stat(key) for player in peers] for key, _ in STAT_CONFIG}
    results: List[PlayerPercentiles] = []
    for player in peers:
        percentiles: Dict[str, int] = {}
        ranks: Dict[str, int] = {}
        for key, higher_is_better in STAT_CONFIG:
            value = player.stat(key)
            percentiles[key] = calculate_percentile(value, columns[key], higher_is_better)
            ranks[key] = calculate_rank(value, columns[key], higher_is_better)
        results.append(
            PlayerPercentiles(
                player=player,
                percentiles=percentiles,
                ranks=ranks,
                total_players=len(peers),
            )
        )

    results.sort(key=lambda item: -item.player.stat("rating"))
    return results


__all__ = [
    "PlayerPercentiles",
    "STAT_CONFIG",
    "calculate_percentile",
    "calculate_rank",
    "rank_player_stats",
]
