"""Peer-group statistics (percentiles, ranks)."""

from .percentiles import (
    STAT_CONFIG,
    PlayerPercentiles,
    calculate_percentile,
    calculate_rank,
    rank_player_stats,
)

__all__ = [
    "STAT_CONFIG",
    "PlayerPercentiles",
    "calculate_percentile",
    "calculate_rank",
    "rank_player_stats",
]
