from clubfit.models import PlayerStatLine
from clubfit.stats import STAT_CONFIG, calculate_percentile, calculate_rank, rank_player_stats


def test_calculate_percentile_higher_is_better():
    values = [4, 1, 3, 2]
    assert calculate_percentile(1, values) == 0
    assert calculate_percentile(3, values) == 50
    assert calculate_percentile(4, values) == 75
    assert calculate_percentile(5, values) == 100


def test_calculate_percentile_lower_is_better():
    values = [4, 1, 3, 2]
    assert calculate_percentile(1, values, higher_is_better=False) == 100
    assert calculate_percentile(4, values, higher_is_better=False) == 25
    assert calculate_percentile(5, values, higher_is_better=False) == 0


def test_calculate_rank():
    values = [10, 20, 20, 5]
    assert calculate_rank(20, values) == 1
    assert calculate_rank(10, values) == 3
    assert calculate_rank(5, values) == 4
    assert calculate_rank(5, values, higher_is_better=False) == 1
    assert calculate_rank(7, values) == 0


def test_stat_config_marks_discipline_as_lower_is_better():
    lower = {key for key, higher in STAT_CONFIG if not higher}
    assert lower == {"yellowCards", "redCards", "fouls"}
    assert len(STAT_CONFIG) == 18


def test_rank_player_stats_filters_by_position_and_sorts_by_rating():
    players = [
        PlayerStatLine(player_id="a", name="A", position="F", stats={"rating": 7.1, "goals": 10, "fouls": 20}),
        PlayerStatLine(player_id="b", name="B", position="F", stats={"rating": 7.6, "goals": 4, "fouls": 5}),
        PlayerStatLine(player_id="c", name="C", position="D", stats={"rating": 8.0, "goals": 1}),
    ]
    ranked = rank_player_stats(players, position="F")
    assert [item.player.player_id for item in ranked] == ["b", "a"]

    top, second = ranked
    assert top.total_players == 2
    assert top.ranks["rating"] == 1
    assert top.ranks["fouls"] == 1
    assert second.ranks["goals"] == 1
    assert second.percentiles["goals"] == 50
    assert top.percentiles["assists"] == 0
    assert set(top.percentiles) == {key for key, _ in STAT_CONFIG}


def test_rank_player_stats_without_peers():
    assert rank_player_stats([], position="F") == []
