import pytest

from clubfit.models import ClubReview, Opportunity, PlayerProfile
from clubfit.ranking import (
    OpportunityFilter,
    browse_opportunities,
    filter_opportunities,
    rank_opportunities,
    unique_positions,
)


@pytest.fixture(autouse=True)
def no_appeal(monkeypatch):
    monkeypatch.setenv("CLUBFIT_CLUB_APPEAL", "off")


def _pool() -> list[Opportunity]:
    return [
        Opportunity(need_id=1, position_needed="Centre Back", posting_club_name="Lille OSC", created_by_club_id=10),
        Opportunity(need_id=2, position_needed="Winger", posting_club_name="Sevilla FC", created_by_club_id=20),
        Opportunity(need_id=3, position_needed="Centre Forward", posting_club_name="Feyenoord", created_by_club_id=30, notes="Needs pace"),
        Opportunity(need_id=4, position_needed="Goalkeeper", posting_club_name="Benfica", created_by_club_id=40),
        Opportunity(need_id=5, position_needed="Centre Back", posting_club_name="Porto B", created_by_club_id=50),
    ]


def _profile() -> PlayerProfile:
    return PlayerProfile(playing_positions=["Winger"], preferred_countries=["Spain"])


def test_rank_orders_by_score_descending():
    ranked = rank_opportunities(_pool(), _profile())
    scores = [item.score for item in ranked]
    assert scores == sorted(scores, reverse=True)
    assert ranked[0].opportunity.need_id == 2
    assert ranked[0].score == 95
    assert ranked[1].opportunity.need_id == 3
    assert ranked[1].label == "Good Fit"


def test_rank_keeps_input_order_for_ties():
    ranked = rank_opportunities(_pool(), _profile())
    tied = [item.opportunity.need_id for item in ranked if item.score == 60]
    assert tied == [1, 4, 5]


def test_filter_by_position_score_and_search():
    ranked = rank_opportunities(_pool(), _profile())

    by_position = filter_opportunities(ranked, OpportunityFilter(position="Centre Back"))
    assert [item.opportunity.need_id for item in by_position] == [1, 5]

    everything = filter_opportunities(ranked, OpportunityFilter(position="all"))
    assert len(everything) == 5

    strong = filter_opportunities(ranked, OpportunityFilter(min_fit_score=70))
    assert [item.opportunity.need_id for item in strong] == [2, 3]

    by_notes = filter_opportunities(ranked, OpportunityFilter(search="PACE"))
    assert [item.opportunity.need_id for item in by_notes] == [3]

    by_club = filter_opportunities(ranked, OpportunityFilter(search="porto"))
    assert [item.opportunity.need_id for item in by_club] == [5]


def test_unique_positions_sorted():
    ranked = rank_opportunities(_pool(), _profile())
    assert unique_positions(ranked) == ["Centre Back", "Centre Forward", "Goalkeeper", "Winger"]


def test_browse_attaches_ratings_and_reports_totals():
    reviews = [
        ClubReview(club_id=10, overall_rating=4.0),
        ClubReview(club_id=10, overall_rating=4.5),
        ClubReview(club_id=10, overall_rating=4.5),
        ClubReview(club_id=10, overall_rating=4.0),
        ClubReview(club_id=50, overall_rating=3.0),
    ]
    result = browse_opportunities(
        _pool(),
        _profile(),
        reviews=reviews,
        criteria=OpportunityFilter(position="Centre Back"),
    )
    assert result.total == 5
    assert result.matched == 2
    assert result.positions == ["Centre Back", "Centre Forward", "Goalkeeper", "Winger"]

    lille, porto = result.opportunities
    assert lille.opportunity.need_id == 1
    assert lille.opportunity.club_rating == pytest.approx(4.25)
    assert lille.opportunity.review_count == 4
    assert lille.score == 75
    assert porto.opportunity.review_count == 1
    assert porto.score == 60
