from uuid import uuid4

import pytest
from httpx import ASGITransport, AsyncClient

from clubfit.api import create_app


@pytest.fixture(scope="module")
async def client():
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        async_client.app = app
        yield async_client


def _scenario_opportunity() -> dict:
    return {
        "need_id": 42,
        "position_needed": "Winger",
        "salary_range": "€2k-3k",
        "club_rating": 4.2,
        "review_count": 6,
        "posting_club_name": "Sevilla FC",
    }


def _profile() -> dict:
    return {"playing_positions": ["Winger"], "desired_salary_range": "€2k-3k", "preferred_countries": []}


@pytest.mark.anyio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.anyio
async def test_fit_endpoint(client: AsyncClient):
    resp = await client.post("/fit", json={"opportunity": _scenario_opportunity(), "profile": _profile()})
    assert resp.status_code == 200
    body = resp.json()
    assert body["need_id"] == 42
    assert body["score"] == 95
    assert body["label"] == "Excellent Fit"
    assert body["tier"] == "excellent"
    texts = " ".join(reason["text"] for reason in body["reasons"])
    assert "Perfect position match" in texts
    assert all(reason["icon"] for reason in body["reasons"])


@pytest.mark.anyio
async def test_fit_endpoint_rejects_invalid_opportunity(client: AsyncClient):
    bad = {"need_id": 1, "position_needed": "Winger", "min_age": 30, "max_age": 18}
    resp = await client.post("/fit", json={"opportunity": bad, "profile": _profile()})
    assert resp.status_code == 422


@pytest.mark.anyio
async def test_rank_endpoint_with_reviews_and_saved(client: AsyncClient):
    player_key = f"player-{uuid4()}"
    resp = await client.post(f"/saved/{player_key}/3/toggle")
    assert resp.status_code == 200
    assert resp.json()["saved"] is True

    payload = {
        "profile": {"playing_positions": ["Goalkeeper"]},
        "opportunities": [
            {"need_id": 1, "position_needed": "Centre Back", "posting_club_name": "Lille", "created_by_club_id": 10},
            {"need_id": 2, "position_needed": "Goalkeeper", "posting_club_name": "Ajax", "created_by_club_id": 20},
            {"need_id": 3, "position_needed": "Goalkeeper", "posting_club_name": "Roma", "created_by_club_id": 30},
        ],
        "reviews": [
            {"club_id": 20, "overall_rating": 4.5},
            {"club_id": 20, "overall_rating": 4.5},
            {"club_id": 20, "overall_rating": 4.5},
            {"club_id": 20, "overall_rating": 4.5},
        ],
        "position": "Goalkeeper",
        "player_key": player_key,
    }
    resp = await client.post("/opportunities/rank", json=payload)
    assert resp.status_code == 200
    body = resp.json()
    assert body["total"] == 3
    assert body["matched"] == 2
    assert body["positions"] == ["Centre Back", "Goalkeeper"]
    ids = [item["opportunity"]["need_id"] for item in body["opportunities"]]
    assert set(ids) == {2, 3}
    scores = [item["score"] for item in body["opportunities"]]
    assert scores == sorted(scores, reverse=True)
    by_id = {item["opportunity"]["need_id"]: item for item in body["opportunities"]}
    assert by_id[2]["opportunity"]["review_count"] == 4
    assert by_id[3]["saved"] is True
    assert by_id[2]["saved"] is False


@pytest.mark.anyio
async def test_saved_toggle_round_trip(client: AsyncClient):
    player_key = f"player-{uuid4()}"
    resp = await client.post(f"/saved/{player_key}/9/toggle")
    assert resp.json() == {"player_key": player_key, "need_id": 9, "saved": True}

    resp = await client.get(f"/saved/{player_key}")
    assert resp.status_code == 200
    assert resp.json()["need_ids"] == [9]

    resp = await client.post(f"/saved/{player_key}/9/toggle")
    assert resp.json()["saved"] is False
    resp = await client.get(f"/saved/{player_key}")
    assert resp.json()["need_ids"] == []


@pytest.mark.anyio
async def test_review_summary_endpoint(client: AsyncClient):
    payload = {
        "club_id": 5,
        "reviews": [
            {"club_id": 5, "overall_rating": 4.0, "category_ratings": {"Club Management": 2.0}},
            {"club_id": 5, "overall_rating": 5.0},
        ],
    }
    resp = await client.post("/reviews/summary", json=payload)
    assert resp.status_code == 200
    body = resp.json()
    assert body["review_count"] == 2
    assert body["avg_overall"] == pytest.approx(4.0)
    assert body["avg_management"] == pytest.approx(1.0)

    payload["reviews"].append({"club_id": 6, "overall_rating": 1.0})
    resp = await client.post("/reviews/summary", json=payload)
    assert resp.status_code == 400


@pytest.mark.anyio
async def test_percentiles_endpoint(client: AsyncClient):
    payload = {
        "position": "M",
        "players": [
            {"player_id": "1", "name": "One", "position": "M", "stats": {"rating": 6.9, "keyPasses": 30}},
            {"player_id": "2", "name": "Two", "position": "M", "stats": {"rating": 7.4, "keyPasses": 10}},
            {"player_id": "3", "name": "Three", "position": "D", "stats": {"rating": 8.1}},
        ],
    }
    resp = await client.post("/stats/percentiles", json=payload)
    assert resp.status_code == 200
    body = resp.json()
    assert body["total_players"] == 2
    assert [item["player"]["player_id"] for item in body["players"]] == ["2", "1"]
    assert body["players"][1]["ranks"]["keyPasses"] == 1

    resp = await client.post("/stats/percentiles", json={"position": "GK", "players": payload["players"]})
    assert resp.json()["total_players"] == 0
    assert resp.json()["message"]
