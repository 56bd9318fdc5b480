import pytest
from fastapi.testclient import TestClient

from game.puzzle import canonical_puzzle
from web.app import app


@pytest.fixture
def client():
    return TestClient(app)


def tile_ids(state, words):
    lookup = {t["word"]: t["id"] for r in state["rows"] for t in r["tiles"]}
    return [lookup[w] for w in words]


def test_health(client):
    assert client.get("/health").json() == {"ok": True}


def test_play_through_api(client):
    state = client.post("/sessions", json={"seed": 3, "unit_penalty": 0}).json()
    sid = state["id"]
    assert len(state["rows"]) == 4

    for tile in tile_ids(state, ["MARK", "PATSY", "PIGEON", "SAP"]):
        res = client.post(f"/sessions/{sid}/toggle", json={"tile": tile}).json()
        assert res["changed"] is True

    res = client.post(f"/sessions/{sid}/submit").json()
    assert res["outcome"] == "match"
    assert res["rows"][0]["difficulty"] == "YELLOW"
    assert res["selection"] == []

    assert client.get(f"/sessions/{sid}").json()["rows"] == res["rows"]


def test_miss_then_locked(client):
    state = client.post("/sessions", json={"seed": 3}).json()
    sid = state["id"]
    for tile in tile_ids(state, ["MARK", "KC", "HEN", "ELO"]):
        client.post(f"/sessions/{sid}/toggle", json={"tile": tile})

    res = client.post(f"/sessions/{sid}/submit").json()
    assert res["outcome"] == "miss"
    assert res["locked"] is True
    assert res["remaining_minutes"] == 1

    res = client.post(f"/sessions/{sid}/submit").json()
    assert res["outcome"] == "locked"
    assert res["failures"] == 1

    res = client.post(f"/sessions/{sid}/clear").json()
    assert res["selection"] == []


def test_shuffle_endpoint_keeps_tiles(client):
    state = client.post("/sessions", json={"seed": 9}).json()
    sid = state["id"]
    res = client.post(f"/sessions/{sid}/shuffle").json()
    words = sorted(t["word"] for r in res["rows"] for t in r["tiles"])
    assert words == sorted(canonical_puzzle().words)


def test_custom_puzzle_validation(client):
    groups = canonical_puzzle().to_dict()["groups"]
    groups[3]["words"] = ["ELO", "MOAN", "SOL", "MARK"]
    res = client.post("/sessions", json={"groups": groups})
    assert res.status_code == 422
    assert "Duplicate" in res.json()["detail"]


def test_unknown_session(client):
    assert client.get("/sessions/nope").status_code == 404
    assert client.post("/sessions/nope/submit").status_code == 404


def test_play_through_to_win_then_locked_in(client):
    state = client.post("/sessions", json={"seed": 4, "unit_penalty": 0}).json()
    sid = state["id"]

    outcomes = []
    for group in canonical_puzzle().groups:
        for tile in tile_ids(state, group.words):
            client.post(f"/sessions/{sid}/toggle", json={"tile": tile})
        state = client.post(f"/sessions/{sid}/submit").json()
        outcomes.append(state["outcome"])

    assert outcomes == ["match", "match", "match", "won"]
    assert state["won"] is True
    assert all(r["solved"] for r in state["rows"])
    rows = state["rows"]

    res = client.post(f"/sessions/{sid}/toggle", json={"tile": 0}).json()
    assert res["changed"] is False
    assert res["selection"] == []

    res = client.post(f"/sessions/{sid}/submit").json()
    assert res["outcome"] == "ignored"

    res = client.post(f"/sessions/{sid}/shuffle").json()
    assert res["rows"] == rows
    assert res["won"] is True
