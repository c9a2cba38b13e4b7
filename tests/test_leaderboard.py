import asyncio

from pymongo.errors import ServerSelectionTimeoutError

from trashcam.db import get_players_col
from trashcam.main import app
from trashcam.services.leaderboard import get_leaderboard, increment_points


def test_points_are_added_as_delta(client):
    r = client.post("/leaderboard", json={"name": "Sam", "points": 3})
    assert r.status_code == 200
    assert r.json() == {"name": "Sam", "points": 3}

    r = client.post("/leaderboard", json={"name": "Sam", "points": 2})
    assert r.json() == {"name": "Sam", "points": 5}

    assert client.get("/leaderboard").json() == [{"name": "Sam", "points": 5}]


def test_leaderboard_sorted_by_points_then_name(client):
    for name, pts in [("cara", 2), ("bob", 7), ("alice", 2), ("dan", 0), ("bob", 1)]:
        assert client.post("/leaderboard", json={"name": name, "points": pts}).status_code == 200

    rows = client.get("/leaderboard").json()
    assert rows == [
        {"name": "bob", "points": 8},
        {"name": "alice", "points": 2},
        {"name": "cara", "points": 2},
        {"name": "dan", "points": 0},
    ]
    points = [r["points"] for r in rows]
    assert points == sorted(points, reverse=True)


def test_malformed_body_is_400(client):
    r = client.post("/leaderboard", json={"name": "Sam"})
    assert r.status_code == 400
    assert "points" in r.json()["error"]

    r = client.post("/leaderboard", json={"name": "Sam", "points": -4})
    assert r.status_code == 400
    assert client.get("/leaderboard").json() == []


def test_points_beyond_int64_rejected(client):
    r = client.post("/leaderboard", json={"name": "Sam", "points": 10 ** 20})
    assert r.status_code == 400
    assert "points" in r.json()["error"]
    assert client.get("/leaderboard").json() == []

    r = client.post("/leaderboard", json={"name": "Sam", "points": 2 ** 63 - 1})
    assert r.status_code == 200
    assert r.json() == {"name": "Sam", "points": 2 ** 63 - 1}


def test_datastore_failure_is_500(client):
    class DownPlayers:
        async def find_one_and_update(self, *args, **kwargs):
            raise ServerSelectionTimeoutError("db down")

    app.dependency_overrides[get_players_col] = lambda: DownPlayers()
    r = client.post("/leaderboard", json={"name": "Sam", "points": 1})
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to update leaderboard"}


def test_concurrent_increments_sum(players_col):
    deltas = [1, 4, 2, 2, 5, 1, 3]

    async def run():
        await asyncio.gather(*(increment_points(players_col, "Sam", d) for d in deltas))
        return await get_leaderboard(players_col)

    assert asyncio.run(run()) == [{"name": "Sam", "points": sum(deltas)}]


def test_export_formats(client):
    client.post("/leaderboard", json={"name": "Sam", "points": 5})
    client.post("/leaderboard", json={"name": "Ana", "points": 9})

    assert client.get("/leaderboard/export").json() == {
        "players": [{"name": "Ana", "points": 9}, {"name": "Sam", "points": 5}]
    }

    csv = client.get("/leaderboard/export", params={"format": "csv"})
    assert csv.headers["content-type"].startswith("text/csv")
    assert csv.text.splitlines() == ["rank,name,points", "1,Ana,9", "2,Sam,5"]

    pdf = client.get("/leaderboard/export", params={"format": "pdf"})
    assert pdf.content.startswith(b"%PDF")

    bad = client.get("/leaderboard/export", params={"format": "xml"})
    assert bad.status_code == 400
    assert bad.json() == {"error": "format must be json|csv|pdf"}


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
