from fastapi.testclient import TestClient

from leaderboard_api.application.use_cases.manage_leaderboard import (
    AddPlayerRequest,
    LeaderboardUseCase,
)
from leaderboard_api.infrastructure.adapters.heap_leaderboard_adapter import HeapLeaderboardAdapter
from leaderboard_api.main import app, get_use_case


def _client(monkeypatch, orientation: str = "max") -> TestClient:
    use_case = LeaderboardUseCase(HeapLeaderboardAdapter(orientation))
    monkeypatch.setitem(app.dependency_overrides, get_use_case, lambda: use_case)
    return TestClient(app)


def _add_scenario(client: TestClient) -> None:
    for name, power in [("Ian", 1300), ("Faker", 1400), ("Chovi", 1350), ("Zeus", 1300)]:
        resp = client.post("/api/players", json={"name": name, "power": power})
        assert resp.status_code == 201


def test_add_and_peek_top(monkeypatch) -> None:
    client = _client(monkeypatch)
    _add_scenario(client)
    resp = client.get("/api/players/top")
    assert resp.status_code == 200
    assert resp.json() == {"name": "Faker", "power": 1400, "rank": "Grandmaster"}


def test_remove_top_until_empty(monkeypatch) -> None:
    client = _client(monkeypatch)
    _add_scenario(client)
    powers = [client.delete("/api/players/top").json()["power"] for _ in range(4)]
    assert powers == [1400, 1350, 1300, 1300]

    resp = client.delete("/api/players/top")
    assert resp.status_code == 404
    assert resp.json()["detail"]["error"]["code"] == "EMPTY_LEADERBOARD"
    assert client.get("/api/players/top").status_code == 404


def test_find_player(monkeypatch) -> None:
    client = _client(monkeypatch)
    _add_scenario(client)
    assert client.get("/api/players/Zeus").json()["power"] == 1300

    resp = client.get("/api/players/Nobody")
    assert resp.status_code == 404
    error = resp.json()["detail"]["error"]
    assert error["code"] == "PLAYER_NOT_FOUND"
    assert error["details"] == {"name": "Nobody"}


def test_leaderboard_listing_is_heap_order(monkeypatch) -> None:
    client = _client(monkeypatch)
    for idx, power in enumerate([1, 2, 3]):
        client.post("/api/players", json={"name": f"p{idx}", "power": power})
    body = client.get("/api/leaderboard").json()
    assert body["orientation"] == "max"
    assert body["size"] == 3
    assert [e["power"] for e in body["entries"]] == [3, 1, 2]
    assert [e["heapIndex"] for e in body["entries"]] == [0, 1, 2]


def test_min_orientation_and_score_alias(monkeypatch) -> None:
    client = _client(monkeypatch, "min")
    client.post("/api/players", json={"name": "High", "score": 900})
    client.post("/api/players", json={"name": "Low", "power": 50})
    assert client.get("/api/players/top").json()["name"] == "Low"


def test_invalid_body_is_rejected(monkeypatch) -> None:
    client = _client(monkeypatch)
    assert client.post("/api/players", json={"name": "", "power": 10}).status_code == 422
    assert client.post("/api/players", json={"name": "x", "power": "lots"}).status_code == 422
    assert client.get("/api/leaderboard").json()["size"] == 0


def test_export_pdf(monkeypatch) -> None:
    client = _client(monkeypatch)
    _add_scenario(client)
    resp = client.get("/api/leaderboard/export.pdf")
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/pdf"
    assert resp.content.startswith(b"%PDF")


def test_health_and_root(monkeypatch) -> None:
    client = _client(monkeypatch)
    health = client.get("/health").json()
    assert health["status"] == "healthy"
    assert health["orientation"] in ("max", "min")
    assert "/api/leaderboard" in client.get("/").json()["endpoints"]["leaderboard"]


def test_use_case_results_are_explicit() -> None:
    use_case = LeaderboardUseCase(HeapLeaderboardAdapter("max"))
    empty = use_case.view_top()
    assert empty.success is False
    assert empty.entry is None
    assert empty.code == "EMPTY_LEADERBOARD"

    added = use_case.add_player(AddPlayerRequest(name="Keria", score=1050))
    assert added.success and added.entry.rank == "Master"
    assert use_case.find_player("Keria").entry is added.entry
    assert use_case.find_player("Ghost").code == "PLAYER_NOT_FOUND"


def test_store_override_is_scoped_to_one_test(monkeypatch) -> None:
    with monkeypatch.context() as scoped:
        _client(scoped)
        assert get_use_case in app.dependency_overrides
    assert get_use_case not in app.dependency_overrides
