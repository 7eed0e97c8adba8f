import asyncio

from fastapi.testclient import TestClient

from diceroller.coordinator import GameCoordinator
from diceroller.http import create_http_app


def test_root_reports_server_running(recorder):
    client = TestClient(create_http_app(GameCoordinator(emit=recorder)))
    res = client.get("/")
    assert res.status_code == 200
    assert res.text == "Dice Roller Game Server is running!"


def test_state_endpoint_exposes_snapshot(recorder):
    coordinator = GameCoordinator(emit=recorder)
    asyncio.run(coordinator.join("s1", "Ann"))
    client = TestClient(create_http_app(coordinator))

    res = client.get("/api/state")
    assert res.status_code == 200
    data = res.json()
    assert data["players"] == [{"id": "s1", "name": "Ann", "currentRoll": None}]
    assert data["roundActive"] is False
    assert data["currentRound"] == 0
    assert data["totalRounds"] == 1
