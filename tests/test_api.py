import time

import anyio
import pytest
from fastapi.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from colorfloor.auth import create_access_token, decode_player_token
from colorfloor.database import engine
from colorfloor.game import SqlRoundRecorder
from colorfloor.main import create_app
from colorfloor.models import Elimination, RoundStatus, RoundSummary


@pytest.fixture
def client():
    app = create_app(broadcast_url="memory://", run_session_loop=False)
    with TestClient(app) as client:
        yield client


def _receive_until(ws, message_type, limit=10):
    for _ in range(limit):
        message = ws.receive_json()
        if message["type"] == message_type:
            return message
    raise AssertionError(f"no {message_type} message received")


def test_join_issues_player_token(client):
    response = client.post("/join", json={"name": "Ann"})
    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"

    token_data = decode_player_token(body["access_token"])
    assert token_data.player_id == body["player_id"]
    assert token_data.name == "Ann"


def test_join_rejects_empty_name(client):
    assert client.post("/join", json={"name": ""}).status_code == 422


def test_decode_rejects_bad_tokens():
    assert decode_player_token(None) is None
    assert decode_player_token("not-a-jwt") is None
    assert decode_player_token(create_access_token({"name": "nobody"})) is None


def test_status_starts_in_lobby(client):
    body = client.get("/status").json()
    assert body["phase"] == "Lobby"
    assert body["stage"] == "Idle"
    assert body["players"] == []


def test_rounds_history(client):
    summary = RoundSummary(
        status=RoundStatus.COMPLETED,
        started_at=time.time() - 10,
        ended_at=time.time(),
        ticks=2,
        player_count=2,
        eliminations=[Elimination(player_id="b", tick=1), Elimination(player_id="a", tick=2)],
    )
    anyio.run(SqlRoundRecorder(engine).record_round, summary)

    rounds = client.get("/rounds").json()
    assert rounds[0]["last_standing"] == ["a"]

    detail = client.get(f"/rounds/{rounds[0]['id']}").json()
    assert [e["player_id"] for e in detail["eliminations"]] == ["b", "a"]

    assert client.get("/rounds/999999").status_code == 404


def test_websocket_requires_token(client):
    with pytest.raises(WebSocketDisconnect):
        with client.websocket_connect("/ws") as ws:
            ws.receive_json()


def test_websocket_move_and_ping(client):
    token = client.post("/join", json={"name": "Ann"}).json()
    player_id = token["player_id"]

    with client.websocket_connect(f"/ws?token={token['access_token']}") as ws:
        welcome = _receive_until(ws, "welcome")
        assert welcome["player_id"] == player_id

        ws.send_json({"type": "move", "position": [1, 2, 3]})
        ws.send_json({"type": "ping"})
        _receive_until(ws, "pong")

        players = client.get("/status").json()["players"]
        assert players == [{"player_id": player_id, "name": "Ann", "position": [1.0, 2.0, 3.0]}]

        ws.send_text("{not json")
        assert _receive_until(ws, "error")["message"] == "Invalid message format"

        ws.send_json({"type": "move", "position": [1, 2]})
        assert _receive_until(ws, "error")["message"] == "Invalid message format"
