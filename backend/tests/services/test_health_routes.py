"""Health & Root Routes: liveness, readiness and the static greeting.

Invariants:
    - / and /health/ answer without touching the store
    - /health/ready is 200 when ping succeeds, 503 when it fails
"""

from unittest.mock import AsyncMock, MagicMock

from pymongo.errors import ServerSelectionTimeoutError

from lotus_ledger import __version__
from lotus_ledger.api.routes.root import GREETING
from lotus_ledger.infrastructure.database import MongoClientManager


def _manager_with_ping(ping: AsyncMock) -> MongoClientManager:
    client = MagicMock()
    client.__getitem__.return_value.command = ping
    return MongoClientManager(
        "mongodb://localhost:27017", "lotus_ledger_test", "game", client=client,
    )


async def test_root_returns_greeting(client):
    res = await client.get("/")
    assert res.status_code == 200
    assert res.json() == {"message": GREETING}


async def test_liveness_always_healthy(client):
    res = await client.get("/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"
    assert res.json()["version"] == __version__


async def test_readiness_ok_when_ping_succeeds(app, client):
    ping = AsyncMock(return_value={"ok": 1.0})
    app.state.db_manager = _manager_with_ping(ping)
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"
    ping.assert_awaited_once_with("ping")


async def test_readiness_503_when_ping_fails(app, client):
    app.state.db_manager = _manager_with_ping(
        AsyncMock(side_effect=ServerSelectionTimeoutError("no servers")),
    )
    res = await client.get("/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_manager_hands_out_configured_collection():
    client = MagicMock()
    manager = MongoClientManager(
        "mongodb://localhost:27017", "ledger", "scores", client=client,
    )
    assert manager.games is client["ledger"]["scores"]
    manager.close()
    client.close.assert_called_once()
