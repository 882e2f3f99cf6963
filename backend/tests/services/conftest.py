"""Service test fixtures: in-memory Motor collection + FastAPI test client.

Invariants:
    - Every test gets a fresh mongomock-motor client (no shared documents)
    - The app under test is built with create_app(db_manager=...), so routes
      reach the in-memory collection through the normal dependency chain

Design Decisions:
    - mongomock-motor over a live mongod: fast, no external dependency, keeps
      insertion order like a real collection scan
    - httpx AsyncClient over ASGITransport: lifespan is not run, the injected
      manager is used as-is
"""

import pytest
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from lotus_ledger.infrastructure.database import MongoClientManager
from lotus_ledger.infrastructure.game_store import MongoGameRepository
from lotus_ledger.main import create_app


@pytest.fixture
def db_manager():
    return MongoClientManager(
        "mongodb://localhost:27017",
        "lotus_ledger_test",
        "game",
        client=AsyncMongoMockClient(),
    )


@pytest.fixture
def game_collection(db_manager):
    return db_manager.games


@pytest.fixture
def repo(game_collection):
    return MongoGameRepository(game_collection)


@pytest.fixture
def app(db_manager):
    return create_app(db_manager=db_manager)


@pytest.fixture
async def client(app):
    """FastAPI test client bound to the in-memory store."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as ac:
        yield ac
