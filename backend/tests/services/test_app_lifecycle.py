"""App Lifecycle: lifespan wiring and the `python -m lotus_ledger` entry point.

Invariants:
    - The lifespan opens a manager when none was injected and clears it on shutdown
    - An injected manager survives the lifespan untouched
    - seed inserts one game at the starting score and returns its id
"""

import pytest
from bson import ObjectId
from mongomock_motor import AsyncMongoMockClient

import lotus_ledger.__main__ as entry
from lotus_ledger.config import get_settings
from lotus_ledger.core.domain_types import STARTING_SCORE
from lotus_ledger.infrastructure.database import MongoClientManager
from lotus_ledger.main import create_app, lifespan


async def test_lifespan_opens_and_closes_owned_manager():
    app = create_app()
    async with lifespan(app):
        assert isinstance(app.state.db_manager, MongoClientManager)
    assert app.state.db_manager is None


async def test_lifespan_keeps_injected_manager(db_manager):
    app = create_app(db_manager=db_manager)
    async with lifespan(app):
        assert app.state.db_manager is db_manager
    assert app.state.db_manager is db_manager


async def test_seed_inserts_default_game(monkeypatch):
    mongo = AsyncMongoMockClient()

    def fake_manager(url, database, collection, **kwargs):
        return MongoClientManager(url, database, collection, client=mongo)

    monkeypatch.setattr(entry, "MongoClientManager", fake_manager)

    game_id = await entry.seed_default_game()

    settings = get_settings()
    games = mongo[settings.mongodb_database][settings.mongodb_game_collection]
    stored = await games.find_one({"_id": ObjectId(game_id)})
    assert [stored[f"player{i}"] for i in range(1, 5)] == [STARTING_SCORE] * 4


def test_main_rejects_unknown_command():
    with pytest.raises(SystemExit):
        entry.main(["migrate"])
