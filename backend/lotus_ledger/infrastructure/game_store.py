"""Game Store: MongoDB implementation of GameRepository.

Invariants:
    - _id is assigned by the store on insert and never written afterwards
    - create() returns the document re-read after insert, not the input
    - Unparsable ids are GameNotFoundError, never StoreError
    - Every PyMongoError is logged and re-raised as StoreError
    - A stored document missing a player field is a StoreError, not a KeyError
    - No explicit sort: list() returns the collection's natural order

Design Decisions:
    - delete_many on an _id filter: matches at most one document, and
      deleted_count tells absence apart from success
    - limit=0 short-circuits to an empty page (Mongo treats limit(0) as unbounded)
"""

import logging
from typing import Mapping

from bson import ObjectId
from bson.errors import InvalidId
from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from lotus_ledger.core.domain_types import (
    GameId, PLAYER_FIELDS, STARTING_SCORE, StoreOperation,
)
from lotus_ledger.core.errors import GameNotFoundError, StoreError
from lotus_ledger.core.repository_protocols import GameDocument
from lotus_ledger.infrastructure.database import MongoClientManager, get_db_manager

logger = logging.getLogger(__name__)


class MongoGameRepository:
    """Game persistence over a single Motor collection."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def create(self, fields: Mapping[str, int]) -> GameDocument:
        """Insert a new game, defaulting player3/player4 to the starting score."""
        document = {
            "player1": fields["player1"],
            "player2": fields["player2"],
            "player3": fields.get("player3", STARTING_SCORE),
            "player4": fields.get("player4", STARTING_SCORE),
        }
        try:
            result = await self.collection.insert_one(document)
            stored = await self.collection.find_one({"_id": result.inserted_id})
        except PyMongoError as e:
            raise _store_error(StoreOperation.CREATE, e)
        if stored is None:
            raise StoreError("inserted game could not be read back", StoreOperation.CREATE)
        game = _to_wire(stored, StoreOperation.CREATE)
        logger.info("Game created", extra={"game_id": game["_id"]})
        return game

    async def list(
        self, offset: int = 0, limit: int | None = None,
    ) -> list[GameDocument]:
        """Return games in natural order, skipping `offset`, at most `limit`."""
        if limit == 0:
            return []
        try:
            cursor = self.collection.find({}).skip(offset)
            if limit is not None:
                cursor = cursor.limit(limit)
            documents = await cursor.to_list(length=None)
        except PyMongoError as e:
            raise _store_error(StoreOperation.LIST, e)
        return [_to_wire(doc, StoreOperation.LIST) for doc in documents]

    async def update(
        self, game_id: GameId, fields: Mapping[str, int],
    ) -> GameDocument:
        """Set only the supplied player fields; return the document after the write."""
        object_id = _parse_game_id(game_id)
        changes = {key: fields[key] for key in PLAYER_FIELDS if key in fields}
        try:
            if changes:
                stored = await self.collection.find_one_and_update(
                    {"_id": object_id},
                    {"$set": changes},
                    return_document=ReturnDocument.AFTER,
                )
            else:
                stored = await self.collection.find_one({"_id": object_id})
        except PyMongoError as e:
            raise _store_error(StoreOperation.UPDATE, e, game_id)
        if stored is None:
            raise GameNotFoundError(game_id)
        return _to_wire(stored, StoreOperation.UPDATE)

    async def delete(self, game_id: GameId) -> None:
        object_id = _parse_game_id(game_id)
        try:
            result = await self.collection.delete_many({"_id": object_id})
        except PyMongoError as e:
            raise _store_error(StoreOperation.DELETE, e, game_id)
        if result.deleted_count == 0:
            raise GameNotFoundError(game_id)
        logger.info("Game deleted", extra={"game_id": str(game_id)})


def get_game_repository(
    manager: MongoClientManager = Depends(get_db_manager),
) -> MongoGameRepository:
    """FastAPI dependency: a repository bound to the shared client."""
    return MongoGameRepository(manager.games)


def _parse_game_id(game_id: GameId) -> ObjectId:
    try:
        return ObjectId(game_id)
    except (InvalidId, TypeError):
        raise GameNotFoundError(game_id)


def _to_wire(document: Mapping, operation: StoreOperation) -> GameDocument:
    """Stored document -> wire shape (hex-string _id)."""
    try:
        game = {"_id": str(document["_id"])}
        for key in PLAYER_FIELDS:
            game[key] = document[key]
    except KeyError as e:
        logger.error(
            f"Stored game is missing field {e}",
            extra={"operation": operation.value, "game_id": str(document.get("_id"))},
        )
        raise StoreError("stored game is malformed", operation)
    return game


def _store_error(
    operation: StoreOperation, cause: PyMongoError, game_id: GameId | None = None,
) -> StoreError:
    logger.error(
        f"Store {operation.value} failed: {cause}",
        extra={"operation": operation.value, "game_id": game_id},
    )
    return StoreError("database unavailable or rejected the request", operation)
