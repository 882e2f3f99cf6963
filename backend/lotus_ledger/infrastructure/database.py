"""Database Client Manager: one Motor client per process with health checks.

Invariants:
    - The client (and its connection pool) is opened once in the lifespan and
      closed at shutdown; handlers only borrow collections from it
    - Motor connects lazily: constructing the manager does no IO
    - ping failures are reported as False, never raised

Design Decisions:
    - Manager stored on app.state, reached through a FastAPI dependency
      (no module-level singleton)
    - server_selection_timeout bounds how long a request waits on a dead server
"""

import logging

from fastapi import Request
from motor.motor_asyncio import (
    AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase,
)
from pymongo.errors import PyMongoError

from lotus_ledger.core.domain_types import StoreOperation

logger = logging.getLogger(__name__)


class MongoClientManager:
    """Owns the Motor client and hands out the game collection."""

    def __init__(
        self,
        mongodb_url: str,
        database_name: str,
        game_collection_name: str,
        server_selection_timeout_ms: int = 5000,
        client: AsyncIOMotorClient | None = None,
    ):
        self.client = client or AsyncIOMotorClient(
            mongodb_url,
            serverSelectionTimeoutMS=server_selection_timeout_ms,
        )
        self.database_name = database_name
        self.game_collection_name = game_collection_name

    @property
    def database(self) -> AsyncIOMotorDatabase:
        return self.client[self.database_name]

    @property
    def games(self) -> AsyncIOMotorCollection:
        return self.database[self.game_collection_name]

    async def health_check(self) -> bool:
        """Check database connectivity (for the readiness endpoint)."""
        try:
            await self.database.command("ping")
            return True
        except PyMongoError as e:
            logger.error(
                f"DB health check failed: {e}",
                extra={"operation": StoreOperation.PING.value},
            )
            return False

    def close(self) -> None:
        self.client.close()


def get_db_manager(request: Request) -> MongoClientManager:
    """FastAPI dependency for the application-scoped client manager."""
    manager = getattr(request.app.state, "db_manager", None)
    if manager is None:
        raise RuntimeError("Database not initialized")
    return manager
