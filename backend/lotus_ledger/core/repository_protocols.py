"""Boundary Protocols: contract between the routes and the game store.

Invariants:
    - Routes depend on GameRepository, never on the Motor collection directly
    - Every method is async because implementations do IO
    - Failures surface as GameNotFoundError or StoreError (core/errors.py)

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass any fake store
    - Documents cross the boundary as plain dicts with a hex-string "_id"
"""

from typing import Any, Mapping, Protocol

from lotus_ledger.core.domain_types import GameId

GameDocument = dict[str, Any]


class GameRepository(Protocol):
    """Contract for game persistence: implemented by infrastructure."""
    async def create(self, fields: Mapping[str, int]) -> GameDocument: ...
    async def list(
        self, offset: int = 0, limit: int | None = None,
    ) -> list[GameDocument]: ...
    async def update(
        self, game_id: GameId, fields: Mapping[str, int],
    ) -> GameDocument: ...
    async def delete(self, game_id: GameId) -> None: ...
