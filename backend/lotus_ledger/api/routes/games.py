"""Game Routes: create, list, update and delete over the game store.

Invariants:
    - Handlers do no business logic: shape the request, call one store
      operation, shape the response
    - GameNotFoundError -> 404 and StoreError -> 500 via the global handlers
    - Responses keep the store's "_id" key (response_model_by_alias)

Design Decisions:
    - Repository injected with Depends(get_game_repository): tests override it
      with dependency_overrides, production binds it to app.state.db_manager
    - The id path parameter stays a plain str: malformed ids reach the store
      and come back as 404, like ids that match nothing
"""

from fastapi import APIRouter, Depends, Query, Response, status

from lotus_ledger.core.domain_types import GameId, MAX_PAGE_BOUND
from lotus_ledger.core.repository_protocols import GameRepository
from lotus_ledger.infrastructure.game_store import get_game_repository
from lotus_ledger.schemas.game import GameCreate, GameResponse, GameUpdate

router = APIRouter(prefix="/games", tags=["games"])


@router.get("", response_model=list[GameResponse])
async def list_games(
    offset: int = Query(0, ge=0, le=MAX_PAGE_BOUND),
    limit: int | None = Query(None, ge=0, le=MAX_PAGE_BOUND),
    repo: GameRepository = Depends(get_game_repository),
):
    """List games in store order, paginated by offset/limit."""
    return await repo.list(offset=offset, limit=limit)


@router.post(
    "", response_model=GameResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_game(
    body: GameCreate, repo: GameRepository = Depends(get_game_repository),
):
    """Create a game; omitted player3/player4 start at the default score."""
    return await repo.create(body.fields())


@router.put("/{game_id}", response_model=GameResponse)
async def update_game(
    game_id: str,
    body: GameUpdate,
    repo: GameRepository = Depends(get_game_repository),
):
    """Apply the supplied scores to one game."""
    return await repo.update(GameId(game_id), body.changes())


@router.delete("/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_game(
    game_id: str, repo: GameRepository = Depends(get_game_repository),
):
    await repo.delete(GameId(game_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
