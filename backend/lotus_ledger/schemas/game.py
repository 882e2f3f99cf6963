"""Game Schemas: Pydantic models for the /games request and response bodies.

Invariants:
    - Every player score is an int in 0–255
    - player1/player2 required on create and update; player3/player4 optional
    - GameUpdate.changes() contains only the fields the client actually sent
    - An explicit null for player3/player4 is rejected (no "clear" semantics)

Design Decisions:
    - Fields-set tracking (exclude_unset) carries present/absent markers, so an
      omitted optional score is never silently reset to its default
    - GameResponse keeps the Mongo field name "_id" on the wire via alias
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lotus_ledger.core.domain_types import MAX_SCORE, MIN_SCORE

Score = Annotated[int, Field(ge=MIN_SCORE, le=MAX_SCORE)]


class GameCreate(BaseModel):
    """Create body: player3/player4 fall back to the starting score in the store."""
    player1: Score
    player2: Score
    player3: Score | None = None
    player4: Score | None = None

    @field_validator("player3", "player4")
    @classmethod
    def reject_explicit_null(cls, v: int | None) -> int | None:
        if v is None:
            raise ValueError("score cannot be null; omit the field instead")
        return v

    def fields(self) -> dict[str, int]:
        return self.model_dump(exclude_unset=True)


class GameUpdate(GameCreate):
    """Update body: same shape as create; omitted optional scores stay untouched."""

    def changes(self) -> dict[str, int]:
        return self.model_dump(exclude_unset=True)


class GameResponse(BaseModel):
    """Game on the wire: the store's document with a hex-string id."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    player1: int
    player2: int
    player3: int
    player4: int
