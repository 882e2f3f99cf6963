"""Domain Types: identifier and score types shared by every layer.

Invariants:
    - GameId is the 24-char hex form of the store-assigned ObjectId
    - PlayerScore is bounded 0–255 (one unsigned byte)
    - STARTING_SCORE is the value of every player in a fresh game

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
    - Field names listed once (PLAYER_FIELDS) so schemas and store agree
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

GameId = NewType("GameId", str)


# ─── Value Types ─────────────────────────────────────────────────

PlayerScore = NewType("PlayerScore", int)   # 0–255

MIN_SCORE = 0
MAX_SCORE = 255
STARTING_SCORE = 40

PLAYER_FIELDS = ("player1", "player2", "player3", "player4")

# skip/limit travel as signed 64-bit ints in the find command
MAX_PAGE_BOUND = 2**63 - 1


# ─── Enums ───────────────────────────────────────────────────────

class StoreOperation(str, Enum):
    """Store operations: surfaced in StoreError and log records."""
    CREATE = "create"
    LIST = "list"
    UPDATE = "update"
    DELETE = "delete"
    PING = "ping"
