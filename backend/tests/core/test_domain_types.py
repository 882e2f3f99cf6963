"""Domain Types: verifies identifier/score types and shared constants.

Tests:
    - NewType wrappers are transparent at runtime
    - Starting score sits inside the score bounds
    - Store operations serialize to their string values
"""

from lotus_ledger.core.domain_types import (
    GameId, PlayerScore, MIN_SCORE, MAX_SCORE, STARTING_SCORE,
    PLAYER_FIELDS, StoreOperation,
)


def test_identity_types_wrap_values():
    assert GameId("65f0c0ffee0000000000beef") == "65f0c0ffee0000000000beef"
    assert PlayerScore(40) == 40


def test_starting_score_within_bounds():
    assert MIN_SCORE <= STARTING_SCORE <= MAX_SCORE
    assert STARTING_SCORE == 40
    assert (MIN_SCORE, MAX_SCORE) == (0, 255)


def test_four_player_fields():
    assert PLAYER_FIELDS == ("player1", "player2", "player3", "player4")


def test_store_operations_are_string_values():
    assert StoreOperation.CREATE.value == "create"
    assert StoreOperation("delete") is StoreOperation.DELETE
    assert {op.value for op in StoreOperation} == {
        "create", "list", "update", "delete", "ping",
    }
