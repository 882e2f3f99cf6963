"""Process entry point: `python -m lotus_ledger [serve|seed]`.

serve (default) runs the API under uvicorn on the configured host/port.
seed inserts one game with every player at the starting score and prints its id.
"""

import argparse
import asyncio
import logging

import uvicorn

from lotus_ledger.config import get_settings
from lotus_ledger.core.domain_types import STARTING_SCORE
from lotus_ledger.infrastructure.database import MongoClientManager
from lotus_ledger.infrastructure.game_store import MongoGameRepository
from lotus_ledger.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


async def seed_default_game() -> str:
    """Insert a fresh game and return its id."""
    settings = get_settings()
    manager = MongoClientManager(
        settings.mongodb_url,
        settings.mongodb_database,
        settings.mongodb_game_collection,
        server_selection_timeout_ms=settings.mongodb_server_selection_timeout_ms,
    )
    try:
        repo = MongoGameRepository(manager.games)
        game = await repo.create(
            {"player1": STARTING_SCORE, "player2": STARTING_SCORE},
        )
    finally:
        manager.close()
    return game["_id"]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="lotus-ledger")
    parser.add_argument(
        "command", nargs="?", default="serve", choices=("serve", "seed"),
    )
    args = parser.parse_args(argv)
    settings = get_settings()

    if args.command == "seed":
        setup_logging(settings.log_level, settings.log_format)
        print(asyncio.run(seed_default_game()))
        return 0

    uvicorn.run("lotus_ledger.main:app", host=settings.host, port=settings.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
