"""Lotus Ledger API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map LedgerError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - One MongoClientManager per app, on app.state, opened by the lifespan
      unless one was injected (tests)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app() factory so tests build isolated apps around a fake store
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lotus_ledger import __version__
from lotus_ledger.api.error_handlers import register_error_handlers
from lotus_ledger.api.routes import games, health, root
from lotus_ledger.config import get_settings
from lotus_ledger.infrastructure.database import MongoClientManager
from lotus_ledger.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    owned = getattr(app.state, "db_manager", None) is None
    if owned:
        app.state.db_manager = MongoClientManager(
            settings.mongodb_url,
            settings.mongodb_database,
            settings.mongodb_game_collection,
            server_selection_timeout_ms=settings.mongodb_server_selection_timeout_ms,
        )
    logger.info("Lotus Ledger API started")
    yield
    logger.info("Lotus Ledger API shutting down")
    if owned:
        app.state.db_manager.close()
        app.state.db_manager = None


def create_app(db_manager: MongoClientManager | None = None) -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Lotus Ledger API", version=__version__, lifespan=lifespan)
    app.state.db_manager = db_manager

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(root.router)
    app.include_router(health.router)
    app.include_router(games.router)

    register_error_handlers(app)
    return app


app = create_app()
