"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Connection string, database and collection names come from the environment
    - get_settings() is cached (lru_cache) - single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box against a local mongod
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # MongoDB
    mongodb_url: str = "mongodb://localhost:27017"
    mongodb_database: str = "lotus_ledger_db"
    mongodb_game_collection: str = "game"
    mongodb_server_selection_timeout_ms: int = 5000

    @field_validator("mongodb_url")
    @classmethod
    def require_mongodb_scheme(cls, v: str) -> str:
        """Motor only accepts mongodb:// and mongodb+srv:// URIs."""
        if not v.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError("mongodb_url must start with mongodb:// or mongodb+srv://")
        return v

    # HTTP listener
    host: str = "0.0.0.0"
    port: int = 8080

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
