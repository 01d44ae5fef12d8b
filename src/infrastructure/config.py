"""Process configuration read from the environment (and ``.env``)."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./judge_catalog.db"


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    db_pool_size: int = 10
    host: str = "127.0.0.1"
    port: int = 8080
    log_level: str = "INFO"
    sync_chunk_size: int = 100
    http_timeout: float = 30.0
    yukicoder_request_interval: float = 1.0


def load_settings() -> Settings:
    """Load settings from ``.env`` and the process environment."""
    load_dotenv()

    return Settings(
        database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
        db_pool_size=int(os.getenv("DB_POOL_SIZE", "10")),
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8080")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        sync_chunk_size=int(os.getenv("SYNC_CHUNK_SIZE", "100")),
        http_timeout=float(os.getenv("HTTP_TIMEOUT", "30")),
        yukicoder_request_interval=float(os.getenv("YUKICODER_REQUEST_INTERVAL", "1.0")),
    )
