"""
Database engine and session management.
Supports both SQLite (local development, tests) and PostgreSQL.
"""

from loguru import logger
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

Base = declarative_base()


def is_sqlite(database_url: str) -> bool:
    return database_url.startswith("sqlite")


def create_engine(database_url: str, pool_size: int = 10) -> AsyncEngine:
    """Create an async engine configured for the database type in ``database_url``."""
    if "postgresql" in database_url or "postgres" in database_url:
        engine = create_async_engine(
            database_url,
            pool_pre_ping=True,
            pool_size=pool_size,
            max_overflow=pool_size,
            pool_recycle=300,
        )
    elif is_sqlite(database_url):
        kwargs = {}
        if ":memory:" in database_url or database_url.rstrip("/").endswith("sqlite+aiosqlite:"):
            # One shared connection, otherwise every checkout sees an empty database
            kwargs["poolclass"] = StaticPool
        engine = create_async_engine(
            database_url,
            connect_args={"check_same_thread": False},
            **kwargs,
        )

        @event.listens_for(engine.sync_engine, "connect")
        def enable_foreign_keys(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    else:
        engine = create_async_engine(database_url)

    logger.info(f"Database engine created for dialect {engine.dialect.name}")
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


async def init_schema(engine: AsyncEngine) -> None:
    """Create all tables that do not exist yet."""
    # Registers the table classes on Base.metadata
    from infrastructure.repository import tables  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready")
