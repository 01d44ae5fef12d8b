"""Litestar application."""

from litestar import Litestar
from litestar.di import Provide
from loguru import logger

from api.dependencies import DEPENDENCIES
from api.errors import EXCEPTION_HANDLERS
from api.routes import (
    ContestController,
    ProblemController,
    SubmissionController,
    SyncController,
    TagController,
    health,
)
from infrastructure.config import Settings, load_settings
from infrastructure.http_client import AsyncHTTPClient
from infrastructure.log_config import configure_logging
from infrastructure.repository import create_engine, create_session_factory, init_schema


def create_app(
    settings: Settings | None = None,
    dependency_overrides: dict[str, Provide] | None = None,
) -> Litestar:
    """Build the API application. Resources are opened on startup and closed on shutdown."""
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    async def on_startup(app: Litestar) -> None:
        engine = create_engine(settings.database_url, pool_size=settings.db_pool_size)
        await init_schema(engine)
        app.state.settings = settings
        app.state.engine = engine
        app.state.session_factory = create_session_factory(engine)
        app.state.http_client = AsyncHTTPClient(timeout=settings.http_timeout)
        logger.info("API started")

    async def on_shutdown(app: Litestar) -> None:
        await app.state.http_client.close()
        await app.state.engine.dispose()
        logger.info("API stopped")

    return Litestar(
        route_handlers=[
            health,
            ProblemController,
            ContestController,
            SubmissionController,
            SyncController,
            TagController,
        ],
        dependencies={**DEPENDENCIES, **(dependency_overrides or {})},
        exception_handlers=EXCEPTION_HANDLERS,
        on_startup=[on_startup],
        on_shutdown=[on_shutdown],
    )


def main() -> None:
    import uvicorn

    settings = load_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
