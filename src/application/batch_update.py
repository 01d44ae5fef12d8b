"""Batch entry point: sync platforms into the catalog database.

Usage::

    python -m application.batch_update [platform ...]

Without arguments every platform except yukicoder is synced (yukicoder needs
one rate-limited request per problem and is run separately). Exits non-zero
if any platform failed.
"""

import asyncio
import sys

from loguru import logger

from domain.models import Platform
from infrastructure.config import Settings, load_settings
from infrastructure.http_client import AsyncHTTPClient
from infrastructure.log_config import configure_logging
from infrastructure.repository import create_engine, create_session_factory, init_schema
from services import create_sync_service

DEFAULT_PLATFORMS = (Platform.ATCODER, Platform.CODEFORCES, Platform.AOJ, Platform.YOSUPO)


def parse_platforms(args: list[str]) -> list[Platform]:
    if not args:
        return list(DEFAULT_PLATFORMS)

    platforms = []
    for arg in args:
        platform = Platform.parse(arg)
        if platform is Platform.UNKNOWN:
            raise ValueError(f"Unknown platform: {arg}")
        platforms.append(platform)
    return platforms


async def run(platforms: list[Platform], settings: Settings) -> int:
    """Sync ``platforms`` and return the number that failed."""
    engine = create_engine(settings.database_url, pool_size=settings.db_pool_size)
    http_client = AsyncHTTPClient(timeout=settings.http_timeout)

    try:
        await init_schema(engine)
        service = create_sync_service(
            engine, create_session_factory(engine), http_client, settings
        )
        results = await service.sync_all(platforms)
    finally:
        await http_client.close()
        await engine.dispose()

    for platform, error in results.items():
        if error is None:
            logger.info(f"{platform.value}: ok")
        else:
            logger.error(f"{platform.value}: failed during {error.phase}: {error.cause}")

    return sum(1 for error in results.values() if error is not None)


def main(argv: list[str] | None = None) -> int:
    settings = load_settings()
    configure_logging(settings.log_level)

    try:
        platforms = parse_platforms(sys.argv[1:] if argv is None else argv)
    except ValueError as e:
        logger.error(str(e))
        return 2

    failures = asyncio.run(run(platforms, settings))
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
