"""Service that pulls a platform's catalog and persists it."""

import asyncio
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from loguru import logger

from domain.exceptions import SyncError
from domain.models import Platform
from infrastructure.repository import ContestStore
from services.catalog import PlatformCatalogClient

FETCH = "fetch"
PERSIST = "persist"

ClientFactory = Callable[[Platform], PlatformCatalogClient]


@dataclass(frozen=True)
class SyncResult:
    platform: Platform
    contests: int
    problems: int


class SyncService:
    """Runs the fetch -> assemble -> upsert pipeline per platform."""

    def __init__(self, *, contest_store: ContestStore, client_factory: ClientFactory):
        """Initialize service with dependencies."""
        self.contest_store = contest_store
        self.client_factory = client_factory

    async def sync(self, platform: Platform) -> SyncResult:
        """Synchronize one platform with a fresh client (and therefore a cold cache)."""
        logger.info(f"Syncing {platform.value}")

        try:
            client = self.client_factory(platform)
            problems, contests = await client.get_problems_and_contests()
        except Exception as e:
            logger.error(f"Fetching {platform.value} failed: {e}")
            raise SyncError(platform.value, FETCH, e) from e

        try:
            await self.contest_store.update_contests(contests)
        except Exception as e:
            logger.error(f"Persisting {platform.value} failed: {e}")
            raise SyncError(platform.value, PERSIST, e) from e

        logger.info(
            f"Synced {platform.value}: {len(contests)} contests, {len(problems)} problems"
        )
        return SyncResult(platform=platform, contests=len(contests), problems=len(problems))

    async def _sync_isolated(self, platform: Platform) -> SyncError | None:
        try:
            await self.sync(platform)
        except SyncError as e:
            return e
        return None

    async def sync_all(self, platforms: Iterable[Platform]) -> dict[Platform, SyncError | None]:
        """Sync platforms concurrently. One platform's failure never stops the others."""
        platforms = list(platforms)
        outcomes = await asyncio.gather(*(self._sync_isolated(p) for p in platforms))

        results = dict(zip(platforms, outcomes))
        failed = [p.value for p, error in results.items() if error is not None]
        if failed:
            logger.warning(f"Sync finished with failures: {', '.join(failed)}")
        else:
            logger.info(f"Sync finished for {len(platforms)} platform(s)")
        return results
