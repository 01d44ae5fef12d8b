"""Unit tests for single-flight catalog caching."""

import asyncio
import traceback

import pytest
from unittest.mock import AsyncMock, MagicMock

from domain.exceptions import UnsupportedPlatformError
from domain.models import Platform
from infrastructure.clients import HTTPClientProtocol
from services.catalog import PlatformCatalogClient, build_assembler
from services.fetch_cache import SingleFlightCache


@pytest.mark.asyncio
async def test_concurrent_callers_share_one_load():
    """Test that N concurrent gets on a cold cache run the loader exactly once."""
    calls = 0

    async def loader():
        nonlocal calls
        calls += 1
        await asyncio.sleep(0.01)
        return ["payload"]

    cache = SingleFlightCache(loader)
    results = await asyncio.gather(*(cache.get() for _ in range(10)))

    assert calls == 1
    assert all(result is results[0] for result in results)
    assert cache.populated


@pytest.mark.asyncio
async def test_failure_is_cached():
    """Test that a failed load is re-raised to every caller without retrying."""
    loader = AsyncMock(side_effect=RuntimeError("upstream down"))
    cache = SingleFlightCache(loader)

    with pytest.raises(RuntimeError, match="upstream down"):
        await cache.get()
    with pytest.raises(RuntimeError, match="upstream down"):
        await cache.get()

    loader.assert_awaited_once()


@pytest.mark.asyncio
async def test_cached_failure_traceback_does_not_grow():
    """Test that re-raising a cached failure does not stack traceback frames."""
    cache = SingleFlightCache(AsyncMock(side_effect=RuntimeError("upstream down")))
    depths = []

    for _ in range(3):
        with pytest.raises(RuntimeError) as exc_info:
            await cache.get()
        depths.append(len(list(traceback.walk_tb(exc_info.value.__traceback__))))

    assert depths[0] == depths[1] == depths[2]


@pytest.mark.asyncio
async def test_cancelled_load_is_not_cached():
    """Test that a cancelled load leaves the cache empty for the next caller."""
    started = asyncio.Event()

    async def slow_loader():
        started.set()
        await asyncio.sleep(10)

    cache = SingleFlightCache(slow_loader)
    task = asyncio.create_task(cache.get())
    await started.wait()
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task
    assert not cache.populated


@pytest.mark.asyncio
async def test_problems_and_contests_share_one_assembly():
    """Test that problems and contests are served from one assembly."""
    assembler = MagicMock()
    assembler.platform = Platform.ATCODER
    assembler.assemble = AsyncMock(return_value=(["p"], ["c"]))
    client = PlatformCatalogClient(assembler)

    problems, contests = await asyncio.gather(client.get_problems(), client.get_contests())

    assert problems == ["p"]
    assert contests == ["c"]
    assembler.assemble.assert_awaited_once()


def test_unknown_platform_has_no_assembler():
    """Test that UNKNOWN has no assembler."""
    http_client = MagicMock(spec=HTTPClientProtocol)

    with pytest.raises(UnsupportedPlatformError):
        build_assembler(Platform.UNKNOWN, http_client)


def test_assembler_per_platform():
    """Test that every supported platform gets an assembler for itself."""
    http_client = MagicMock(spec=HTTPClientProtocol)

    for platform in Platform.supported():
        assert build_assembler(platform, http_client).platform is platform
