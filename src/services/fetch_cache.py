"""Single-flight, populate-once memoization of an async loader."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

from loguru import logger

T = TypeVar("T")


class SingleFlightCache(Generic[T]):
    """Runs ``loader`` at most once for the lifetime of the cache.

    Concurrent callers wait on the same lock; the first one runs the loader
    and every caller receives its outcome. A failure is stored and re-raised
    to later callers as well. There is no expiry or refresh: build a new
    cache (and a new client) for a new run.
    """

    def __init__(self, loader: Callable[[], Awaitable[T]], name: str = "fetch"):
        self._loader = loader
        self._name = name
        self._lock = asyncio.Lock()
        self._done = False
        self._value: T | None = None
        self._error: BaseException | None = None
        self._traceback = None

    @property
    def populated(self) -> bool:
        return self._done

    async def get(self) -> T:
        if not self._done:
            async with self._lock:
                if not self._done:
                    logger.debug(f"Populating {self._name} cache")
                    try:
                        self._value = await self._loader()
                    except Exception as e:
                        self._error = e
                        self._traceback = e.__traceback__
                        logger.warning(f"{self._name} loader failed, outcome cached: {e}")
                    # Cancellation leaves the cache empty for the next caller
                    self._done = True

        if self._error is not None:
            # Every raise starts from the loader's traceback
            raise self._error.with_traceback(self._traceback)
        return self._value
