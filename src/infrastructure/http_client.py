"""Async HTTP client shared by the judge API adapters."""

import json
from typing import Any

from curl_cffi import CurlError
from curl_cffi.requests import AsyncSession
from loguru import logger

from infrastructure.errors import TransportError

DEFAULT_TIMEOUT = 30.0


class AsyncHTTPClient:
    """Thin wrapper over a curl_cffi ``AsyncSession``.

    Every failure (connection, non-2xx status, undecodable body) is raised as
    ``TransportError`` carrying the URL. Nothing is retried.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, impersonate: str = "chrome"):
        self.timeout = timeout
        self.impersonate = impersonate
        self._session: AsyncSession | None = None

    def _get_session(self) -> AsyncSession:
        if self._session is None:
            self._session = AsyncSession(impersonate=self.impersonate, timeout=self.timeout)
        return self._session

    async def _get(self, url: str, params: dict[str, Any] | None = None):
        logger.debug(f"GET {url} params={params}")
        try:
            response = await self._get_session().get(url, params=params)
        except CurlError as e:
            logger.error(f"Request to {url} failed: {e}")
            raise TransportError(url, f"Request failed: {e}") from e

        if response.status_code >= 400:
            logger.error(f"Request to {url} returned HTTP {response.status_code}")
            raise TransportError(
                url, f"HTTP {response.status_code}", status_code=response.status_code
            )
        return response

    async def get_text(self, url: str, params: dict[str, Any] | None = None) -> str:
        """Get text content from URL."""
        response = await self._get(url, params)
        return response.text

    async def get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """Get and decode a JSON document from URL."""
        text = await self.get_text(url, params)
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON from {url}: {e}")
            raise TransportError(url, f"Invalid JSON: {e}") from e

    async def close(self) -> None:
        if self._session is not None:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> "AsyncHTTPClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
