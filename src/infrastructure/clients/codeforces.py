"""Codeforces API client."""

from typing import Any

from loguru import logger

from infrastructure.errors import TransportError

from .interfaces import HTTPClientProtocol, RawRecord

API_URL = "https://codeforces.com/api"


class CodeforcesApiClient:
    """Client for the public Codeforces API.

    Codeforces wraps every payload in ``{"status": ..., "result": ...}``; a
    non-OK status is reported as a transport failure.
    """

    def __init__(self, http_client: HTTPClientProtocol):
        self.http_client = http_client

    async def _call(self, method: str, params: dict[str, Any] | None = None) -> Any:
        url = f"{API_URL}/{method}"
        payload = await self.http_client.get_json(url, params=params)

        if not isinstance(payload, dict) or payload.get("status") != "OK":
            comment = payload.get("comment") if isinstance(payload, dict) else None
            logger.error(f"Codeforces API {method} failed: {comment}")
            raise TransportError(url, f"Codeforces API error: {comment or 'malformed response'}")

        return payload["result"]

    async def fetch_problemset(self) -> RawRecord:
        """Problems and per-problem statistics (``problems``, ``problemStatistics``)."""
        logger.debug("Fetching Codeforces problemset")
        return await self._call("problemset.problems")

    async def fetch_contests(self) -> list[RawRecord]:
        logger.debug("Fetching Codeforces contest list")
        return await self._call("contest.list")

    async def fetch_recent_submissions(self, count: int = 100) -> list[RawRecord]:
        return await self._call("problemset.recentStatus", {"count": count})

    async def fetch_user_submissions(
        self, handle: str, from_index: int = 1, count: int = 100
    ) -> list[RawRecord]:
        return await self._call(
            "user.status", {"handle": handle, "from": from_index, "count": count}
        )
