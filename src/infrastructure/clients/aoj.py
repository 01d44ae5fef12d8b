"""Aizu Online Judge API client."""

from loguru import logger

from .interfaces import HTTPClientProtocol, RawRecord

API_URL = "https://judgeapi.u-aizu.ac.jp"


class AojApiClient:
    def __init__(self, http_client: HTTPClientProtocol):
        self.http_client = http_client

    async def fetch_volume_ids(self) -> list[int]:
        filters = await self.http_client.get_json(f"{API_URL}/problems/filters")
        return list(filters.get("volumes", []))

    async def fetch_volume_problems(self, volume_id: int) -> list[RawRecord]:
        logger.debug(f"Fetching AOJ volume {volume_id}")
        volume = await self.http_client.get_json(f"{API_URL}/problems/volumes/{volume_id}")
        return list(volume.get("problems", []))

    async def fetch_challenge_classes(self) -> list[tuple[str, str]]:
        """All ``(large class, middle class)`` pairs, e.g. ``("JOI", "Prelim")``."""
        challenges = await self.http_client.get_json(f"{API_URL}/challenges")
        return [
            (large["id"], middle["id"])
            for large in challenges.get("largeCls", [])
            for middle in large.get("middleCls") or []
        ]

    async def fetch_challenge_contests(self, large_cl: str, middle_cl: str) -> list[RawRecord]:
        """Yearly contests of a class, each with ``days`` carrying ``title`` and ``problems``."""
        logger.debug(f"Fetching AOJ challenges {large_cl}/{middle_cl}")
        challenge = await self.http_client.get_json(
            f"{API_URL}/challenges/cl/{large_cl}/{middle_cl}"
        )
        return list(challenge.get("contests", []))

    async def fetch_recent_submissions(self) -> list[RawRecord]:
        return await self.http_client.get_json(f"{API_URL}/submission_records/recent")

    async def fetch_user_submissions(
        self, user_id: str, page: int | None = None, size: int | None = None
    ) -> list[RawRecord]:
        params = {}
        if page is not None:
            params["page"] = page
        if size is not None:
            params["size"] = size
        return await self.http_client.get_json(
            f"{API_URL}/submission_records/users/{user_id}", params=params or None
        )
