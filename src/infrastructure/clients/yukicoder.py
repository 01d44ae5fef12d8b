"""yukicoder API client."""

import asyncio

from loguru import logger

from .interfaces import HTTPClientProtocol, RawRecord

API_URL = "https://yukicoder.me/api/v1"


class YukicoderApiClient:
    """Client for the yukicoder v1 API.

    Problem detail calls are spaced by ``request_interval`` seconds since the
    assembler issues one per contest problem.
    """

    def __init__(self, http_client: HTTPClientProtocol, request_interval: float = 1.0):
        self.http_client = http_client
        self.request_interval = request_interval

    async def fetch_problems(self) -> list[RawRecord]:
        logger.debug("Fetching yukicoder problems")
        return await self.http_client.get_json(f"{API_URL}/problems")

    async def fetch_past_contests(self) -> list[RawRecord]:
        logger.debug("Fetching yukicoder past contests")
        contests = await self.http_client.get_json(f"{API_URL}/contest/past")
        return [{**contest, "Name": contest["Name"].strip()} for contest in contests]

    async def fetch_problem_detail(self, problem_id: int) -> RawRecord:
        """Problem record including ``Statistics`` (``Total`` / ``Solved``)."""
        if self.request_interval > 0:
            await asyncio.sleep(self.request_interval)
        return await self.http_client.get_json(f"{API_URL}/problems/{problem_id}")
