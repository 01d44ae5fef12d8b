"""AtCoder data via the AtCoder Problems (kenkoooo) mirror."""

from loguru import logger

from .interfaces import HTTPClientProtocol, RawRecord

RESOURCES_URL = "https://kenkoooo.com/atcoder/resources"
API_URL = "https://kenkoooo.com/atcoder/atcoder-api/v3"


class AtcoderApiClient:
    """Client for the AtCoder Problems static resources and submission API."""

    def __init__(self, http_client: HTTPClientProtocol):
        self.http_client = http_client

    async def fetch_contests(self) -> list[RawRecord]:
        logger.debug("Fetching AtCoder contests")
        return await self.http_client.get_json(f"{RESOURCES_URL}/contests.json")

    async def fetch_problems(self) -> list[RawRecord]:
        logger.debug("Fetching AtCoder merged problems")
        return await self.http_client.get_json(f"{RESOURCES_URL}/merged-problems.json")

    async def fetch_problem_models(self) -> dict[str, RawRecord]:
        """Difficulty estimates keyed by problem id."""
        logger.debug("Fetching AtCoder problem models")
        return await self.http_client.get_json(f"{RESOURCES_URL}/problem-models.json")

    async def fetch_recent_submissions(self) -> list[RawRecord]:
        return await self.http_client.get_json(f"{API_URL}/recent")

    async def fetch_user_submissions(self, user_id: str, from_second: int) -> list[RawRecord]:
        return await self.http_client.get_json(
            f"{API_URL}/user/submissions",
            params={"user": user_id, "from_second": from_second},
        )
