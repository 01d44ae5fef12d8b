"""Service for fetching submissions straight from the judges."""

from loguru import logger

from domain.models import Platform, Submission
from services.sync import ClientFactory


class SubmissionService:
    """Submissions are never stored; every call goes to the judge."""

    def __init__(self, *, client_factory: ClientFactory):
        """Initialize service with dependencies."""
        self.client_factory = client_factory

    async def get_recent_submissions(self, platform: Platform) -> list[Submission]:
        logger.info(f"Getting recent submissions for {platform.value}")
        return await self.client_factory(platform).get_recent_submissions()

    async def get_user_submissions(
        self,
        platform: Platform,
        user_id: str,
        *,
        from_second: int | None = None,
        page: int | None = None,
        size: int | None = None,
    ) -> list[Submission]:
        logger.info(f"Getting submissions of {user_id} on {platform.value}")
        return await self.client_factory(platform).get_user_submissions(
            user_id, from_second=from_second, page=page, size=size
        )
