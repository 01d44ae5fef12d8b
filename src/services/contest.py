"""Service for handling contest-related operations."""

from loguru import logger

from domain.models import Contest
from infrastructure.repository import ContestFilter, ContestStore


class ContestService:
    """Read access to persisted contests and the problems they own."""

    def __init__(self, *, contest_store: ContestStore):
        """Initialize service with dependencies."""
        self.contest_store = contest_store

    async def list_contests(self, filters: ContestFilter) -> list[Contest]:
        logger.debug(f"Listing contests: {filters}")
        contests = await self.contest_store.find_contests(filters)
        logger.debug(f"Found {len(contests)} contests")
        return contests
