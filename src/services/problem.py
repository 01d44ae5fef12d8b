"""Service for handling problem-related operations."""

from loguru import logger

from domain.models import Problem
from infrastructure.repository import ProblemFilter, ProblemStore


class ProblemService:
    """Read access to persisted problems."""

    def __init__(self, *, problem_store: ProblemStore):
        """Initialize service with dependencies."""
        self.problem_store = problem_store

    async def list_problems(self, filters: ProblemFilter) -> list[Problem]:
        logger.debug(f"Listing problems: {filters}")
        problems = await self.problem_store.find_problems(filters)
        logger.debug(f"Found {len(problems)} problems")
        return problems
