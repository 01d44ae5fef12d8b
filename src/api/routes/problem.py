"""API routes for persisted problems and contests."""

from litestar import Controller, get
from litestar.status_codes import HTTP_200_OK
from loguru import logger

from api.errors import parse_platform
from api.schemas.problem import ContestResponse, ProblemResponse
from infrastructure.repository import ContestFilter, ProblemFilter
from infrastructure.repository.query import DEFAULT_CONTESTS_PER_PAGE, DEFAULT_PROBLEMS_PER_PAGE
from services import ContestService, ProblemService


class ProblemController(Controller):
    """Controller for problem-related endpoints."""

    path = "/problems"

    @get("/", status_code=HTTP_200_OK)
    async def list_problems(
        self,
        problem_service: ProblemService,
        platform: str | None = None,
        category: str | None = None,
        algorithm_id: int | None = None,
        tag_id: int | None = None,
        difficulty_lower: float | None = None,
        difficulty_upper: float | None = None,
        page: int = 1,
        per_page: int = DEFAULT_PROBLEMS_PER_PAGE,
    ) -> list[ProblemResponse]:
        """
        List problems, ordered by id.

        Query parameters (all optional):
        - platform, category
        - algorithm_id, tag_id: curated tag filters
        - difficulty_lower / difficulty_upper: inclusive bounds
        - page (default 1), per_page (default 20)
        """
        logger.debug(f"API request for problems: platform={platform} category={category}")

        filters = ProblemFilter(
            platform=parse_platform(platform) if platform else None,
            category=category,
            algorithm_id=algorithm_id,
            tag_id=tag_id,
            difficulty_lower=difficulty_lower,
            difficulty_upper=difficulty_upper,
            page=page,
            per_page=per_page,
        )
        problems = await problem_service.list_problems(filters)
        return [ProblemResponse.model_validate(problem) for problem in problems]


class ContestController(Controller):
    """Controller for contest-related endpoints."""

    path = "/contests"

    @get("/", status_code=HTTP_200_OK)
    async def list_contests(
        self,
        contest_service: ContestService,
        platform: str | None = None,
        category: str | None = None,
        page: int = 1,
        per_page: int = DEFAULT_CONTESTS_PER_PAGE,
    ) -> list[ContestResponse]:
        """List contests with their problems, ordered by id (page size defaults to 100)."""
        logger.debug(f"API request for contests: platform={platform} category={category}")

        filters = ContestFilter(
            platform=parse_platform(platform) if platform else None,
            category=category,
            page=page,
            per_page=per_page,
        )
        contests = await contest_service.list_contests(filters)
        return [ContestResponse.model_validate(contest) for contest in contests]
