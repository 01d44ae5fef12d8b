"""API routes for live submissions."""

from litestar import Controller, get
from litestar.status_codes import HTTP_200_OK
from loguru import logger

from api.errors import parse_platform
from api.schemas.submission import SubmissionResponse
from services import SubmissionService


class SubmissionController(Controller):
    """Controller for submission endpoints. Data is fetched from the judge on every call."""

    path = "/submissions"

    @get("/{platform:str}/recent", status_code=HTTP_200_OK)
    async def get_recent_submissions(
        self,
        platform: str,
        submission_service: SubmissionService,
    ) -> list[SubmissionResponse]:
        logger.debug(f"API request for recent submissions: platform={platform}")

        submissions = await submission_service.get_recent_submissions(parse_platform(platform))
        return [SubmissionResponse.model_validate(s) for s in submissions]

    @get("/{platform:str}/users/{user_id:str}", status_code=HTTP_200_OK)
    async def get_user_submissions(
        self,
        platform: str,
        user_id: str,
        submission_service: SubmissionService,
        from_second: int | None = None,
        page: int | None = None,
        size: int | None = None,
    ) -> list[SubmissionResponse]:
        """
        Get a user's submissions.

        Path parameters:
        - platform: atcoder, codeforces or aoj
        - user_id: the user's handle on that judge

        Query parameters:
        - from_second: AtCoder lower bound (Unix seconds)
        - page, size: AOJ paging; Codeforces uses them as ``from`` and ``count``
        """
        logger.debug(f"API request for user submissions: platform={platform} user={user_id}")

        submissions = await submission_service.get_user_submissions(
            parse_platform(platform),
            user_id,
            from_second=from_second,
            page=page,
            size=size,
        )
        return [SubmissionResponse.model_validate(s) for s in submissions]
