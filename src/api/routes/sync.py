"""API routes for triggering a sync, listing tags and health checks."""

from litestar import Controller, get, post
from litestar.status_codes import HTTP_200_OK
from loguru import logger

from api.errors import parse_platform
from api.schemas.sync import HealthResponse, SyncResponse, TechnicalTagResponse
from infrastructure.repository import TechnicalTagStore
from services import SyncService


class SyncController(Controller):
    path = "/sync"

    @post("/{platform:str}", status_code=HTTP_200_OK)
    async def sync_platform(self, platform: str, sync_service: SyncService) -> SyncResponse:
        """Fetch a platform's catalog and upsert it. Failures surface as 502."""
        logger.info(f"API request to sync {platform}")

        result = await sync_service.sync(parse_platform(platform))
        return SyncResponse.model_validate(result)


class TagController(Controller):
    path = "/tags"

    @get("/", status_code=HTTP_200_OK)
    async def list_tags(
        self,
        tag_store: TechnicalTagStore,
        algorithm_id: int | None = None,
    ) -> list[TechnicalTagResponse]:
        tags = await tag_store.list_tags(algorithm_id)
        return [TechnicalTagResponse.model_validate(tag) for tag in tags]


@get("/health", status_code=HTTP_200_OK)
async def health() -> HealthResponse:
    return HealthResponse(status="ok")
