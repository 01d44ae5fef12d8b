"""Per-run platform client: an assembler behind a single-flight cache."""

from loguru import logger

from domain.exceptions import UnsupportedPlatformError
from domain.models import Contest, Platform, Problem, Submission
from infrastructure.clients import (
    AojApiClient,
    AtcoderApiClient,
    CodeforcesApiClient,
    HTTPClientProtocol,
    YosupoApiClient,
    YukicoderApiClient,
)
from services.assembly import (
    AojAssembler,
    AtcoderAssembler,
    Catalog,
    CatalogAssembler,
    CodeforcesAssembler,
    YosupoAssembler,
    YukicoderAssembler,
)
from services.fetch_cache import SingleFlightCache


def build_assembler(
    platform: Platform,
    http_client: HTTPClientProtocol,
    yukicoder_request_interval: float = 1.0,
) -> CatalogAssembler:
    """Wire the source adapter and assembler for ``platform``."""
    if platform is Platform.ATCODER:
        return AtcoderAssembler(AtcoderApiClient(http_client))
    if platform is Platform.CODEFORCES:
        return CodeforcesAssembler(CodeforcesApiClient(http_client))
    if platform is Platform.YUKICODER:
        return YukicoderAssembler(
            YukicoderApiClient(http_client, request_interval=yukicoder_request_interval)
        )
    if platform is Platform.AOJ:
        return AojAssembler(AojApiClient(http_client))
    if platform is Platform.YOSUPO:
        return YosupoAssembler(YosupoApiClient(http_client))
    raise UnsupportedPlatformError(platform.value, "catalog assembly")


class PlatformCatalogClient:
    """Serves one platform's catalog, assembled at most once per instance.

    ``get_problems`` and ``get_contests`` share the same assembly; callers
    racing on a cold client all wait for one fetch.
    """

    def __init__(self, assembler: CatalogAssembler):
        self.assembler = assembler
        self.platform = assembler.platform
        self._catalog: SingleFlightCache[Catalog] = SingleFlightCache(
            assembler.assemble, name=f"{self.platform.value} catalog"
        )

    async def get_problems_and_contests(self) -> Catalog:
        return await self._catalog.get()

    async def get_problems(self) -> list[Problem]:
        problems, _ = await self._catalog.get()
        return problems

    async def get_contests(self) -> list[Contest]:
        _, contests = await self._catalog.get()
        return contests

    async def get_recent_submissions(self) -> list[Submission]:
        logger.debug(f"Fetching recent {self.platform.value} submissions")
        return await self.assembler.recent_submissions()

    async def get_user_submissions(
        self,
        user_id: str,
        *,
        from_second: int | None = None,
        page: int | None = None,
        size: int | None = None,
    ) -> list[Submission]:
        logger.debug(f"Fetching {self.platform.value} submissions of {user_id}")
        return await self.assembler.user_submissions(
            user_id, from_second=from_second, page=page, size=size
        )
