from functools import partial

from domain.models import Platform
from infrastructure.clients import HTTPClientProtocol
from infrastructure.config import Settings
from infrastructure.repository import SqlContestStore, SqlProblemStore
from services.catalog import PlatformCatalogClient, build_assembler
from services.contest import ContestService
from services.problem import ProblemService
from services.submission import SubmissionService
from services.sync import ClientFactory, SyncResult, SyncService


def _new_catalog_client(
    platform: Platform, *, http_client: HTTPClientProtocol, settings: Settings
) -> PlatformCatalogClient:
    assembler = build_assembler(
        platform,
        http_client,
        yukicoder_request_interval=settings.yukicoder_request_interval,
    )
    return PlatformCatalogClient(assembler)


def create_client_factory(http_client: HTTPClientProtocol, settings: Settings) -> ClientFactory:
    """Factory returning a fresh catalog client (with an empty cache) per call."""
    return partial(_new_catalog_client, http_client=http_client, settings=settings)


def create_sync_service(engine, session_factory, http_client, settings: Settings) -> SyncService:
    """Factory function to create sync service with all dependencies."""
    contest_store = SqlContestStore(engine, session_factory, chunk_size=settings.sync_chunk_size)
    return SyncService(
        contest_store=contest_store,
        client_factory=create_client_factory(http_client, settings),
    )


def create_problem_service(engine, session_factory) -> ProblemService:
    return ProblemService(problem_store=SqlProblemStore(engine, session_factory))


def create_contest_service(engine, session_factory) -> ContestService:
    return ContestService(contest_store=SqlContestStore(engine, session_factory))


def create_submission_service(http_client, settings: Settings) -> SubmissionService:
    return SubmissionService(client_factory=create_client_factory(http_client, settings))


__all__ = [
    "ContestService",
    "PlatformCatalogClient",
    "ProblemService",
    "SubmissionService",
    "SyncResult",
    "SyncService",
    "create_client_factory",
    "create_contest_service",
    "create_problem_service",
    "create_submission_service",
    "create_sync_service",
]
