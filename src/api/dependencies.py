from typing import TYPE_CHECKING

from litestar.di import Provide

from infrastructure.repository import TechnicalTagStore
from services import (
    ContestService,
    ProblemService,
    SubmissionService,
    SyncService,
    create_contest_service,
    create_problem_service,
    create_submission_service,
    create_sync_service,
)

if TYPE_CHECKING:
    from litestar.datastructures import State


def provide_problem_service(state: "State") -> ProblemService:
    return create_problem_service(state.engine, state.session_factory)


def provide_contest_service(state: "State") -> ContestService:
    return create_contest_service(state.engine, state.session_factory)


def provide_submission_service(state: "State") -> SubmissionService:
    return create_submission_service(state.http_client, state.settings)


def provide_sync_service(state: "State") -> SyncService:
    return create_sync_service(
        state.engine, state.session_factory, state.http_client, state.settings
    )


def provide_tag_store(state: "State") -> TechnicalTagStore:
    return TechnicalTagStore(state.engine, state.session_factory)


DEPENDENCIES = {
    "problem_service": Provide(provide_problem_service, sync_to_thread=False),
    "contest_service": Provide(provide_contest_service, sync_to_thread=False),
    "submission_service": Provide(provide_submission_service, sync_to_thread=False),
    "sync_service": Provide(provide_sync_service, sync_to_thread=False),
    "tag_store": Provide(provide_tag_store, sync_to_thread=False),
}
