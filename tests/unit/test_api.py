"""HTTP-level tests for the Litestar application."""

from unittest.mock import AsyncMock, MagicMock

from litestar.di import Provide
from litestar.testing import TestClient

from api.app import create_app
from domain.exceptions import UnsupportedPlatformError
from domain.models import Contest, Language, Phase, Platform, Problem, ProblemInfo, Submission, Verdict
from infrastructure.config import Settings
from infrastructure.errors import QueryError, TransportError
from services import ContestService, ProblemService, SubmissionService, SyncService

SETTINGS = Settings(database_url="sqlite+aiosqlite:///:memory:", log_level="WARNING")


def _provide(service):
    def provider():
        return service

    return Provide(provider, sync_to_thread=False)


def _override(**services):
    return {name: _provide(service) for name, service in services.items()}


def _problem():
    return Problem.reconstruct(
        platform=Platform.ATCODER,
        contest_raw_id="abc100",
        index="A",
        name="Happy Birthday!",
        category="ABC",
        url="https://atcoder.jp/contests/abc100/tasks/abc100_a",
        difficulty=12.0,
        solver_count=1,
        submissions=4,
    )


def test_health():
    with TestClient(app=create_app(SETTINGS)) as client:
        response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_empty_catalog_reads_from_database():
    """Test that the default wiring reads from the configured database."""
    with TestClient(app=create_app(SETTINGS)) as client:
        problems = client.get("/problems")
        contests = client.get("/contests")
        tags = client.get("/tags")

    assert problems.status_code == 200
    assert problems.json() == []
    assert contests.json() == []
    assert tags.json() == []


def test_list_problems_passes_filters():
    problem_store = AsyncMock()
    problem_store.find_problems.return_value = [_problem()]
    overrides = _override(problem_service=ProblemService(problem_store=problem_store))

    with TestClient(app=create_app(SETTINGS, overrides)) as client:
        response = client.get(
            "/problems",
            params={"platform": "atcoder", "difficulty_lower": 0, "difficulty_upper": 400, "page": 2},
        )

    assert response.status_code == 200
    [body] = response.json()
    assert body["id"] == "atcoder_abc100_A"
    assert body["platform"] == "atcoder"
    assert body["success_rate"] == 25.0
    assert body["tags"] == []

    filters = problem_store.find_problems.await_args.args[0]
    assert filters.platform is Platform.ATCODER
    assert filters.difficulty_lower == 0
    assert filters.difficulty_upper == 400
    assert filters.page == 2
    assert filters.per_page == 20


def test_list_contests_embeds_problems():
    contest_store = AsyncMock()
    contest_store.find_contests.return_value = [
        Contest.reconstruct(
            platform=Platform.ATCODER,
            raw_id="abc100",
            name="AtCoder Beginner Contest 100",
            category="ABC",
            phase=Phase.FINISHED,
            url="https://atcoder.jp/contests/abc100",
            problems=[_problem()],
        )
    ]
    overrides = _override(contest_service=ContestService(contest_store=contest_store))

    with TestClient(app=create_app(SETTINGS, overrides)) as client:
        response = client.get("/contests", params={"category": "ABC"})

    assert response.status_code == 200
    [body] = response.json()
    assert body["id"] == "atcoder_abc100"
    assert body["phase"] == "finished"
    assert [p["id"] for p in body["problems"]] == ["atcoder_abc100_A"]
    assert contest_store.find_contests.await_args.args[0].per_page == 100


def test_unknown_platform_is_rejected():
    problem_store = AsyncMock()
    overrides = _override(problem_service=ProblemService(problem_store=problem_store))

    with TestClient(app=create_app(SETTINGS, overrides)) as client:
        response = client.get("/problems", params={"platform": "topcoder"})
        sync_response = client.post("/sync/topcoder")

    assert response.status_code == 400
    assert sync_response.status_code == 400
    problem_store.find_problems.assert_not_awaited()


def test_query_failure_is_500():
    problem_store = AsyncMock()
    problem_store.find_problems.side_effect = QueryError("database is locked")
    overrides = _override(problem_service=ProblemService(problem_store=problem_store))

    with TestClient(app=create_app(SETTINGS, overrides)) as client:
        response = client.get("/problems")

    assert response.status_code == 500
    assert "database is locked" in response.json()["detail"]


def test_sync_success_and_upstream_failure():
    """Test that a sync reports its counts, and a fetch failure maps to 502."""
    healthy = MagicMock()
    healthy.get_problems_and_contests = AsyncMock(return_value=([_problem()], [MagicMock()]))
    broken = MagicMock()
    broken.get_problems_and_contests = AsyncMock(
        side_effect=TransportError("https://codeforces.com/api/contest.list", "HTTP 503", status_code=503)
    )
    clients = {Platform.ATCODER: healthy, Platform.CODEFORCES: broken}
    service = SyncService(contest_store=AsyncMock(), client_factory=clients.__getitem__)

    with TestClient(app=create_app(SETTINGS, _override(sync_service=service))) as client:
        ok = client.post("/sync/atcoder")
        failed = client.post("/sync/codeforces")

    assert ok.status_code == 200
    assert ok.json() == {"platform": "atcoder", "contests": 1, "problems": 1}
    assert failed.status_code == 502
    assert "fetch" in failed.json()["detail"]


def test_submissions_unsupported_platform_is_400():
    client_for_platform = MagicMock()
    client_for_platform.return_value.get_recent_submissions = AsyncMock(
        side_effect=UnsupportedPlatformError("yukicoder", "recent submissions")
    )
    service = SubmissionService(client_factory=client_for_platform)

    with TestClient(app=create_app(SETTINGS, _override(submission_service=service))) as client:
        response = client.get("/submissions/yukicoder/recent")

    assert response.status_code == 400


def test_user_submissions_are_serialized():
    submission = Submission.reconstruct(
        platform=Platform.AOJ,
        raw_id="4000000",
        user_id="judge",
        raw_language="C++17",
        verdict=Verdict.ACCEPTED,
        submission_date=1577836800,
        execution_time=30,
        problem=ProblemInfo(index="0000", name="QQ"),
    )
    client_for_platform = MagicMock()
    client_for_platform.return_value.get_user_submissions = AsyncMock(return_value=[submission])
    service = SubmissionService(client_factory=client_for_platform)

    with TestClient(app=create_app(SETTINGS, _override(submission_service=service))) as client:
        response = client.get("/submissions/aoj/users/judge", params={"page": 1, "size": 10})

    assert response.status_code == 200
    [body] = response.json()
    assert body["id"] == "aoj_4000000"
    assert body["language"] == Language.CPP.value
    assert body["verdict"] == Verdict.ACCEPTED.value
    assert body["problem"]["name"] == "QQ"
    client_for_platform.assert_called_once_with(Platform.AOJ)
    client_for_platform.return_value.get_user_submissions.assert_awaited_once_with(
        "judge", from_second=None, page=1, size=10
    )
