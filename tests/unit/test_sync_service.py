"""Unit tests for the sync pipeline and its failure phases."""

import pytest
import pytest_asyncio
from sqlalchemy import func, select
from unittest.mock import AsyncMock, MagicMock

from domain.classifiers.atcoder import AGC_001_START
from domain.exceptions import SyncError
from domain.models import Platform
from infrastructure.errors import PersistenceError, TransportError
from infrastructure.repository import (
    ProblemFilter,
    SqlContestStore,
    SqlProblemStore,
    create_engine,
    create_session_factory,
    init_schema,
)
from infrastructure.repository.tables import ContestProblemRow, ContestRow, ProblemRow
from services.assembly import AtcoderAssembler
from services.catalog import PlatformCatalogClient
from services.sync import FETCH, PERSIST, SyncService


def _client(catalog=None, error=None):
    client = MagicMock()
    client.get_problems_and_contests = AsyncMock(return_value=catalog, side_effect=error)
    return client


@pytest.mark.asyncio
async def test_sync_persists_assembled_contests():
    contest_store = AsyncMock()
    contests = [MagicMock(), MagicMock()]
    client = _client(catalog=(["p1", "p2", "p3"], contests))
    service = SyncService(contest_store=contest_store, client_factory=lambda platform: client)

    result = await service.sync(Platform.ATCODER)

    contest_store.update_contests.assert_awaited_once_with(contests)
    assert result.platform is Platform.ATCODER
    assert result.contests == 2
    assert result.problems == 3


@pytest.mark.asyncio
async def test_fetch_failure_skips_persistence():
    """Test that a fetch failure is reported in the fetch phase and nothing is written."""
    contest_store = AsyncMock()
    client = _client(error=TransportError("https://example.com", "boom", status_code=503))
    service = SyncService(contest_store=contest_store, client_factory=lambda platform: client)

    with pytest.raises(SyncError) as exc_info:
        await service.sync(Platform.CODEFORCES)

    assert exc_info.value.phase == FETCH
    assert exc_info.value.platform == "codeforces"
    assert isinstance(exc_info.value.cause, TransportError)
    contest_store.update_contests.assert_not_awaited()


@pytest.mark.asyncio
async def test_persist_failure_is_reported_in_persist_phase():
    contest_store = AsyncMock()
    contest_store.update_contests.side_effect = PersistenceError(["atcoder_abc100"], "db down")
    client = _client(catalog=([], [MagicMock()]))
    service = SyncService(contest_store=contest_store, client_factory=lambda platform: client)

    with pytest.raises(SyncError) as exc_info:
        await service.sync(Platform.ATCODER)

    assert exc_info.value.phase == PERSIST
    assert exc_info.value.cause.ids == ["atcoder_abc100"]


@pytest.mark.asyncio
async def test_each_sync_gets_a_fresh_client():
    contest_store = AsyncMock()
    factory = MagicMock(side_effect=lambda platform: _client(catalog=([], [])))
    service = SyncService(contest_store=contest_store, client_factory=factory)

    await service.sync(Platform.AOJ)
    await service.sync(Platform.AOJ)

    assert factory.call_count == 2


@pytest.mark.asyncio
async def test_sync_all_isolates_failures():
    """Test that one platform failing does not prevent the others from syncing."""
    contest_store = AsyncMock()
    clients = {
        Platform.ATCODER: _client(catalog=([], [])),
        Platform.CODEFORCES: _client(error=RuntimeError("bad payload")),
        Platform.YOSUPO: _client(catalog=([], [])),
    }
    service = SyncService(contest_store=contest_store, client_factory=clients.__getitem__)

    results = await service.sync_all(clients)

    assert results[Platform.ATCODER] is None
    assert results[Platform.YOSUPO] is None
    assert isinstance(results[Platform.CODEFORCES], SyncError)
    assert results[Platform.CODEFORCES].phase == FETCH
    assert contest_store.update_contests.await_count == 2


@pytest_asyncio.fixture
async def database():
    engine = create_engine("sqlite+aiosqlite:///:memory:")
    await init_schema(engine)
    yield engine, create_session_factory(engine)
    await engine.dispose()


def _atcoder_client():
    client = AsyncMock()
    client.fetch_contests.return_value = [
        {
            "id": "abc100",
            "title": "AtCoder Beginner Contest 100",
            "start_epoch_second": AGC_001_START + 86400,
            "duration_second": 6000,
            "rate_change": "~1999",
        }
    ]
    client.fetch_problems.return_value = [
        {
            "id": "abc100_a",
            "contest_id": "abc100",
            "problem_index": "A",
            "name": "Happy Birthday!",
            "point": 100.0,
            "solver_count": 50,
            "submission_count": 200,
        }
    ]
    client.fetch_problem_models.return_value = {"abc100_a": {"difficulty": -300.0}}
    return client


@pytest.mark.asyncio
async def test_sync_writes_catalog_to_database(database):
    """Test the full AtCoder pipeline into SQLite, run twice without duplicating rows."""
    engine, session_factory = database
    service = SyncService(
        contest_store=SqlContestStore(engine, session_factory),
        client_factory=lambda platform: PlatformCatalogClient(AtcoderAssembler(_atcoder_client())),
    )

    first = await service.sync(Platform.ATCODER)
    await service.sync(Platform.ATCODER)

    async with session_factory() as session:
        counts = [
            (await session.execute(select(func.count()).select_from(row))).scalar_one()
            for row in (ContestRow, ProblemRow, ContestProblemRow)
        ]
    [problem] = await SqlProblemStore(engine, session_factory).find_problems(ProblemFilter())

    assert first.contests == 1
    assert first.problems == 1
    assert counts == [1, 1, 1]
    assert problem.id == "atcoder_abc100_A"
    assert problem.contest_id == "atcoder_abc100"
    assert problem.index == "A"
    assert problem.category == "ABC"
    assert problem.success_rate == 25.0
    assert 0 <= problem.difficulty < 400
