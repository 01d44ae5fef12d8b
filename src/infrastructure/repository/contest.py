"""SQLAlchemy contest store: the chunked upsert engine for contests."""

from collections import defaultdict
from collections.abc import Sequence

from loguru import logger
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from domain.models import Contest, Problem
from infrastructure.errors import PersistenceError, QueryError

from .interfaces import ContestStore
from .problem import DEFAULT_CHUNK_SIZE, load_tags
from .query import ContestFilter, compose_contest_query
from .tables import ContestProblemRow, ContestRow, ProblemRow
from .upsert import chunked, dedupe_by, insert_ignore_statement, upsert_statement


class SqlContestStore(ContestStore):
    """Writes contests, their problems and the join rows.

    Each chunk of contests is written in one transaction: contests first,
    then problems, then ``contest_problems``. A failing chunk is rolled back
    and reported; chunks committed before it stay committed.
    """

    def __init__(
        self,
        engine: AsyncEngine,
        session_factory: async_sessionmaker,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        self.engine = engine
        self.session_factory = session_factory
        self.chunk_size = chunk_size

    async def update_contests(self, contests: Sequence[Contest]) -> int:
        dialect = self.engine.dialect.name
        written = 0

        for chunk in chunked(list(contests), self.chunk_size):
            contest_rows = dedupe_by([contest.to_row() for contest in chunk], "id")
            problems = [problem for contest in chunk for problem in contest.problems]
            problem_rows = dedupe_by([problem.to_row() for problem in problems], "id")
            link_rows = dedupe_by(
                [
                    {"contest_id": contest.id, "problem_id": problem.id}
                    for contest in chunk
                    for problem in contest.problems
                ],
                "contest_id",
                "problem_id",
            )

            try:
                async with self.session_factory() as session:
                    async with session.begin():
                        await session.execute(
                            upsert_statement(dialect, ContestRow.__table__), contest_rows
                        )
                        if problem_rows:
                            await session.execute(
                                upsert_statement(dialect, ProblemRow.__table__), problem_rows
                            )
                        if link_rows:
                            await session.execute(
                                insert_ignore_statement(dialect, ContestProblemRow.__table__),
                                link_rows,
                            )
            except SQLAlchemyError as e:
                ids = [row["id"] for row in contest_rows]
                logger.error(f"Contest chunk failed ({len(ids)} contests): {e}")
                raise PersistenceError(ids, f"Failed to upsert contests: {e}") from e

            written += len(contest_rows)
            logger.debug(
                f"Upserted {len(contest_rows)} contests, {len(problem_rows)} problems, "
                f"{len(link_rows)} links"
            )

        return written

    async def find_contests(self, filters: ContestFilter) -> list[Contest]:
        try:
            async with self.session_factory() as session:
                result = await session.execute(compose_contest_query(filters))
                contest_rows = result.scalars().all()

                contest_ids = [row.id for row in contest_rows]
                owned = await session.execute(
                    select(ContestProblemRow.contest_id, ProblemRow)
                    .join(ProblemRow, ProblemRow.id == ContestProblemRow.problem_id)
                    .where(ContestProblemRow.contest_id.in_(contest_ids))
                    .order_by(ProblemRow.id)
                )
                pairs = owned.all() if contest_ids else []
                tags = await load_tags(session, [problem.id for _, problem in pairs])
        except SQLAlchemyError as e:
            logger.error(f"Contest query failed: {e}")
            raise QueryError(f"Failed to query contests: {e}") from e

        problems_by_contest: dict[str, list[Problem]] = defaultdict(list)
        for contest_id, problem_row in pairs:
            problems_by_contest[contest_id].append(
                Problem.from_row(problem_row, tags.get(problem_row.id, ()))
            )

        return [
            Contest.from_row(row, tuple(problems_by_contest.get(row.id, ())))
            for row in contest_rows
        ]
