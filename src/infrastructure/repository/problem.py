"""SQLAlchemy problem store."""

from collections import defaultdict
from collections.abc import Sequence

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from domain.models import Problem
from infrastructure.errors import PersistenceError, QueryError

from .interfaces import ProblemStore
from .query import ProblemFilter, compose_problem_query, compose_tag_query
from .tables import ProblemRow
from .upsert import chunked, dedupe_by, upsert_statement

DEFAULT_CHUNK_SIZE = 100


async def load_tags(session: AsyncSession, problem_ids: list[str]) -> dict[str, tuple[str, ...]]:
    """Tag names per problem id, in one query. Problems without tags are absent."""
    if not problem_ids:
        return {}

    result = await session.execute(compose_tag_query(problem_ids))
    grouped: dict[str, list[str]] = defaultdict(list)
    for problem_id, tag_name in result.all():
        grouped[problem_id].append(tag_name)
    return {problem_id: tuple(names) for problem_id, names in grouped.items()}


class SqlProblemStore(ProblemStore):
    def __init__(
        self,
        engine: AsyncEngine,
        session_factory: async_sessionmaker,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        self.engine = engine
        self.session_factory = session_factory
        self.chunk_size = chunk_size

    async def update_problems(self, problems: Sequence[Problem]) -> int:
        dialect = self.engine.dialect.name
        written = 0

        for chunk in chunked(list(problems), self.chunk_size):
            rows = dedupe_by([problem.to_row() for problem in chunk], "id")
            try:
                async with self.session_factory() as session:
                    async with session.begin():
                        await session.execute(upsert_statement(dialect, ProblemRow.__table__), rows)
            except SQLAlchemyError as e:
                ids = [row["id"] for row in rows]
                logger.error(f"Problem chunk failed ({len(ids)} rows): {e}")
                raise PersistenceError(ids, f"Failed to upsert problems: {e}") from e

            written += len(rows)
            logger.debug(f"Upserted {len(rows)} problems")

        return written

    async def find_problems(self, filters: ProblemFilter) -> list[Problem]:
        try:
            async with self.session_factory() as session:
                result = await session.execute(compose_problem_query(filters))
                rows = result.scalars().all()
                tags = await load_tags(session, [row.id for row in rows])
        except SQLAlchemyError as e:
            logger.error(f"Problem query failed: {e}")
            raise QueryError(f"Failed to query problems: {e}") from e

        return [Problem.from_row(row, tags.get(row.id, ())) for row in rows]
