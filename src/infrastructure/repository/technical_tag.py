"""Curated technical tags and their algorithm families."""

from dataclasses import dataclass

from loguru import logger
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from infrastructure.errors import PersistenceError, QueryError

from .tables import AlgorithmRow, ProblemTagRow, TechnicalTagRow
from .upsert import insert_ignore_statement


@dataclass(frozen=True)
class TechnicalTag:
    id: int
    en_name: str
    ja_name: str
    algorithm_id: int


@dataclass(frozen=True)
class Algorithm:
    id: int
    name: str


class TechnicalTagStore:
    def __init__(self, engine: AsyncEngine, session_factory: async_sessionmaker):
        self.engine = engine
        self.session_factory = session_factory

    async def list_tags(self, algorithm_id: int | None = None) -> list[TechnicalTag]:
        statement = select(TechnicalTagRow).order_by(TechnicalTagRow.id)
        if algorithm_id is not None:
            statement = statement.where(TechnicalTagRow.algorithm_id == algorithm_id)

        try:
            async with self.session_factory() as session:
                rows = (await session.execute(statement)).scalars().all()
        except SQLAlchemyError as e:
            logger.error(f"Tag query failed: {e}")
            raise QueryError(f"Failed to query technical tags: {e}") from e

        return [
            TechnicalTag(id=row.id, en_name=row.en_name, ja_name=row.ja_name, algorithm_id=row.algorithm_id)
            for row in rows
        ]

    async def create_algorithm(self, name: str) -> Algorithm:
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    row = AlgorithmRow(name=name)
                    session.add(row)
                    await session.flush()
                    algorithm = Algorithm(id=row.id, name=row.name)
        except SQLAlchemyError as e:
            raise PersistenceError([name], f"Failed to create algorithm: {e}") from e

        logger.info(f"Created algorithm {algorithm.id}: {name}")
        return algorithm

    async def create_tag(self, en_name: str, ja_name: str, algorithm_id: int) -> TechnicalTag:
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    row = TechnicalTagRow(en_name=en_name, ja_name=ja_name, algorithm_id=algorithm_id)
                    session.add(row)
                    await session.flush()
                    tag = TechnicalTag(
                        id=row.id, en_name=en_name, ja_name=ja_name, algorithm_id=algorithm_id
                    )
        except SQLAlchemyError as e:
            raise PersistenceError([en_name], f"Failed to create technical tag: {e}") from e

        logger.info(f"Created technical tag {tag.id}: {en_name}")
        return tag

    async def attach_tag(self, problem_id: str, technical_tag_id: int) -> None:
        """Attach a tag to a problem. Attaching twice is a no-op."""
        statement = insert_ignore_statement(self.engine.dialect.name, ProblemTagRow.__table__)
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    await session.execute(
                        statement,
                        [{"problem_id": problem_id, "technical_tag_id": technical_tag_id}],
                    )
        except SQLAlchemyError as e:
            raise PersistenceError([problem_id], f"Failed to attach tag {technical_tag_id}: {e}") from e
