"""Filter objects and SELECT composition for catalog reads.

Unset filters are left out of the predicate. Results are always ordered by
id so pagination is stable.
"""

from dataclasses import dataclass

from sqlalchemy import Select, select

from domain.models import Platform

from .tables import ContestRow, ProblemRow, ProblemTagRow, TechnicalTagRow

DEFAULT_PROBLEMS_PER_PAGE = 20
DEFAULT_CONTESTS_PER_PAGE = 100


@dataclass(frozen=True)
class ProblemFilter:
    platform: Platform | None = None
    category: str | None = None
    algorithm_id: int | None = None
    tag_id: int | None = None
    difficulty_lower: float | None = None
    difficulty_upper: float | None = None
    page: int = 1
    per_page: int = DEFAULT_PROBLEMS_PER_PAGE


@dataclass(frozen=True)
class ContestFilter:
    platform: Platform | None = None
    category: str | None = None
    page: int = 1
    per_page: int = DEFAULT_CONTESTS_PER_PAGE


def _paginate(statement: Select, page: int, per_page: int) -> Select:
    page = max(page, 1)
    per_page = max(per_page, 1)
    return statement.limit(per_page).offset((page - 1) * per_page)


def compose_problem_query(filters: ProblemFilter) -> Select:
    statement = select(ProblemRow)

    if filters.platform is not None:
        statement = statement.where(ProblemRow.platform == filters.platform.value)
    if filters.category is not None:
        statement = statement.where(ProblemRow.category == filters.category)
    if filters.difficulty_lower is not None:
        statement = statement.where(ProblemRow.difficulty >= filters.difficulty_lower)
    if filters.difficulty_upper is not None:
        statement = statement.where(ProblemRow.difficulty <= filters.difficulty_upper)
    if filters.tag_id is not None:
        tagged = select(ProblemTagRow.problem_id).where(
            ProblemTagRow.technical_tag_id == filters.tag_id
        )
        statement = statement.where(ProblemRow.id.in_(tagged))
    if filters.algorithm_id is not None:
        in_algorithm = (
            select(ProblemTagRow.problem_id)
            .join(TechnicalTagRow, TechnicalTagRow.id == ProblemTagRow.technical_tag_id)
            .where(TechnicalTagRow.algorithm_id == filters.algorithm_id)
        )
        statement = statement.where(ProblemRow.id.in_(in_algorithm))

    return _paginate(statement.order_by(ProblemRow.id), filters.page, filters.per_page)


def compose_contest_query(filters: ContestFilter) -> Select:
    statement = select(ContestRow)

    if filters.platform is not None:
        statement = statement.where(ContestRow.platform == filters.platform.value)
    if filters.category is not None:
        statement = statement.where(ContestRow.category == filters.category)

    return _paginate(statement.order_by(ContestRow.id), filters.page, filters.per_page)


def compose_tag_query(problem_ids: list[str]) -> Select:
    """(problem id, tag name) pairs for the given problems."""
    return (
        select(ProblemTagRow.problem_id, TechnicalTagRow.en_name)
        .join(TechnicalTagRow, TechnicalTagRow.id == ProblemTagRow.technical_tag_id)
        .where(ProblemTagRow.problem_id.in_(problem_ids))
        .order_by(ProblemTagRow.problem_id, TechnicalTagRow.en_name)
    )
