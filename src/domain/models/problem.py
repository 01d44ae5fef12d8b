"""Domain model for a canonical problem."""

from dataclasses import dataclass, field
from typing import Any

from domain.metrics import success_rate

from .identifiers import ProblemIdentifier
from .platform import Platform


@dataclass(frozen=True)
class Problem:
    """A problem normalized from any platform.

    Instances are built through ``reconstruct`` (from a raw record) or
    ``from_row`` (from storage) and never mutated afterwards.
    """

    id: str
    contest_id: str
    index: str
    name: str
    title: str
    platform: Platform
    category: str
    url: str
    raw_point: float | None = None
    difficulty: float | None = None
    is_experimental: bool | None = None
    tags: tuple[str, ...] = field(default_factory=tuple)
    solver_count: int | None = None
    submissions: int | None = None
    success_rate: float | None = None

    @classmethod
    def reconstruct(
        cls,
        *,
        platform: Platform,
        contest_raw_id: str,
        index: str,
        name: str,
        category: str,
        url: str,
        raw_point: float | None = None,
        difficulty: float | None = None,
        is_experimental: bool | None = None,
        tags: list[str] | tuple[str, ...] = (),
        solver_count: int | None = None,
        submissions: int | None = None,
    ) -> "Problem":
        """Build a problem from raw platform fields, deriving ids, title and rate."""
        identifier = ProblemIdentifier(platform, contest_raw_id, index)
        return cls(
            id=identifier.canonical,
            contest_id=identifier.contest.canonical,
            index=index,
            name=name,
            title=f"{index}. {name}",
            platform=platform,
            category=category,
            url=url,
            raw_point=raw_point,
            difficulty=difficulty,
            is_experimental=is_experimental,
            tags=tuple(tags),
            solver_count=solver_count,
            submissions=submissions,
            success_rate=success_rate(solver_count, submissions),
        )

    @classmethod
    def from_row(cls, row: Any, tags: tuple[str, ...] = ()) -> "Problem":
        """Rebuild a problem from a stored ``problems`` row."""
        return cls(
            id=row.id,
            contest_id=row.contest_id,
            index=row.problem_index,
            name=row.name,
            title=row.title,
            platform=Platform.parse(row.platform),
            category=row.category,
            url=row.url,
            raw_point=row.raw_point,
            difficulty=row.difficulty,
            is_experimental=row.is_experimental,
            tags=tuple(tags),
            solver_count=row.solver_count,
            submissions=row.submissions,
            success_rate=row.success_rate,
        )

    def to_row(self) -> dict[str, Any]:
        """Column values for the ``problems`` table."""
        return {
            "id": self.id,
            "contest_id": self.contest_id,
            "problem_index": self.index,
            "name": self.name,
            "title": self.title,
            "platform": self.platform.value,
            "category": self.category,
            "raw_point": self.raw_point,
            "difficulty": self.difficulty,
            "is_experimental": self.is_experimental,
            "url": self.url,
            "solver_count": self.solver_count,
            "submissions": self.submissions,
            "success_rate": self.success_rate,
        }
