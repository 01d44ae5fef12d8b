"""Shared pieces of the per-platform assemblers."""

from abc import ABC, abstractmethod
from collections import defaultdict
from collections.abc import Callable, Hashable, Iterable
from typing import TypeVar

from domain.exceptions import ReferentialIntegrityError, UnsupportedPlatformError
from domain.models import Contest, Platform, Problem, Submission

Catalog = tuple[list[Problem], list[Contest]]

K = TypeVar("K", bound=Hashable)
R = TypeVar("R")


def group_by_contest(
    platform: Platform,
    records: Iterable[R],
    contest_key: Callable[[R], K],
    known_contests: set[K],
) -> dict[K, list[R]]:
    """
    Group raw problem records under their contest key.

    Raises ReferentialIntegrityError when a record points at a contest that
    is not part of the fetched contest set.
    """
    grouped: dict[K, list[R]] = defaultdict(list)
    for record in records:
        key = contest_key(record)
        if key not in known_contests:
            raise ReferentialIntegrityError(
                platform.value, f"problem references unknown contest {key!r}"
            )
        grouped[key].append(record)
    return grouped


def flatten_problems(contests: Iterable[Contest]) -> list[Problem]:
    return [problem for contest in contests for problem in contest.problems]


class CatalogAssembler(ABC):
    """Turns one platform's raw records into canonical problems and contests."""

    platform: Platform

    @abstractmethod
    async def assemble(self) -> Catalog:
        """Fetch and normalize the full problem/contest catalog."""

    async def recent_submissions(self) -> list[Submission]:
        raise UnsupportedPlatformError(self.platform.value, "recent submissions")

    async def user_submissions(
        self,
        user_id: str,
        *,
        from_second: int | None = None,
        page: int | None = None,
        size: int | None = None,
    ) -> list[Submission]:
        raise UnsupportedPlatformError(self.platform.value, "user submissions")
