"""Abstract store interfaces."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from domain.models import Contest, Problem

from .query import ContestFilter, ProblemFilter


class ContestStore(ABC):
    @abstractmethod
    async def update_contests(self, contests: Sequence[Contest]) -> int:
        """Upsert contests with their problems and join rows; returns rows written."""

    @abstractmethod
    async def find_contests(self, filters: ContestFilter) -> list[Contest]:
        """Contests matching ``filters``, ordered by id, with their problems."""


class ProblemStore(ABC):
    @abstractmethod
    async def update_problems(self, problems: Sequence[Problem]) -> int:
        """Upsert standalone problem rows; returns rows written."""

    @abstractmethod
    async def find_problems(self, filters: ProblemFilter) -> list[Problem]:
        """Problems matching ``filters``, ordered by id, with their tag sets."""
