"""Domain model for a canonical contest."""

from dataclasses import dataclass, field
from typing import Any

from .identifiers import ContestIdentifier
from .phase import Phase
from .platform import Platform
from .problem import Problem


@dataclass(frozen=True)
class Contest:
    """A contest (or pseudo-contest) together with the problems it owns."""

    id: str
    raw_id: str
    name: str
    category: str
    platform: Platform
    phase: Phase
    url: str
    start_time_seconds: int | None = None
    duration_seconds: int | None = None
    problems: tuple[Problem, ...] = field(default_factory=tuple)

    @classmethod
    def reconstruct(
        cls,
        *,
        platform: Platform,
        raw_id: str,
        name: str,
        category: str,
        phase: Phase,
        url: str,
        start_time_seconds: int | None = None,
        duration_seconds: int | None = None,
        problems: list[Problem] | tuple[Problem, ...] = (),
    ) -> "Contest":
        return cls(
            id=ContestIdentifier(platform, raw_id).canonical,
            raw_id=raw_id,
            name=name,
            category=category,
            platform=platform,
            phase=phase,
            url=url,
            start_time_seconds=start_time_seconds,
            duration_seconds=duration_seconds,
            problems=tuple(problems),
        )

    @classmethod
    def from_row(cls, row: Any, problems: tuple[Problem, ...] = ()) -> "Contest":
        """Rebuild a contest from a stored ``contests`` row."""
        return cls(
            id=row.id,
            raw_id=row.raw_id,
            name=row.name,
            category=row.category,
            platform=Platform.parse(row.platform),
            phase=Phase.parse(row.phase),
            url=row.url,
            start_time_seconds=row.start_time_seconds,
            duration_seconds=row.duration_seconds,
            problems=tuple(problems),
        )

    def to_row(self) -> dict[str, Any]:
        """Column values for the ``contests`` table."""
        return {
            "id": self.id,
            "raw_id": self.raw_id,
            "name": self.name,
            "category": self.category,
            "platform": self.platform.value,
            "phase": self.phase.value,
            "start_time_seconds": self.start_time_seconds,
            "duration_seconds": self.duration_seconds,
            "url": self.url,
        }
