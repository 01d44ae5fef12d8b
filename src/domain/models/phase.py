"""Contest phase value object."""

from enum import Enum


class Phase(str, Enum):
    BEFORE = "before"
    CODING = "coding"
    FINISHED = "finished"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str | None) -> "Phase":
        """Parse a phase case-insensitively; unknown strings map to UNKNOWN."""
        if not value:
            return cls.UNKNOWN
        try:
            return cls(value.lower())
        except ValueError:
            return cls.UNKNOWN

    def __str__(self) -> str:
        return self.value
