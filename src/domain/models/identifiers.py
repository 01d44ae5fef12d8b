"""Value objects for canonical identification.

Canonical ids namespace a platform-local id by its platform tag. Storage
upserts resolve conflicts on these ids, so they must stay stable across
fetches: raw ids are used exactly as given (callers trim them).
"""

from dataclasses import dataclass

from .platform import Platform


def contest_id(platform: Platform, raw_contest_id: str) -> str:
    """Build ``<platform>_<raw contest id>``."""
    return f"{platform.value}_{raw_contest_id}"


def problem_id(platform: Platform, raw_contest_id: str, index: str) -> str:
    """Build ``<platform>_<raw contest id>_<index>``."""
    return f"{platform.value}_{raw_contest_id}_{index}"


def submission_id(platform: Platform, raw_submission_id: str) -> str:
    """Build ``<platform>_<raw submission id>``."""
    return f"{platform.value}_{raw_submission_id}"


@dataclass(frozen=True)
class ContestIdentifier:
    """Identifies a contest on a specific platform."""

    platform: Platform
    raw_id: str

    @property
    def canonical(self) -> str:
        return contest_id(self.platform, self.raw_id)

    def __str__(self) -> str:
        """String representation."""
        return self.canonical


@dataclass(frozen=True)
class ProblemIdentifier:
    """Identifies a problem by its contest and ordinal index."""

    platform: Platform
    contest_raw_id: str
    index: str

    @property
    def contest(self) -> ContestIdentifier:
        return ContestIdentifier(self.platform, self.contest_raw_id)

    @property
    def canonical(self) -> str:
        return problem_id(self.platform, self.contest_raw_id, self.index)

    def __str__(self) -> str:
        """String representation."""
        return self.canonical


@dataclass(frozen=True)
class SubmissionIdentifier:
    """Identifies a submission on a specific platform."""

    platform: Platform
    raw_id: str

    @property
    def canonical(self) -> str:
        return submission_id(self.platform, self.raw_id)

    def __str__(self) -> str:
        """String representation."""
        return self.canonical


def num_to_alphabet(position: int) -> str:
    """Spreadsheet-style index for a 0-based position: 0 -> A, 25 -> Z, 26 -> AA."""
    if position < 0:
        raise ValueError(f"position must be non-negative, got {position}")

    letters = []
    n = position + 1
    while n > 0:
        n, rem = divmod(n - 1, 26)
        letters.append(chr(ord("A") + rem))
    return "".join(reversed(letters))
