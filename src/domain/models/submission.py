"""Domain model for a submission fetched from a judge."""

from dataclasses import dataclass

from .identifiers import SubmissionIdentifier
from .language import Language
from .platform import Platform
from .verdict import Verdict


@dataclass(frozen=True)
class ProblemInfo:
    """Minimal reference to the problem a submission was made for."""

    contest_id: str | None = None
    index: str | None = None
    name: str | None = None
    raw_point: float | None = None
    difficulty: float | None = None


@dataclass(frozen=True)
class Submission:
    """A judge submission. Never persisted; fetched fresh on every request."""

    id: str
    raw_id: str
    user_id: str
    language: Language
    raw_language: str
    platform: Platform
    verdict: Verdict
    submission_date: int
    problem: ProblemInfo
    execution_time: int | None = None
    memory: int | None = None
    code_size: int | None = None

    @classmethod
    def reconstruct(
        cls,
        *,
        platform: Platform,
        raw_id: str,
        user_id: str,
        raw_language: str,
        verdict: Verdict,
        submission_date: int,
        execution_time: int | None = None,
        memory: int | None = None,
        code_size: int | None = None,
        problem: ProblemInfo | None = None,
    ) -> "Submission":
        return cls(
            id=SubmissionIdentifier(platform, raw_id).canonical,
            raw_id=raw_id,
            user_id=user_id,
            language=Language.from_raw(raw_language),
            raw_language=raw_language,
            platform=platform,
            verdict=verdict,
            submission_date=submission_date,
            problem=problem or ProblemInfo(),
            execution_time=execution_time,
            memory=memory,
            code_size=code_size,
        )
