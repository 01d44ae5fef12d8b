"""Pydantic schemas for submission API endpoints."""

from pydantic import BaseModel

from domain.models import Language, Platform, Verdict


class ProblemInfoResponse(BaseModel):
    contest_id: str | None = None
    index: str | None = None
    name: str | None = None
    raw_point: float | None = None
    difficulty: float | None = None

    class Config:
        from_attributes = True


class SubmissionResponse(BaseModel):
    """Response containing a submission fetched from the judge."""

    id: str
    raw_id: str
    user_id: str
    language: Language
    raw_language: str
    platform: Platform
    verdict: Verdict
    submission_date: int  # Unix seconds
    execution_time: int | None = None  # ms
    memory: int | None = None  # KB
    code_size: int | None = None  # bytes
    problem: ProblemInfoResponse

    class Config:
        from_attributes = True
