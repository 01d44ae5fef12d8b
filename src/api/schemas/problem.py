"""Pydantic schemas for problem and contest API endpoints."""

from pydantic import BaseModel

from domain.models import Phase, Platform


class ProblemResponse(BaseModel):
    """Response containing a canonical problem."""

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
    tags: list[str] = []
    solver_count: int | None = None
    submissions: int | None = None
    success_rate: float | None = None  # Percentage, 0-100

    class Config:
        from_attributes = True


class ContestResponse(BaseModel):
    """Response containing a contest and the problems it owns."""

    id: str
    raw_id: str
    name: str
    category: str
    platform: Platform
    phase: Phase
    url: str
    start_time_seconds: int | None = None  # Unix seconds
    duration_seconds: int | None = None
    problems: list[ProblemResponse] = []

    class Config:
        from_attributes = True
