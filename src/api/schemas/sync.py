"""Pydantic schemas for sync, tag and health endpoints."""

from pydantic import BaseModel

from domain.models import Platform


class SyncResponse(BaseModel):
    platform: Platform
    contests: int
    problems: int

    class Config:
        from_attributes = True


class TechnicalTagResponse(BaseModel):
    id: int
    en_name: str
    ja_name: str
    algorithm_id: int

    class Config:
        from_attributes = True


class HealthResponse(BaseModel):
    status: str
