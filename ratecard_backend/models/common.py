"""
Common response models.

Base model for camelCase wire payloads plus small probe and dashboard
responses.

Dependencies: pydantic
System role: Common API response structures
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Response base: snake_case attributes, camelCase JSON keys, ORM-readable."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class HealthResponse(BaseModel):
    """Liveness probe response."""

    status: str = "ok"
    timestamp: datetime


class AuthCheckResponse(CamelModel):
    """Bearer token probe response."""

    authenticated: bool = True
    role: str


class StatsResponse(CamelModel):
    """Dashboard counters over the most recent jobs."""

    total_jobs: int
    processing_jobs: int
    completed_jobs: int
    failed_jobs: int
    success_rate: int = Field(description="Completed over total, rounded percent")
    total_entries: int
