"""
Rate card entry schemas.

Dependencies: pydantic
System role: Entry and upload API contracts
"""

from datetime import datetime

from pydantic import Field

from ratecard_backend.boundary.db.models.processing_job_model import JobStatus
from ratecard_backend.models.common import CamelModel


class RatecardEntryResponse(CamelModel):
    """Stored rate card entry."""

    id: int
    job_id: int | None
    original_file_name: str
    source_page: int | None = None
    media_type: str | None = None
    media_format: str | None = None
    placement_name: str | None = None
    dimensions: str | None = None
    cost_media_4weeks: str | None = Field(default=None, alias="costMedia4weeks")
    production_cost: str | None = None
    total_cost: str | None = None
    notes: str | None = None
    confidence: str
    created_at: datetime


class UploadResponse(CamelModel):
    """Result of a processed upload."""

    job_id: int
    status: JobStatus
    results: int = Field(description="Number of entries extracted")
    message: str
