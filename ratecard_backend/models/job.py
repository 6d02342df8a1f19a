"""
Processing job schemas.

Dependencies: pydantic
System role: Job API contracts
"""

from datetime import datetime

from pydantic import Field

from ratecard_backend.boundary.db.models.processing_job_model import JobStatus
from ratecard_backend.models.common import CamelModel
from ratecard_backend.models.ratecard import RatecardEntryResponse


class ProcessingJobResponse(CamelModel):
    """Processing job as listed by the API."""

    id: int
    job_type: str
    file_name: str
    media_owner: str
    status: JobStatus
    progress: int
    total_chunks: int
    processed_chunks: int
    extraction_notes: str | None = None
    error_message: str | None = None
    result_data: list[dict] | None = None
    ai_provider: str
    created_at: datetime
    updated_at: datetime


class ProcessingJobDetailResponse(ProcessingJobResponse):
    """Processing job with its stored entries."""

    results: list[RatecardEntryResponse] = Field(default_factory=list)
