"""ORM models for processing jobs and extracted rate card entries."""

from ratecard_backend.boundary.db.models.processing_job_model import (
    JOB_TYPE_RATE_CARD,
    JobStatus,
    ProcessingJobModel,
)
from ratecard_backend.boundary.db.models.ratecard_entry_model import RatecardEntryModel

__all__ = [
    "JOB_TYPE_RATE_CARD",
    "JobStatus",
    "ProcessingJobModel",
    "RatecardEntryModel",
]
