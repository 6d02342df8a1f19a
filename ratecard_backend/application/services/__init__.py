"""Service orchestrators."""

from .extraction_service import ExtractionOutcome, RatecardExtractionService
from .job_service import JobService, JobStats

__all__ = [
    "ExtractionOutcome",
    "JobService",
    "JobStats",
    "RatecardExtractionService",
]
