"""
Job service orchestrator.

Read side of the rate card workflow: job listing and detail, stored
results, dashboard counters and CSV exports.

Dependencies: ratecard_backend.boundary.db.CRUD, ratecard_backend.core.ratecard
System role: Job and result query orchestration
"""

from dataclasses import dataclass
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from ratecard_backend.boundary.db.CRUD.processing_job_crud import processing_job_crud
from ratecard_backend.boundary.db.CRUD.ratecard_entry_crud import ratecard_entry_crud
from ratecard_backend.boundary.db.models.processing_job_model import JobStatus, ProcessingJobModel
from ratecard_backend.boundary.db.models.ratecard_entry_model import RatecardEntryModel
from ratecard_backend.core.exceptions import JobNotFoundError, ValidationError
from ratecard_backend.core.ratecard.csv_export import build_all_entries_csv, build_job_csv

ALL_FILTER = "all"


@dataclass(frozen=True)
class JobStats:
    """Dashboard counters over the most recent jobs."""

    total_jobs: int
    processing_jobs: int
    completed_jobs: int
    failed_jobs: int
    success_rate: int
    total_entries: int


def _percent_half_up(part: int, total: int) -> int:
    """Whole percent of part over total, halves rounded up; 0 when total is 0."""
    if not total:
        return 0
    return (part * 200 + total) // (total * 2)


class JobService:
    """
    Job service orchestrator.

    Provides abstraction over the job and entry CRUD singletons for the
    data engineer endpoints. Filters are applied here, over the full
    result set returned by the store.
    """

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize job service.

        Args:
            db: AsyncSession for database operations
        """
        self.db = db

    async def list_jobs(self, status: JobStatus | str | None = None) -> list[ProcessingJobModel]:
        """
        List recent jobs, newest first.

        Args:
            status: Optional status filter; "all" or None disables it

        Returns:
            list[ProcessingJobModel]: Up to 50 jobs

        Raises:
            ValidationError: If the status is not a known job status
        """
        jobs = list(await processing_job_crud.get_recent(self.db))
        if status is None or status == ALL_FILTER:
            return jobs
        try:
            wanted = JobStatus(status)
        except ValueError:
            raise ValidationError(f"Unknown job status: {status}", field="status")
        return [job for job in jobs if job.status == wanted]

    async def get_job(self, job_id: int) -> ProcessingJobModel:
        """
        Get a job by id.

        Raises:
            JobNotFoundError: If job doesn't exist
        """
        job = await processing_job_crud.get_by_id(self.db, job_id)
        if job is None:
            raise JobNotFoundError(job_id)
        return job

    async def get_job_with_entries(
        self,
        job_id: int,
    ) -> tuple[ProcessingJobModel, Sequence[RatecardEntryModel]]:
        """
        Get a job together with its stored entries.

        Args:
            job_id: Job id

        Returns:
            tuple: The job and its entries in insertion order

        Raises:
            JobNotFoundError: If job doesn't exist
        """
        job = await self.get_job(job_id)
        entries = await ratecard_entry_crud.get_by_job_id(self.db, job_id)
        return job, entries

    async def list_results(self, media_type: str | None = None) -> list[RatecardEntryModel]:
        """
        List every stored entry, newest first.

        Args:
            media_type: Optional case-insensitive media type filter; "all"
                or None disables it

        Returns:
            list[RatecardEntryModel]: Matching entries
        """
        entries = list(await ratecard_entry_crud.get_all_newest_first(self.db))
        if not media_type or media_type.lower() == ALL_FILTER:
            return entries
        wanted = media_type.lower()
        return [e for e in entries if (e.media_type or "").lower() == wanted]

    async def get_stats(self) -> JobStats:
        """Compute dashboard counters over the 50 most recent jobs."""
        jobs = await processing_job_crud.get_recent(self.db)
        total = len(jobs)
        completed = sum(1 for job in jobs if job.status == JobStatus.COMPLETED)

        return JobStats(
            total_jobs=total,
            processing_jobs=sum(1 for job in jobs if job.status == JobStatus.PROCESSING),
            completed_jobs=completed,
            failed_jobs=sum(1 for job in jobs if job.status == JobStatus.FAILED),
            success_rate=_percent_half_up(completed, total),
            total_entries=sum(len(job.result_data or []) for job in jobs),
        )

    async def export_job_csv(self, job_id: int) -> str | None:
        """
        Build the CSV export for one job.

        Returns:
            str | None: CSV text, or None when the job has no entries
        """
        entries = await ratecard_entry_crud.get_by_job_id(self.db, job_id)
        if not entries:
            return None
        return build_job_csv(entries)

    async def export_all_csv(self) -> str | None:
        """
        Build the CSV export across all jobs.

        Returns:
            str | None: CSV text, or None when nothing is stored
        """
        entries = await ratecard_entry_crud.get_all_newest_first(self.db)
        if not entries:
            return None
        return build_all_entries_csv(entries)
