"""
Processing job CRUD operations.

Provides Create, Read, Update operations for ProcessingJobModel with
job-specific queries for recency listing and terminal state transitions.

Dependencies: sqlalchemy, ratecard_backend.boundary.db.models
System role: Job persistence for rate card extraction
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ratecard_backend.boundary.db.base import utc_now
from ratecard_backend.boundary.db.CRUD.base_crud import BaseCRUD
from ratecard_backend.boundary.db.models.processing_job_model import (
    JobStatus,
    ProcessingJobModel,
)

RECENT_JOBS_LIMIT = 50


class ProcessingJobCRUD(BaseCRUD[ProcessingJobModel]):
    """
    CRUD operations for ProcessingJobModel.

    Extends BaseCRUD with newest-first listing and status transitions.
    Every update also refreshes updated_at.
    """

    def __init__(self) -> None:
        """Initialize ProcessingJobCRUD with ProcessingJobModel."""
        super().__init__(ProcessingJobModel)

    async def get_recent(
        self,
        session: AsyncSession,
        limit: int = RECENT_JOBS_LIMIT,
    ) -> Sequence[ProcessingJobModel]:
        """
        Retrieve the most recently created jobs.

        Args:
            session: Async database session
            limit: Maximum number of jobs to return

        Returns:
            Sequence of jobs, newest first
        """
        stmt = (
            select(ProcessingJobModel)
            .order_by(ProcessingJobModel.created_at.desc(), ProcessingJobModel.id.desc())
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def update_by_id(
        self,
        session: AsyncSession,
        id: int,
        **kwargs,
    ) -> ProcessingJobModel | None:
        kwargs.setdefault("updated_at", utc_now())
        return await super().update_by_id(session, id, **kwargs)

    async def mark_completed(
        self,
        session: AsyncSession,
        id: int,
        result_data: list[dict],
    ) -> ProcessingJobModel | None:
        """
        Mark job as successfully completed with its canonical entries.

        Args:
            session: Async database session
            id: Job id
            result_data: Canonical entry payloads

        Returns:
            Updated ProcessingJobModel if found, None otherwise
        """
        return await self.update_by_id(
            session,
            id,
            status=JobStatus.COMPLETED,
            progress=100,
            processed_chunks=1,
            result_data=result_data,
        )

    async def mark_failed(
        self,
        session: AsyncSession,
        id: int,
        error_message: str,
    ) -> ProcessingJobModel | None:
        """
        Mark job as failed.

        Args:
            session: Async database session
            id: Job id
            error_message: Failure reason shown to clients

        Returns:
            Updated ProcessingJobModel if found, None otherwise
        """
        return await self.update_by_id(
            session,
            id,
            status=JobStatus.FAILED,
            error_message=error_message,
        )


processing_job_crud = ProcessingJobCRUD()
