"""
Processing job ORM model.

Tracks one rate card upload from creation through extraction to its
terminal state.

Dependencies: sqlalchemy, ratecard_backend.boundary.db.base
System role: Job bookkeeping for rate card extraction
"""

import enum

from sqlalchemy import JSON, Enum, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ratecard_backend.boundary.db.base import Base, IntegerIdMixin, TimestampMixin

JOB_TYPE_RATE_CARD = "rate_card_extraction"


class JobStatus(str, enum.Enum):
    """
    Processing job states.

    PENDING: Job recorded, no work started
    PROCESSING: Extraction in progress
    COMPLETED: Entries stored; result_data holds the canonical entries
    FAILED: Extraction failed; error_message holds the reason
    """

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"

class ProcessingJobModel(Base, IntegerIdMixin, TimestampMixin):
    """
    Processing job ORM model.

    A job is created in PROCESSING before any extraction work and updated
    exactly once more, to COMPLETED or FAILED. Jobs are never deleted.

    Attributes:
        id: Integer primary key
        job_type: Always "rate_card_extraction"
        file_name: Original upload name
        media_owner: Owner/organization label from the upload form
        status: Current state (PENDING/PROCESSING/COMPLETED/FAILED)
        progress: Percentage complete (0-100)
        total_chunks: Units of work; 1 per upload
        processed_chunks: Units finished; 1 on completion
        extraction_notes: Free-text notes from the upload form
        error_message: Failure reason
        result_data: Canonical entry array (camelCase) on success
        ai_provider: Extraction provider used for the job
        created_at: Job creation timestamp (UTC)
        updated_at: Last status update timestamp (UTC)
    """

    __tablename__ = "processing_jobs"

    job_type: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        default=JOB_TYPE_RATE_CARD,
    )

    file_name: Mapped[str] = mapped_column(Text, nullable=False)

    media_owner: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="Unknown",
    )

    status: Mapped[JobStatus] = mapped_column(
        Enum(
            JobStatus,
            native_enum=False,
            values_callable=lambda members: [m.value for m in members],
        ),
        nullable=False,
        default=JobStatus.PENDING,
    )

    progress: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        doc="Progress percentage (0-100)",
    )

    total_chunks: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    processed_chunks: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    extraction_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    error_message: Mapped[str | None] = mapped_column(Text, nullable=True)

    result_data: Mapped[list | None] = mapped_column(
        JSON,
        nullable=True,
        doc="Canonical entry array on success",
    )

    ai_provider: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default="anthropic",
    )
