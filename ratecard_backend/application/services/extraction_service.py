"""
Rate card extraction orchestrator.

Runs one upload through the pipeline within the request:
create job → extract text → call provider → normalize → store entries →
complete job. Any failure after the job exists marks it failed and
re-raises.

Dependencies: sqlalchemy, fastapi.concurrency, ratecard_backend.boundary,
    ratecard_backend.core
System role: Upload processing orchestration
"""

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ratecard_backend.boundary.db.CRUD.processing_job_crud import processing_job_crud
from ratecard_backend.boundary.db.CRUD.ratecard_entry_crud import ratecard_entry_crud
from ratecard_backend.boundary.db.models.processing_job_model import (
    JOB_TYPE_RATE_CARD,
    JobStatus,
)
from ratecard_backend.boundary.llm.base_client import ExtractionClient
from ratecard_backend.boundary.llm.provider_registry import ProviderRegistry
from ratecard_backend.core.exceptions import ExtractionTimeoutError
from ratecard_backend.core.ratecard.normalizer import normalize_extraction
from ratecard_backend.core.ratecard.ratecard_schema import (
    ExtractionProvider,
    RatecardEntryData,
    RawExtraction,
)
from ratecard_backend.core.ratecard.text_extractor import TextExtractor
from ratecard_backend.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
)

logger = logging.getLogger(__name__)

CANCELLED_MESSAGE = "Extraction cancelled"


@dataclass(frozen=True)
class ExtractionOutcome:
    """Result of a completed upload."""

    job_id: int
    status: JobStatus
    entries: list[RatecardEntryData] = field(default_factory=list)


class RatecardExtractionService:
    """
    Upload processing orchestrator.

    The job row is committed before extraction starts so that every attempt
    is visible. Entry inserts and the completion update share one
    transaction; on failure it is rolled back and the job is marked failed.
    """

    def __init__(
        self,
        db: AsyncSession,
        registry: ProviderRegistry,
        text_extractor: TextExtractor | None = None,
        timeout_seconds: float = 120.0,
    ) -> None:
        """
        Initialize extraction service.

        Args:
            db: AsyncSession for job and entry persistence
            registry: Configured extraction clients
            text_extractor: Optional TextExtractor (created if None)
            timeout_seconds: Deadline for the provider call
        """
        self.db = db
        self.registry = registry
        self.text_extractor = text_extractor or TextExtractor()
        self.timeout_seconds = timeout_seconds

    async def process_upload(
        self,
        file_path: str,
        file_name: str,
        media_owner: str = "Unknown",
        notes: str | None = None,
        provider: ExtractionProvider = ExtractionProvider.ANTHROPIC,
    ) -> ExtractionOutcome:
        """
        Process one staged upload end to end.

        Steps:
        1. Resolve the provider client (before any job exists)
        2. Create and commit the job in PROCESSING
        3. Extract text in the thread pool
        4. Call the provider under the configured deadline
        5. Normalize and store entries, then mark the job COMPLETED
        6. Delete the staged file

        Args:
            file_path: Path of the staged upload
            file_name: Original upload name
            media_owner: Owner/organization label
            notes: Free-text notes from the upload form
            provider: Extraction provider to use

        Returns:
            ExtractionOutcome: Job id, terminal status and canonical entries

        Raises:
            ProviderUnavailableError: If the provider is not configured
            ExtractionTimeoutError: If the provider misses its deadline
            DocumentProcessingError: If text extraction or the provider call fails
        """
        try:
            client = self.registry.get(provider)

            job = await processing_job_crud.create(
                self.db,
                job_type=JOB_TYPE_RATE_CARD,
                file_name=file_name,
                media_owner=media_owner or "Unknown",
                status=JobStatus.PROCESSING,
                progress=0,
                total_chunks=1,
                processed_chunks=0,
                extraction_notes=notes,
                ai_provider=provider.value,
            )
            # Captured before commit/rollback can expire the instance
            job_id = job.id
            await self.db.commit()

            logger.info(
                "Processing job created",
                extra={"job_id": job_id, "file_name": file_name, "provider": provider.value},
            )

            try:
                entries = await self._run_pipeline(client, file_path, file_name)
                await ratecard_entry_crud.create_many(
                    self.db,
                    (
                        {
                            **entry.model_dump(mode="json"),
                            "job_id": job_id,
                            "original_file_name": file_name,
                        }
                        for entry in entries
                    ),
                )
                await processing_job_crud.mark_completed(
                    self.db,
                    job_id,
                    [entry.to_payload() for entry in entries],
                )
                await self.db.commit()
            except asyncio.CancelledError:
                logger.warning("Extraction cancelled", extra={"job_id": job_id})
                await self._record_failure(job_id, CANCELLED_MESSAGE)
                raise
            except Exception as e:
                log_exception_with_context(
                    logger,
                    "Rate card extraction failed",
                    e,
                    job_id=job_id,
                    file_name=file_name,
                    provider=provider.value,
                )
                await self._record_failure(job_id, str(e))
                raise

            logger.info(
                "Processing job completed",
                extra={"job_id": job_id, "entry_count": len(entries)},
            )
            return ExtractionOutcome(job_id=job_id, status=JobStatus.COMPLETED, entries=entries)
        finally:
            self._discard_upload(file_path)

    async def _run_pipeline(
        self,
        client: ExtractionClient,
        file_path: str,
        file_name: str,
    ) -> list[RatecardEntryData]:
        text = await run_in_threadpool(
            self.text_extractor.extract,
            file_path,
            Path(file_name).suffix,
        )
        log_with_context(
            logger, logging.DEBUG, "Text extracted", file_name=file_name, text_length=len(text)
        )

        raw = await self._call_provider(client, text)
        return normalize_extraction(raw)

    async def _call_provider(self, client: ExtractionClient, text: str) -> RawExtraction:
        try:
            return await asyncio.wait_for(client.extract(text), timeout=self.timeout_seconds)
        except asyncio.TimeoutError as e:
            raise ExtractionTimeoutError(client.provider.value, self.timeout_seconds) from e

    async def _record_failure(self, job_id: int, error_message: str) -> None:
        """Roll back partial work and mark the job failed in its own transaction."""
        try:
            await self.db.rollback()
            await processing_job_crud.mark_failed(self.db, job_id, error_message)
            await self.db.commit()
        except SQLAlchemyError as e:
            # The original failure is re-raised by the caller
            log_exception_with_context(
                logger,
                "Failed to record job failure",
                e,
                job_id=job_id,
            )

    @staticmethod
    def _discard_upload(file_path: str) -> None:
        try:
            Path(file_path).unlink(missing_ok=True)
        except OSError as e:
            logger.warning(
                "Failed to delete staged upload",
                extra={"file_path": file_path, "error": str(e)},
            )
