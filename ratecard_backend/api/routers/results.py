"""
Stored results API endpoints.

Routes:
- GET /data-engineer/results - All entries, newest first
- GET /data-engineer/export-all - CSV of every entry
- GET /data-engineer/stats - Dashboard counters

Dependencies: ratecard_backend.application.services, ratecard_backend.models
System role: Results HTTP API
"""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from ratecard_backend.api.deps import get_job_service, require_data_engineer
from ratecard_backend.api.routers.router_utils import csv_attachment, handle_ratecard_errors
from ratecard_backend.application.services import JobService
from ratecard_backend.models.common import StatsResponse
from ratecard_backend.models.ratecard import RatecardEntryResponse

router = APIRouter(
    prefix="/data-engineer",
    tags=["results"],
    dependencies=[Depends(require_data_engineer)],
)

ALL_EXPORT_FILE_NAME = "all_rate_card_results.csv"


@router.get("/results", response_model=list[RatecardEntryResponse])
@handle_ratecard_errors
async def list_results(
    media_type: str | None = Query(None, alias="mediaType"),
    job_service: JobService = Depends(get_job_service),
) -> list[RatecardEntryResponse]:
    """List every stored entry, optionally filtered by media type (case-insensitive)."""
    entries = await job_service.list_results(media_type=media_type)
    return [RatecardEntryResponse.model_validate(e) for e in entries]


@router.get("/export-all")
@handle_ratecard_errors
async def export_all(job_service: JobService = Depends(get_job_service)) -> Response:
    """
    Download every stored entry as CSV, with a source file column.

    Raises:
        HTTPException(404): Nothing stored yet
    """
    content = await job_service.export_all_csv()
    if content is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No results found")
    return csv_attachment(content, ALL_EXPORT_FILE_NAME)


@router.get("/stats", response_model=StatsResponse)
@handle_ratecard_errors
async def get_stats(job_service: JobService = Depends(get_job_service)) -> StatsResponse:
    """Dashboard counters over the 50 most recent jobs."""
    stats = await job_service.get_stats()
    return StatsResponse(
        total_jobs=stats.total_jobs,
        processing_jobs=stats.processing_jobs,
        completed_jobs=stats.completed_jobs,
        failed_jobs=stats.failed_jobs,
        success_rate=stats.success_rate,
        total_entries=stats.total_entries,
    )
