"""
Processing job API endpoints.

Routes:
- GET /data-engineer/jobs - Recent jobs, newest first
- GET /data-engineer/jobs/{job_id} - Job with its entries
- GET /data-engineer/jobs/{job_id}/export - CSV of one job's entries

Dependencies: ratecard_backend.application.services, ratecard_backend.models
System role: Job status HTTP API
"""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from ratecard_backend.api.deps import get_job_service, require_data_engineer
from ratecard_backend.api.routers.router_utils import csv_attachment, handle_ratecard_errors
from ratecard_backend.application.services import JobService
from ratecard_backend.models.job import ProcessingJobDetailResponse, ProcessingJobResponse
from ratecard_backend.models.ratecard import RatecardEntryResponse

router = APIRouter(
    prefix="/data-engineer/jobs",
    tags=["jobs"],
    dependencies=[Depends(require_data_engineer)],
)

JOB_EXPORT_FILE_NAME = "rate_card_results.csv"


@router.get("", response_model=list[ProcessingJobResponse])
@handle_ratecard_errors
async def list_jobs(
    status_filter: str | None = Query(None, alias="status"),
    job_service: JobService = Depends(get_job_service),
) -> list[ProcessingJobResponse]:
    """
    List the 50 most recent jobs.

    Args:
        status_filter: Optional status to keep
        job_service: Injected JobService

    Returns:
        list[ProcessingJobResponse]: Jobs, newest first
    """
    jobs = await job_service.list_jobs(status=status_filter)
    return [ProcessingJobResponse.model_validate(job) for job in jobs]


@router.get("/{job_id}", response_model=ProcessingJobDetailResponse)
@handle_ratecard_errors
async def get_job(
    job_id: int,
    job_service: JobService = Depends(get_job_service),
) -> ProcessingJobDetailResponse:
    """
    Get a job and its extracted entries.

    Raises:
        HTTPException(404): Job doesn't exist
    """
    job, entries = await job_service.get_job_with_entries(job_id)
    return ProcessingJobDetailResponse.model_validate(job).model_copy(
        update={"results": [RatecardEntryResponse.model_validate(e) for e in entries]}
    )


@router.get("/{job_id}/export")
@handle_ratecard_errors
async def export_job(
    job_id: int,
    job_service: JobService = Depends(get_job_service),
) -> Response:
    """
    Download one job's entries as CSV.

    Raises:
        HTTPException(404): Job has no stored entries
    """
    content = await job_service.export_job_csv(job_id)
    if content is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No results found for this job",
        )
    return csv_attachment(content, JOB_EXPORT_FILE_NAME)
