"""
Rate card upload endpoint.

Routes:
- POST /data-engineer/upload - Upload a rate card and extract its entries

The upload is processed within the request; the response reports the
terminal job state.

Dependencies: ratecard_backend.application.services, ratecard_backend.models
System role: Upload HTTP API
"""

import logging

from fastapi import APIRouter, Depends, File, Form, UploadFile

from ratecard_backend.api.deps import (
    get_extraction_service,
    get_settings_dependency,
    require_data_engineer,
)
from ratecard_backend.api.routers.router_utils import handle_ratecard_errors, save_upload
from ratecard_backend.application.services import RatecardExtractionService
from ratecard_backend.configs import Settings
from ratecard_backend.models.ratecard import UploadResponse

from .upload_validators import (
    parse_provider,
    validate_extension,
    validate_file_present,
    validate_file_size,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/data-engineer",
    tags=["uploads"],
    dependencies=[Depends(require_data_engineer)],
)


@router.post("/upload", response_model=UploadResponse)
@handle_ratecard_errors
async def upload_rate_card(
    file: UploadFile | None = File(None),
    media_owner: str | None = Form(None, alias="mediaOwner"),
    notes: str | None = Form(None),
    ai_provider: str | None = Form(None, alias="aiProvider"),
    extraction_service: RatecardExtractionService = Depends(get_extraction_service),
    settings: Settings = Depends(get_settings_dependency),
) -> UploadResponse:
    """
    Upload a rate card and extract its entries.

    Args:
        file: PDF, DOC or DOCX rate card (multipart form)
        media_owner: Owner/organization label
        notes: Free-text extraction notes
        ai_provider: "anthropic" (default) or "openai"
        extraction_service: Injected upload orchestrator
        settings: Upload limits

    Returns:
        UploadResponse: Job id, status and entry count

    Raises:
        HTTPException(400): Missing file, bad extension, unknown or unavailable provider
        HTTPException(413): File larger than the upload limit
        HTTPException(500): Extraction failed; the job is marked failed
        HTTPException(504): Provider missed its deadline; the job is marked failed
    """
    upload = validate_file_present(file)
    validate_extension(upload.filename)
    provider = parse_provider(ai_provider)
    extraction_service.registry.get(provider)

    max_bytes = settings.uploads.max_file_size_bytes
    # Reject on the parser-reported size before buffering the upload
    if upload.size is not None:
        validate_file_size(upload.size, max_bytes)

    content = await upload.read()
    validate_file_size(len(content), max_bytes)

    logger.info(
        "Rate card upload received",
        extra={
            "file_name": upload.filename,
            "size": len(content),
            "provider": provider.value,
        },
    )

    file_path = save_upload(content, upload.filename, settings.uploads.dir)
    outcome = await extraction_service.process_upload(
        file_path=file_path,
        file_name=upload.filename,
        media_owner=media_owner or "Unknown",
        notes=notes or None,
        provider=provider,
    )

    return UploadResponse(
        job_id=outcome.job_id,
        status=outcome.status,
        results=len(outcome.entries),
        message=f"Successfully extracted {len(outcome.entries)} rate card entries",
    )
