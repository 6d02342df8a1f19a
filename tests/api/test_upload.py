import pytest
from unittest.mock import AsyncMock, MagicMock

from fastapi import HTTPException, UploadFile

from ratecard_backend.api.deps import get_extraction_service
from ratecard_backend.api.routers.uploads.uploads_router import upload_rate_card
from ratecard_backend.application.services import ExtractionOutcome
from ratecard_backend.boundary.db.models import JobStatus
from ratecard_backend.boundary.llm.provider_registry import ProviderRegistry
from ratecard_backend.core.exceptions import ExtractionProviderError, ExtractionTimeoutError
from ratecard_backend.core.ratecard.ratecard_schema import (
    Confidence,
    ExtractionProvider,
    RatecardEntryData,
)

UPLOAD_URL = "/api/data-engineer/upload"


@pytest.fixture
def mock_extraction_service(client, reasoning_client):
    service = MagicMock()
    service.registry = ProviderRegistry({ExtractionProvider.ANTHROPIC: reasoning_client})
    service.process_upload = AsyncMock(
        return_value=ExtractionOutcome(
            job_id=7,
            status=JobStatus.COMPLETED,
            entries=[
                RatecardEntryData(media_type="Print", confidence=Confidence.HIGH),
                RatecardEntryData(media_type="Digital"),
            ],
        )
    )
    client.app.dependency_overrides[get_extraction_service] = lambda: service
    return service


def pdf_upload(name: str = "cardA.pdf", content: bytes = b"%PDF-1.4 rates") -> dict:
    return {"file": (name, content, "application/pdf")}


def test_upload_success(client, auth_headers, mock_extraction_service, test_settings):
    response = client.post(
        UPLOAD_URL,
        files=pdf_upload(),
        data={"mediaOwner": "Acme", "notes": "Q3", "aiProvider": "anthropic"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json() == {
        "jobId": 7,
        "status": "completed",
        "results": 2,
        "message": "Successfully extracted 2 rate card entries",
    }

    kwargs = mock_extraction_service.process_upload.call_args.kwargs
    assert kwargs["file_name"] == "cardA.pdf"
    assert kwargs["media_owner"] == "Acme"
    assert kwargs["notes"] == "Q3"
    assert kwargs["provider"] == ExtractionProvider.ANTHROPIC
    assert kwargs["file_path"].startswith(test_settings.uploads.dir)
    assert kwargs["file_path"].endswith("_cardA.pdf")


def test_upload_defaults(client, auth_headers, mock_extraction_service):
    response = client.post(UPLOAD_URL, files=pdf_upload("rates.docx"), headers=auth_headers)

    assert response.status_code == 200
    kwargs = mock_extraction_service.process_upload.call_args.kwargs
    assert kwargs["media_owner"] == "Unknown"
    assert kwargs["notes"] is None
    assert kwargs["provider"] == ExtractionProvider.ANTHROPIC


def test_missing_file(client, auth_headers, mock_extraction_service):
    response = client.post(UPLOAD_URL, data={"mediaOwner": "Acme"}, headers=auth_headers)

    assert response.status_code == 400
    assert response.json()["detail"] == "No file uploaded"
    mock_extraction_service.process_upload.assert_not_called()


@pytest.mark.parametrize("name", ["rates.txt", "rates.xlsx", "rates"])
def test_rejects_unsupported_extension(client, auth_headers, mock_extraction_service, name):
    response = client.post(UPLOAD_URL, files=pdf_upload(name), headers=auth_headers)

    assert response.status_code == 400
    assert "Only PDF, DOC, and DOCX" in response.json()["detail"]
    mock_extraction_service.process_upload.assert_not_called()


def test_rejects_oversized_file(client, auth_headers, mock_extraction_service):
    too_big = b"0" * (1024 * 1024 + 1)

    response = client.post(UPLOAD_URL, files=pdf_upload(content=too_big), headers=auth_headers)

    assert response.status_code == 413
    mock_extraction_service.process_upload.assert_not_called()


async def test_oversized_file_is_rejected_before_reading(test_settings, mock_extraction_service):
    upload = MagicMock(spec=UploadFile)
    upload.filename = "cardA.pdf"
    upload.size = test_settings.uploads.max_file_size_bytes + 1
    upload.read = AsyncMock(return_value=b"")

    with pytest.raises(HTTPException) as exc_info:
        await upload_rate_card(
            file=upload,
            media_owner=None,
            notes=None,
            ai_provider=None,
            extraction_service=mock_extraction_service,
            settings=test_settings,
        )

    assert exc_info.value.status_code == 413
    upload.read.assert_not_awaited()
    mock_extraction_service.process_upload.assert_not_called()


def test_rejects_unknown_provider(client, auth_headers, mock_extraction_service):
    response = client.post(
        UPLOAD_URL, files=pdf_upload(), data={"aiProvider": "gemini"}, headers=auth_headers
    )

    assert response.status_code == 400
    assert "gemini" in response.json()["detail"]
    mock_extraction_service.process_upload.assert_not_called()


def test_rejects_unconfigured_provider(client, auth_headers, mock_extraction_service):
    response = client.post(
        UPLOAD_URL, files=pdf_upload(), data={"aiProvider": "openai"}, headers=auth_headers
    )

    assert response.status_code == 400
    assert "not available" in response.json()["detail"]
    mock_extraction_service.process_upload.assert_not_called()


def test_extraction_failure_is_500(client, auth_headers, mock_extraction_service):
    mock_extraction_service.process_upload.side_effect = ExtractionProviderError(
        "Failed to extract rate card data using Anthropic: overloaded"
    )

    response = client.post(UPLOAD_URL, files=pdf_upload(), headers=auth_headers)

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to extract rate card data using Anthropic: overloaded"


def test_extraction_timeout_is_504(client, auth_headers, mock_extraction_service):
    mock_extraction_service.process_upload.side_effect = ExtractionTimeoutError("anthropic", 120)

    response = client.post(UPLOAD_URL, files=pdf_upload(), headers=auth_headers)

    assert response.status_code == 504
