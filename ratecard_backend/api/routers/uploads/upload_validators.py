"""
Upload validation utilities.

Checks run on the multipart upload before any job is created.

Dependencies: ratecard_backend.core
System role: Upload request validation
"""

from pathlib import Path

from fastapi import UploadFile, status

from ratecard_backend.core.exceptions import ValidationError
from ratecard_backend.core.ratecard.ratecard_schema import ExtractionProvider

ALLOWED_EXTENSIONS = (".pdf", ".doc", ".docx")


def validate_file_present(file: UploadFile | None) -> UploadFile:
    """
    Raises:
        ValidationError: If no file (or a nameless one) was uploaded
    """
    if file is None or not file.filename:
        raise ValidationError("No file uploaded", field="file")
    return file


def validate_extension(file_name: str) -> str:
    """
    Validate the upload extension.

    Args:
        file_name: Original upload name

    Returns:
        str: Lower-cased extension including the dot

    Raises:
        ValidationError: If the extension is not PDF, DOC or DOCX
    """
    extension = Path(file_name).suffix.lower()
    if extension not in ALLOWED_EXTENSIONS:
        raise ValidationError(
            "Invalid file type. Only PDF, DOC, and DOCX files are allowed.",
            field="file",
            details={"extension": extension},
        )
    return extension


def validate_file_size(size: int, max_bytes: int) -> None:
    """
    Raises:
        ValidationError(413): If the upload exceeds the size limit
    """
    if size > max_bytes:
        raise ValidationError(
            f"File too large. Maximum size: {max_bytes // (1024 * 1024)}MB",
            field="file",
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            details={"size": size},
        )


def parse_provider(value: str | None) -> ExtractionProvider:
    """
    Parse the aiProvider form field.

    An empty value selects Anthropic.

    Raises:
        ValidationError: If the provider id is unknown
    """
    if not value:
        return ExtractionProvider.ANTHROPIC
    try:
        return ExtractionProvider(value.strip().lower())
    except ValueError:
        raise ValidationError(f"Unknown AI provider: {value}", field="aiProvider")
