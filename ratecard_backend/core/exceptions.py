"""
Exception hierarchy for the rate card extraction service.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class RatecardException(Exception):
    """Base exception for all rate card service errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return the human-readable message."""
        return self.message


class ValidationError(RatecardException):
    """Raised when upload input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        status_code: int = 400,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            status_code: HTTP status the API should answer with
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        self.status_code = status_code
        super().__init__(message, details)


class JobNotFoundError(RatecardException):
    """Raised when a processing job cannot be found."""

    def __init__(self, job_id: int, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["job_id"] = job_id
        self.job_id = job_id
        super().__init__("Job not found", details)


class ProviderUnavailableError(RatecardException):
    """Raised when the selected extraction provider has no credentials configured."""

    def __init__(self, provider: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["provider"] = provider
        super().__init__(f"Extraction provider not available: {provider}", details)


class DocumentProcessingError(RatecardException):
    """Base exception for failures while processing an uploaded rate card."""

    def __init__(
        self,
        message: str,
        file_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document processing error.

        Args:
            message: Error message
            file_name: Name of the document that failed
            details: Additional context
        """
        details = details or {}
        if file_name:
            details["file_name"] = file_name
        super().__init__(message, details)


class TextExtractionError(DocumentProcessingError):
    """Raised when a PDF or Word loader cannot read the document."""

    def __init__(
        self,
        message: str,
        file_name: str | None = None,
        file_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if file_type:
            details["file_type"] = file_type
        super().__init__(message, file_name, details)


class ExtractionProviderError(DocumentProcessingError):
    """Raised when an LLM provider call fails."""

    def __init__(
        self,
        message: str,
        provider: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if provider:
            details["provider"] = provider
        super().__init__(message, details=details)


class ExtractionTimeoutError(ExtractionProviderError):
    """Raised when an LLM provider call exceeds its deadline."""

    def __init__(self, provider: str, timeout_seconds: float) -> None:
        super().__init__(
            f"Extraction provider {provider} did not respond within {timeout_seconds:g} seconds",
            provider=provider,
            details={"timeout_seconds": timeout_seconds},
        )
        self.timeout_seconds = timeout_seconds
