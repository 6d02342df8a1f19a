"""
Rate card error handling utilities.

Provides a decorator for consistent error handling across the data
engineer API endpoints.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from ratecard_backend.core.exceptions import (
    ExtractionTimeoutError,
    JobNotFoundError,
    ProviderUnavailableError,
    RatecardException,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_ratecard_errors(func: F) -> F:
    """
    Decorator to map domain errors to HTTPExceptions.

    This centralizes:
    - Logging of errors with context
    - Mapping specific exceptions to HTTP status codes
    - Ensuring uniform error response formats
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except ValidationError as e:
            logger.warning("Invalid request", extra={"error": str(e), **e.details})
            raise HTTPException(status_code=e.status_code, detail=str(e))

        except JobNotFoundError as e:
            logger.warning("Job not found", extra={"job_id": e.job_id})
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

        except ProviderUnavailableError as e:
            logger.warning("Provider unavailable", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        except ExtractionTimeoutError as e:
            logger.error("Extraction timed out", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_504_GATEWAY_TIMEOUT, detail=str(e))

        except RatecardException as e:
            logger.error("Rate card processing failed", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=str(e),
            )

        except Exception as e:
            logger.exception("Unexpected failure in rate card operation", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=str(e) or "Internal server error",
            )

    return wrapper  # type: ignore
