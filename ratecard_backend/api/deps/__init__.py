"""API-specific dependencies."""

# Re-export common dependencies
from .auth import require_data_engineer
from .dependencies import (
    get_extraction_service,
    get_job_service,
    get_provider_registry,
    get_service_cache,
    get_settings_dependency,
)

__all__ = [
    "get_extraction_service",
    "get_job_service",
    "get_provider_registry",
    "get_service_cache",
    "get_settings_dependency",
    "require_data_engineer",
]
