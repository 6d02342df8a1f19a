"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: ratecard_backend.configs, ratecard_backend.application, ratecard_backend.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ratecard_backend.application.services import JobService, RatecardExtractionService
from ratecard_backend.boundary.db import get_async_db
from ratecard_backend.boundary.llm import ProviderRegistry
from ratecard_backend.configs import Settings, get_settings
from ratecard_backend.core.ratecard import TextExtractor


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self) -> None:
        self._provider_registry: ProviderRegistry | None = None
        self._text_extractor: TextExtractor | None = None

    @property
    def provider_registry(self) -> ProviderRegistry:
        """Get cached provider registry built from provider settings."""
        if self._provider_registry is None:
            self._provider_registry = ProviderRegistry.from_settings(get_settings().providers)
        return self._provider_registry

    @property
    def text_extractor(self) -> TextExtractor:
        """Get cached text extractor."""
        if self._text_extractor is None:
            self._text_extractor = TextExtractor()
        return self._text_extractor

    def clear(self) -> None:
        """Clear all cached instances."""
        self._provider_registry = None
        self._text_extractor = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_provider_registry() -> ProviderRegistry:
    """Get the registry of configured extraction providers."""
    return get_service_cache().provider_registry


def get_job_service(db: AsyncSession = Depends(get_async_db)) -> JobService:
    """
    Get job service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        JobService: Job service instance
    """
    return JobService(db=db)


def get_extraction_service(
    db: AsyncSession = Depends(get_async_db),
    registry: ProviderRegistry = Depends(get_provider_registry),
    settings: Settings = Depends(get_settings_dependency),
) -> RatecardExtractionService:
    """
    Get rate card extraction service instance.

    Args:
        db: Async database session (injected via Depends)
        registry: Configured extraction providers
        settings: Application settings for the provider deadline

    Returns:
        RatecardExtractionService: Upload orchestrator
    """
    return RatecardExtractionService(
        db=db,
        registry=registry,
        text_extractor=get_service_cache().text_extractor,
        timeout_seconds=settings.providers.extraction_timeout_seconds,
    )
