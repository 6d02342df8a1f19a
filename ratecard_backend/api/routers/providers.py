"""
Extraction provider listing.

Routes: GET /data-engineer/providers

Dependencies: ratecard_backend.boundary.llm
System role: Provider availability HTTP API
"""

from fastapi import APIRouter, Depends

from ratecard_backend.api.deps import get_provider_registry, require_data_engineer
from ratecard_backend.boundary.llm import ProviderRegistry
from ratecard_backend.models.provider import ProviderResponse

router = APIRouter(
    prefix="/data-engineer",
    tags=["providers"],
    dependencies=[Depends(require_data_engineer)],
)


@router.get("/providers", response_model=list[ProviderResponse])
async def list_providers(
    registry: ProviderRegistry = Depends(get_provider_registry),
) -> list[ProviderResponse]:
    """
    List extraction providers with configured credentials.

    A provider without an API key is omitted rather than reported unavailable.
    """
    return [
        ProviderResponse(
            id=info.id,
            name=info.name,
            description=info.description,
            available=info.available,
        )
        for info in registry.describe()
    ]
