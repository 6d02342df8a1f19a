"""
Extraction provider schemas.

Dependencies: pydantic
System role: Provider listing API contract
"""

from ratecard_backend.models.common import CamelModel


class ProviderResponse(CamelModel):
    """Extraction provider available for uploads."""

    id: str
    name: str
    description: str
    available: bool = True
