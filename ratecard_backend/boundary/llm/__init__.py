"""
LLM extraction boundary.

Exports:
  - ExtractionClient: Abstract extraction client
  - ProviderRegistry, ProviderInfo: Credential-gated client registry

Concrete clients are imported lazily by the registry so that a missing
provider SDK only matters when that provider is configured.
"""

from ratecard_backend.boundary.llm.base_client import ExtractionClient, message_text
from ratecard_backend.boundary.llm.provider_registry import ProviderInfo, ProviderRegistry

__all__ = [
    "ExtractionClient",
    "message_text",
    "ProviderInfo",
    "ProviderRegistry",
]
