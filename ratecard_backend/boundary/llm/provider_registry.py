"""
Extraction provider registry.

Builds extraction clients from injected provider settings. A provider is
registered only when its API key is configured, which is also what the
providers endpoint reports as available.

Dependencies: ratecard_backend.configs, ratecard_backend.boundary.llm
System role: Provider selection and availability
"""

from dataclasses import dataclass

from ratecard_backend.boundary.llm.base_client import ExtractionClient
from ratecard_backend.configs.providers import ProviderSettings
from ratecard_backend.core.exceptions import ProviderUnavailableError
from ratecard_backend.core.ratecard.ratecard_schema import ExtractionProvider


@dataclass(frozen=True)
class ProviderInfo:
    """Public description of a registered provider."""

    id: str
    name: str
    description: str
    available: bool = True


class ProviderRegistry:
    """Holds the extraction clients that can currently be used."""

    def __init__(self, clients: dict[ExtractionProvider, ExtractionClient] | None = None) -> None:
        self._clients = dict(clients or {})

    @classmethod
    def from_settings(cls, settings: ProviderSettings) -> "ProviderRegistry":
        """
        Create clients for every provider with configured credentials.

        Args:
            settings: Provider credentials and model configuration

        Returns:
            ProviderRegistry: Registry of usable clients
        """
        clients: dict[ExtractionProvider, ExtractionClient] = {}

        if settings.anthropic_api_key:
            from ratecard_backend.boundary.llm.anthropic_client import AnthropicExtractionClient

            clients[ExtractionProvider.ANTHROPIC] = AnthropicExtractionClient(
                api_key=settings.anthropic_api_key,
                model_id=settings.anthropic_model,
                max_tokens=settings.anthropic_max_tokens,
            )

        if settings.openai_api_key:
            from ratecard_backend.boundary.llm.openai_client import OpenAIExtractionClient

            clients[ExtractionProvider.OPENAI] = OpenAIExtractionClient(
                api_key=settings.openai_api_key,
                model_id=settings.openai_model,
            )

        return cls(clients)

    def get(self, provider: ExtractionProvider) -> ExtractionClient:
        """
        Get the client for a provider.

        Raises:
            ProviderUnavailableError: If the provider has no configured client
        """
        client = self._clients.get(provider)
        if client is None:
            raise ProviderUnavailableError(provider.value)
        return client

    def is_available(self, provider: ExtractionProvider) -> bool:
        return provider in self._clients

    def describe(self) -> list[ProviderInfo]:
        """List registered providers in enum order."""
        return [
            ProviderInfo(
                id=provider.value,
                name=self._clients[provider].display_name,
                description=self._clients[provider].description,
            )
            for provider in ExtractionProvider
            if provider in self._clients
        ]
