"""
Extraction provider configuration settings.

Credentials and model selection for the LLM providers that turn rate card
text into structured entries. A provider is offered to clients only when
its API key is present.

Dependencies: pydantic, pydantic_settings
System role: LLM provider configuration
"""

from pydantic import Field

from ratecard_backend.configs.base import BaseSettings


class ProviderSettings(BaseSettings):
    """Anthropic and OpenAI extraction client configuration."""

    anthropic_api_key: str | None = Field(
        default=None,
        description="Anthropic API key; enables the reasoning extraction provider",
    )
    anthropic_model: str = Field(
        default="claude-sonnet-4-20250514",
        description="Anthropic model identifier",
    )
    anthropic_max_tokens: int = Field(
        default=4000,
        description="Completion token budget for Anthropic extraction",
    )

    openai_api_key: str | None = Field(
        default=None,
        description="OpenAI API key; enables the structured extraction provider",
    )
    openai_model: str = Field(
        default="gpt-4o",
        description="OpenAI model identifier",
    )

    extraction_timeout_seconds: float = Field(
        default=120.0,
        gt=0,
        description="Deadline for a single provider call",
    )
