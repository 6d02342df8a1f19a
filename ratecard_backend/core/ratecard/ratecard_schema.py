"""
Rate card extraction schemas.

Defines the provider variants, the raw provider output record and the
canonical entry shape every provider output is normalized into.

Dependencies: pydantic
System role: Canonical rate card entry definitions
"""

import enum
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ExtractionProvider(str, enum.Enum):
    """
    LLM providers available for rate card extraction.

    ANTHROPIC: Free-form reasoning completion containing a JSON array of entries
    OPENAI: JSON-object completion with nested media type groups
    """

    ANTHROPIC = "anthropic"
    OPENAI = "openai"


class Confidence(str, enum.Enum):
    """Extraction confidence label attached to each entry."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class RawExtraction:
    """
    Unprocessed completion returned by an extraction client.

    Attributes:
        provider: Provider that produced the completion; selects the normalizer
        content: Completion text exactly as returned by the model
    """

    provider: ExtractionProvider
    content: str


class RatecardEntryData(BaseModel):
    """
    Canonical rate card entry produced by normalization.

    Cost fields are display strings as formatted by the provider; they are
    never parsed into numbers.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    source_page: int | None = None
    media_type: str | None = None
    media_format: str | None = None
    placement_name: str | None = None
    dimensions: str | None = None
    cost_media_4weeks: str | None = Field(default=None, alias="costMedia4weeks")
    production_cost: str | None = None
    total_cost: str | None = None
    notes: str | None = None
    confidence: Confidence = Confidence.MEDIUM

    def to_payload(self) -> dict:
        """Serialize with camelCase keys for the job result payload."""
        return self.model_dump(mode="json", by_alias=True)
