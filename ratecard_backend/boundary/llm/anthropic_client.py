"""
Anthropic reasoning extraction client.

Sends the rate card text to Claude in a single user turn and returns the
free-form completion, which is expected to contain a JSON array of entries.

Dependencies: langchain_anthropic, langchain_core
System role: Reasoning-style extraction provider
"""

import logging

from langchain_anthropic import ChatAnthropic
from langchain_core.language_models import BaseChatModel

from ratecard_backend.boundary.llm.base_client import ExtractionClient, message_text
from ratecard_backend.boundary.llm.extraction_prompts import REASONING_EXTRACTION_PROMPT
from ratecard_backend.core.exceptions import ExtractionProviderError
from ratecard_backend.core.ratecard.ratecard_schema import ExtractionProvider, RawExtraction

logger = logging.getLogger(__name__)


class AnthropicExtractionClient(ExtractionClient):
    """Claude extraction client returning free-form completions."""

    provider = ExtractionProvider.ANTHROPIC
    display_name = "Anthropic Claude Sonnet 4"
    description = "Advanced document analysis with superior reasoning"

    def __init__(
        self,
        api_key: str | None = None,
        model_id: str = "claude-sonnet-4-20250514",
        max_tokens: int = 4000,
        chat_model: BaseChatModel | None = None,
    ) -> None:
        """
        Initialize the Claude client.

        Args:
            api_key: Anthropic API key
            model_id: Anthropic model identifier
            max_tokens: Completion token budget
            chat_model: Pre-built chat model, used instead of constructing one
        """
        self._model_id = model_id
        self._model = chat_model or ChatAnthropic(
            model=model_id,
            api_key=api_key,
            max_tokens=max_tokens,
            max_retries=0,
        )

    async def extract(self, text: str) -> RawExtraction:
        messages = REASONING_EXTRACTION_PROMPT.invoke({"document_text": text}).to_messages()

        logger.info(
            "Requesting Anthropic rate card extraction",
            extra={"model_id": self._model_id, "text_length": len(text)},
        )
        try:
            response = await self._model.ainvoke(messages)
        except Exception as e:
            raise ExtractionProviderError(
                f"Failed to extract rate card data using Anthropic: {e}",
                provider=self.provider.value,
            ) from e

        return RawExtraction(provider=self.provider, content=message_text(response))
