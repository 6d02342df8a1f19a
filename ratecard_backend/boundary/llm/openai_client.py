"""
OpenAI structured extraction client.

Requests a JSON-object completion grouped by media type. The nested payload
is flattened later by the normalizer.

Dependencies: langchain_openai, langchain_core
System role: Structured-style extraction provider
"""

import logging

from langchain_core.language_models import BaseChatModel
from langchain_core.runnables import Runnable
from langchain_openai import ChatOpenAI

from ratecard_backend.boundary.llm.base_client import ExtractionClient, message_text
from ratecard_backend.boundary.llm.extraction_prompts import STRUCTURED_EXTRACTION_PROMPT
from ratecard_backend.core.exceptions import ExtractionProviderError
from ratecard_backend.core.ratecard.ratecard_schema import ExtractionProvider, RawExtraction

logger = logging.getLogger(__name__)


class OpenAIExtractionClient(ExtractionClient):
    """GPT-4o extraction client returning JSON-object completions."""

    provider = ExtractionProvider.OPENAI
    display_name = "OpenAI GPT-4o"
    description = "Fast structured extraction with vision capabilities"

    def __init__(
        self,
        api_key: str | None = None,
        model_id: str = "gpt-4o",
        chat_model: BaseChatModel | Runnable | None = None,
    ) -> None:
        """
        Initialize the OpenAI client.

        Args:
            api_key: OpenAI API key
            model_id: OpenAI model identifier
            chat_model: Pre-built chat model, used instead of constructing one
        """
        self._model_id = model_id
        self._model = chat_model or ChatOpenAI(
            model=model_id,
            api_key=api_key,
            max_retries=0,
        ).bind(response_format={"type": "json_object"})

    async def extract(self, text: str) -> RawExtraction:
        messages = STRUCTURED_EXTRACTION_PROMPT.invoke({"document_text": text}).to_messages()

        logger.info(
            "Requesting OpenAI rate card extraction",
            extra={"model_id": self._model_id, "text_length": len(text)},
        )
        try:
            response = await self._model.ainvoke(messages)
        except Exception as e:
            raise ExtractionProviderError(
                f"Failed to extract rate card data using OpenAI: {e}",
                provider=self.provider.value,
            ) from e

        return RawExtraction(provider=self.provider, content=message_text(response) or "{}")
