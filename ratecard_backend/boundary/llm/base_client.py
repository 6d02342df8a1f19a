"""
Extraction client base class.

Defines the contract shared by the LLM extraction clients: document text in,
provider-tagged raw completion out.

Dependencies: langchain_core
System role: Abstract LLM extraction client
"""

from abc import ABC, abstractmethod

from langchain_core.messages import BaseMessage

from ratecard_backend.core.ratecard.ratecard_schema import ExtractionProvider, RawExtraction


def message_text(message: BaseMessage) -> str:
    """
    Flatten a chat model reply into plain text.

    Anthropic replies may carry a list of content blocks; only text blocks
    are kept.

    Args:
        message: Chat model reply

    Returns:
        str: Concatenated text content
    """
    content = message.content
    if isinstance(content, str):
        return content
    parts: list[str] = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


class ExtractionClient(ABC):
    """Turns rate card text into a raw provider completion."""

    provider: ExtractionProvider
    display_name: str
    description: str

    @abstractmethod
    async def extract(self, text: str) -> RawExtraction:
        """
        Send document text to the provider.

        Args:
            text: Extracted rate card text

        Returns:
            RawExtraction: Completion tagged with this client's provider

        Raises:
            ExtractionProviderError: When the provider call fails
        """
