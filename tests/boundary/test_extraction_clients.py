"""
Test suite for the LLM extraction clients and provider registry.

Chat models are replaced with LangChain fakes or mocks; no network calls.

System role: Verification of prompt wiring, error wrapping and provider gating
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from ratecard_backend.boundary.llm.anthropic_client import AnthropicExtractionClient
from ratecard_backend.boundary.llm.base_client import message_text
from ratecard_backend.boundary.llm.openai_client import OpenAIExtractionClient
from ratecard_backend.boundary.llm.provider_registry import ProviderRegistry
from ratecard_backend.configs.providers import ProviderSettings
from ratecard_backend.core.exceptions import ExtractionProviderError, ProviderUnavailableError
from ratecard_backend.core.ratecard.ratecard_schema import ExtractionProvider


def _mock_chat_model(reply: str = "[]") -> MagicMock:
    model = MagicMock()
    model.ainvoke = AsyncMock(return_value=AIMessage(content=reply))
    return model


class TestAnthropicClient:
    async def test_returns_tagged_completion(self):
        completion = '[{"mediaType":"Print","confidence":"high"}]'
        client = AnthropicExtractionClient(chat_model=FakeListChatModel(responses=[completion]))

        raw = await client.extract("Full Page $5,000")

        assert raw.provider == ExtractionProvider.ANTHROPIC
        assert raw.content == completion

    async def test_prompt_embeds_document_text(self):
        model = _mock_chat_model()
        client = AnthropicExtractionClient(chat_model=model)

        await client.extract("Half Page $2,500")

        messages = model.ainvoke.call_args.args[0]
        assert len(messages) == 1
        assert isinstance(messages[0], HumanMessage)
        assert messages[0].content.rstrip().endswith("Half Page $2,500")
        assert '"costMedia4weeks"' in messages[0].content

    async def test_provider_failure_is_wrapped(self):
        model = MagicMock()
        model.ainvoke = AsyncMock(side_effect=RuntimeError("overloaded"))
        client = AnthropicExtractionClient(chat_model=model)

        with pytest.raises(ExtractionProviderError) as exc_info:
            await client.extract("text")

        assert str(exc_info.value) == "Failed to extract rate card data using Anthropic: overloaded"
        assert exc_info.value.details["provider"] == "anthropic"


    def test_sdk_retries_are_disabled(self):
        client = AnthropicExtractionClient(api_key="sk-ant-test")

        assert client._model.max_retries == 0

class TestOpenAIClient:
    async def test_returns_tagged_completion(self):
        completion = '{"mediaTypes": []}'
        client = OpenAIExtractionClient(chat_model=FakeListChatModel(responses=[completion]))

        raw = await client.extract("Banner 300x250 $100")

        assert raw.provider == ExtractionProvider.OPENAI
        assert raw.content == completion

    async def test_prompt_uses_system_and_user_turns(self):
        model = _mock_chat_model("{}")
        client = OpenAIExtractionClient(chat_model=model)

        await client.extract("Banner 300x250 $100")

        system, user = model.ainvoke.call_args.args[0]
        assert isinstance(system, SystemMessage)
        assert '"mediaTypes"' in system.content
        assert isinstance(user, HumanMessage)
        assert user.content == "Banner 300x250 $100"

    async def test_empty_completion_becomes_empty_object(self):
        client = OpenAIExtractionClient(chat_model=_mock_chat_model(""))

        raw = await client.extract("text")

        assert raw.content == "{}"

    async def test_provider_failure_is_wrapped(self):
        model = MagicMock()
        model.ainvoke = AsyncMock(side_effect=RuntimeError("rate limited"))
        client = OpenAIExtractionClient(chat_model=model)

        with pytest.raises(ExtractionProviderError, match="using OpenAI: rate limited"):
            await client.extract("text")


    def test_sdk_retries_are_disabled(self):
        client = OpenAIExtractionClient(api_key="sk-test")

        # ChatOpenAI is wrapped by the response_format binding
        assert client._model.bound.max_retries == 0

class TestMessageText:
    def test_plain_string_content(self):
        assert message_text(AIMessage(content="hello")) == "hello"

    def test_content_blocks_keep_text_only(self):
        message = AIMessage(content=[
            {"type": "text", "text": "[{"},
            {"type": "tool_use", "id": "x", "name": "n", "input": {}},
            {"type": "text", "text": '"mediaType":"TV"}]'},
        ])

        assert message_text(message) == '[{"mediaType":"TV"}]'


class TestProviderRegistry:
    def test_only_configured_providers_are_registered(self):
        settings = ProviderSettings(anthropic_api_key="sk-ant-test", openai_api_key=None)

        registry = ProviderRegistry.from_settings(settings)

        assert registry.is_available(ExtractionProvider.ANTHROPIC)
        assert not registry.is_available(ExtractionProvider.OPENAI)
        assert isinstance(registry.get(ExtractionProvider.ANTHROPIC), AnthropicExtractionClient)

    def test_both_providers_when_both_keys_set(self):
        settings = ProviderSettings(anthropic_api_key="sk-ant-test", openai_api_key="sk-test")

        registry = ProviderRegistry.from_settings(settings)

        assert [info.id for info in registry.describe()] == ["anthropic", "openai"]
        assert isinstance(registry.get(ExtractionProvider.OPENAI), OpenAIExtractionClient)

    def test_no_keys_means_no_providers(self):
        registry = ProviderRegistry.from_settings(
            ProviderSettings(anthropic_api_key=None, openai_api_key=None)
        )

        assert registry.describe() == []
        with pytest.raises(ProviderUnavailableError):
            registry.get(ExtractionProvider.ANTHROPIC)

    def test_describe_reports_display_details(self):
        registry = ProviderRegistry({
            ExtractionProvider.OPENAI: OpenAIExtractionClient(chat_model=_mock_chat_model()),
        })

        [info] = registry.describe()

        assert info.id == "openai"
        assert info.name == "OpenAI GPT-4o"
        assert info.description == "Fast structured extraction with vision capabilities"
        assert info.available is True
