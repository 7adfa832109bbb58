"""Tests for the Gemini client and the LLM factory."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from web_agent.llm.client import LLMClient, LLMGenerationError
from web_agent.llm.factory import get_llm_client
from web_agent.llm.gemini_client import GeminiClient


@pytest.fixture
def mock_genai():
    """Patch the google-genai module used by the client."""
    with patch("web_agent.llm.gemini_client.genai") as genai:
        sdk_client = MagicMock()
        sdk_client.aio.models.generate_content = AsyncMock(
            return_value=SimpleNamespace(text="  Hello!  ")
        )
        genai.Client.return_value = sdk_client
        yield sdk_client


class TestGeminiClient:
    """Test cases for GeminiClient."""

    @pytest.mark.asyncio
    async def test_generate_returns_stripped_text(self, mock_genai):
        client = GeminiClient(api_key="test-key", model_name="gemini-test")

        result = await client.generate("Hi", context={"system_prompt": "You are Master"})

        assert result == "Hello!"
        kwargs = mock_genai.aio.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "gemini-test"
        assert kwargs["contents"] == "Hi"
        assert kwargs["config"].system_instruction == "You are Master"

    @pytest.mark.asyncio
    async def test_context_overrides_generation_settings(self, mock_genai):
        client = GeminiClient(api_key="test-key")

        await client.generate("Hi", context={"temperature": 0.9, "max_tokens": 50})

        config = mock_genai.aio.models.generate_content.call_args.kwargs["config"]
        assert config.temperature == 0.9
        assert config.max_output_tokens == 50
        assert config.system_instruction is None

    @pytest.mark.asyncio
    async def test_empty_response_text(self, mock_genai):
        mock_genai.aio.models.generate_content.return_value = SimpleNamespace(text=None)
        client = GeminiClient(api_key="test-key")

        assert await client.generate("Hi") == ""

    @pytest.mark.asyncio
    async def test_provider_error_wrapped(self, mock_genai):
        mock_genai.aio.models.generate_content.side_effect = RuntimeError("quota exceeded")
        client = GeminiClient(api_key="test-key")

        with pytest.raises(LLMGenerationError, match="quota exceeded"):
            await client.generate("Hi")

    @pytest.mark.asyncio
    async def test_generate_stream_yields_chunks(self, mock_genai):
        async def chunks():
            for text in ("Hel", None, "lo"):
                yield SimpleNamespace(text=text)

        mock_genai.aio.models.generate_content_stream = AsyncMock(return_value=chunks())
        client = GeminiClient(api_key="test-key")

        received = [chunk async for chunk in client.generate_stream("Hi")]

        assert received == ["Hel", "lo"]

    @pytest.mark.asyncio
    async def test_aclose_closes_sdk_session(self, mock_genai):
        mock_genai.aio.aclose = AsyncMock()
        client = GeminiClient(api_key="test-key")

        await client.aclose()

        mock_genai.aio.aclose.assert_awaited_once()


class TestLLMClientFallback:
    """Test cases for the default streaming fallback."""

    @pytest.mark.asyncio
    async def test_stream_falls_back_to_generate(self, fake_llm):
        received = [chunk async for chunk in fake_llm.generate_stream("Hi")]

        assert received == [fake_llm.reply]

    @pytest.mark.asyncio
    async def test_default_aclose_is_noop(self):
        class QuietClient(LLMClient):
            async def generate(self, prompt, context=None):
                return ""

        await QuietClient().aclose()


class TestLLMFactory:
    """Test cases for get_llm_client."""

    def test_gemini_mode(self, mock_genai):
        assert isinstance(get_llm_client("gemini"), GeminiClient)
        assert isinstance(get_llm_client("GOOGLE"), GeminiClient)

    def test_unsupported_mode(self):
        with pytest.raises(ValueError, match="Unsupported LLM mode"):
            get_llm_client("carrier-pigeon")

    def test_env_mode_used_when_no_argument(self, mock_genai, monkeypatch):
        monkeypatch.setenv("LLM_MODE", " GoogleAI ")
        assert isinstance(get_llm_client(), GeminiClient)

    def test_unsupported_env_mode(self, monkeypatch):
        monkeypatch.setenv("LLM_MODE", "openai")
        with pytest.raises(ValueError, match="Available"):
            get_llm_client()
