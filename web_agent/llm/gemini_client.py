"""Gemini client implementation using the google-genai SDK."""

import os
from collections.abc import AsyncIterator
from typing import Any

from google import genai
from google.genai import types

from web_agent.llm.client import LLMClient, LLMGenerationError
from web_agent.settings import settings


class GeminiClient(LLMClient):
    """Gemini client."""

    def __init__(self, api_key: str | None = None, model_name: str | None = None) -> None:
        """Initialize the Gemini client.

        Args:
            api_key: API key; defaults to GEMINI_API_KEY from settings
            model_name: Model name; defaults to settings.gemini_model
        """
        api_key = api_key or settings.gemini_api_key
        base_url = os.environ.get("GEMINI_BASE_URL")

        if base_url:
            self.client = genai.Client(
                api_key=api_key,
                http_options=types.HttpOptions(api_version="v1beta", base_url=base_url),
            )
        else:
            self.client = genai.Client(
                api_key=api_key,
                http_options=types.HttpOptions(api_version="v1beta"),
            )
        self.model_name = model_name or settings.gemini_model

    def _build_config(self, context: dict | None) -> types.GenerateContentConfig:
        """Build generation config from defaults and the call context."""
        generation_config: dict[str, Any] = {
            "temperature": settings.llm_temperature,
            "max_output_tokens": settings.llm_max_output_tokens,
        }

        if context:
            if "temperature" in context:
                generation_config["temperature"] = context["temperature"]
            if "max_tokens" in context:
                generation_config["max_output_tokens"] = context["max_tokens"]
            if context.get("system_prompt"):
                generation_config["system_instruction"] = context["system_prompt"]

        return types.GenerateContentConfig(**generation_config)

    async def generate(self, prompt: str, context: dict | None = None) -> str:
        """Generate a response using Gemini.

        Args:
            prompt: The prompt to send to the LLM
            context: Optional parameters (system_prompt, temperature, max_tokens)

        Returns:
            The generated response text

        Raises:
            LLMGenerationError: If generation fails
        """
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=self._build_config(context),
            )
        except Exception as e:
            raise LLMGenerationError(f"Gemini generation failed: {e}") from e

        return (response.text or "").strip()

    async def generate_stream(
        self, prompt: str, context: dict | None = None
    ) -> AsyncIterator[str]:
        """Stream a response from Gemini chunk by chunk."""
        try:
            stream = await self.client.aio.models.generate_content_stream(
                model=self.model_name,
                contents=prompt,
                config=self._build_config(context),
            )
            async for chunk in stream:
                if chunk.text:
                    yield chunk.text
        except Exception as e:
            raise LLMGenerationError(f"Gemini streaming failed: {e}") from e

    async def aclose(self) -> None:
        """Close the SDK's async HTTP session."""
        await self.client.aio.aclose()
