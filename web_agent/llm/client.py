"""LLM client interface."""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator


class LLMGenerationError(Exception):
    """Raised when the LLM provider fails to produce a response."""


class LLMClient(ABC):
    """Abstract base class for LLM clients."""

    @abstractmethod
    async def generate(self, prompt: str, context: dict | None = None) -> str:
        """Generate a response from the LLM.

        Args:
            prompt: The prompt to send to the LLM
            context: Optional parameters (system_prompt, temperature, max_tokens)

        Returns:
            The generated response text

        Raises:
            LLMGenerationError: If the provider call fails
        """
        pass

    async def generate_stream(
        self, prompt: str, context: dict | None = None
    ) -> AsyncIterator[str]:
        """Generate a streaming response from the LLM.

        Default implementation falls back to non-streaming generate().

        Args:
            prompt: The prompt to send to the LLM
            context: Optional parameters (system_prompt, temperature, max_tokens)

        Yields:
            Chunks of generated text as they become available
        """
        response = await self.generate(prompt, context)
        yield response

    async def aclose(self) -> None:
        """Release provider connections. No-op for clients that hold none."""
