"""LLM abstraction layer."""

from web_agent.llm.client import LLMClient, LLMGenerationError
from web_agent.llm.factory import get_llm_client
from web_agent.llm.gemini_client import GeminiClient

__all__ = ["LLMClient", "LLMGenerationError", "GeminiClient", "get_llm_client"]
