"""Factory to create LLM clients based on a mode string or env var."""
import os
from typing import Optional

from web_agent.llm.client import LLMClient
from web_agent.llm.gemini_client import GeminiClient
from web_agent.settings import settings

# Accepted LLM_MODE spellings per provider
LLM_PROVIDERS: dict[str, type[LLMClient]] = {
    "gemini": GeminiClient,
    "google": GeminiClient,
    "googleai": GeminiClient,
}


def get_llm_client(mode: Optional[str] = None) -> LLMClient:
    """Return an LLMClient for the requested mode.

    Priority: explicit `mode` argument -> `LLM_MODE` env var -> settings.llm_mode

    Raises:
        ValueError: If the mode names no known provider
    """
    selected = (mode or os.environ.get("LLM_MODE") or settings.llm_mode).strip().lower()

    client_class = LLM_PROVIDERS.get(selected)
    if client_class is None:
        raise ValueError(
            f"Unsupported LLM mode: {selected}. Available: {sorted(LLM_PROVIDERS)}"
        )
    return client_class()
