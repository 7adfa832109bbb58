"""FastAPI dependencies for brand resolution and the LLM client."""

from typing import Annotated

from fastapi import Depends, Request

from web_agent.domain.brands.registry import BrandRegistry
from web_agent.domain.services.chat_service import ChatService
from web_agent.domain.services.summary_service import SummaryService
from web_agent.llm.client import LLMClient
from web_agent.llm.factory import get_llm_client


def get_brand_registry(request: Request) -> BrandRegistry:
    """Brand registry built at startup and held on app state."""
    return request.app.state.brand_registry


def get_llm(request: Request) -> LLMClient:
    """LLM client, created on first use and reused for the app's lifetime."""
    client = getattr(request.app.state, "llm_client", None)
    if client is None:
        client = get_llm_client()
        request.app.state.llm_client = client
    return client


def get_chat_service(
    registry: Annotated[BrandRegistry, Depends(get_brand_registry)],
    llm_client: Annotated[LLMClient, Depends(get_llm)],
) -> ChatService:
    """Chat service wired to the registry and LLM client."""
    return ChatService(registry, llm_client)


def get_summary_service(
    llm_client: Annotated[LLMClient, Depends(get_llm)],
) -> SummaryService:
    """Summary service wired to the LLM client."""
    return SummaryService(llm_client)
