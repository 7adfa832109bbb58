"""Pytest configuration and fixtures."""

import pytest

from web_agent.api.deps import get_llm
from web_agent.domain.brands.registry import BrandRegistry, build_brand_registry
from web_agent.llm.client import LLMClient, LLMGenerationError


class FakeLLMClient(LLMClient):
    """Records calls and returns a canned reply.

    Queued ``replies`` are returned first, one per call, then ``reply``.
    """

    def __init__(self, reply: str = "Hello from the assistant.", fail: bool = False) -> None:
        self.reply = reply
        self.replies: list[str] = []
        self.fail = fail
        self.closed = False
        self.calls: list[tuple[str, dict | None]] = []

    async def generate(self, prompt: str, context: dict | None = None) -> str:
        self.calls.append((prompt, context))
        if self.fail:
            raise LLMGenerationError("provider unavailable")
        if self.replies:
            return self.replies.pop(0)
        return self.reply

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def registry() -> BrandRegistry:
    """Registry built from the shipped brand definitions."""
    return build_brand_registry()


@pytest.fixture
def fake_llm() -> FakeLLMClient:
    """LLM client that never leaves the process."""
    return FakeLLMClient()


@pytest.fixture
def client(fake_llm):
    """Create a test FastAPI client with the fake LLM injected."""
    from fastapi.testclient import TestClient
    from web_agent.main import app

    app.dependency_overrides[get_llm] = lambda: fake_llm

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
