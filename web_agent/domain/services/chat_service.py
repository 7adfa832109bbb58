"""Chat service for processing web widget chat requests."""

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass, field

from web_agent.core.brand_context import set_brand_context
from web_agent.domain.brands.registry import BrandConfiguration, BrandRegistry
from web_agent.domain.prompts.assembler import (
    Channel,
    HistoryEntry,
    build_system_prompt,
    build_user_prompt,
    is_first_message,
)
from web_agent.domain.services.follow_up_service import FollowUpService
from web_agent.llm.client import LLMClient
from web_agent.settings import settings

logger = logging.getLogger(__name__)


@dataclass
class ChatResult:
    """Result of a chat request."""

    brand: BrandConfiguration
    response: str
    message_count: int | None
    first_message: bool
    llm_latency_ms: float
    follow_ups: list[str] = field(default_factory=list)


class ChatService:
    """Resolves the brand, builds prompts and relays the LLM reply."""

    def __init__(self, registry: BrandRegistry, llm_client: LLMClient) -> None:
        """Initialize chat service."""
        self.registry = registry
        self.llm_client = llm_client
        self.follow_up_service = FollowUpService(llm_client)

    async def process_chat(
        self,
        brand_key: str,
        user_message: str,
        context: str = "",
        message_count: int | None = None,
        user_name: str | None = None,
        summary: str | None = None,
        history: Sequence[HistoryEntry] = (),
        channel: Channel = Channel.WEB,
        booking_already_scheduled: bool = False,
        cross_channel_context: str | None = None,
        used_buttons: Sequence[str] = (),
    ) -> ChatResult:
        """Process a chat request.

        Args:
            brand_key: Brand identifier from the widget (any case)
            user_message: User's message
            context: Free-form context for the brand prompt
            message_count: Number of user turns so far
            user_name: Optional user name to address once
            summary: Conversation summary so far
            history: Recent turns
            channel: Conversation channel
            booking_already_scheduled: Whether a booking already exists
            cross_channel_context: Context carried over from another channel
            used_buttons: Follow-up buttons the user already clicked

        Returns:
            ChatResult with the LLM reply and follow-up buttons

        Raises:
            LLMGenerationError: If the LLM provider fails
        """
        brand = self.registry.resolve(brand_key)
        set_brand_context(brand.brand.value)

        system_prompt = build_system_prompt(
            brand.prompt,
            context=context,
            message_count=message_count,
            user_name=user_name,
            channel=channel,
            cross_channel_context=cross_channel_context,
        )
        user_prompt = build_user_prompt(
            user_message,
            summary=summary,
            history=history,
            message_count=message_count,
            booking_already_scheduled=booking_already_scheduled,
            channel=channel,
        )

        llm_start = time.time()
        response = await self.llm_client.generate(
            user_prompt,
            context={
                "system_prompt": system_prompt,
                "temperature": settings.llm_temperature,
                "max_tokens": settings.llm_max_output_tokens,
            },
        )
        llm_latency_ms = (time.time() - llm_start) * 1000

        logger.debug(
            "LLM reply generated",
            extra={
                "requested_brand": brand_key,
                "system_prompt_chars": len(system_prompt),
                "llm_latency_ms": round(llm_latency_ms, 2),
            },
        )

        follow_ups = await self.follow_up_service.generate_follow_ups(
            brand,
            channel,
            user_message=user_message,
            assistant_message=response,
            message_count=message_count,
            used_buttons=used_buttons,
            has_existing_booking=booking_already_scheduled,
        )

        return ChatResult(
            brand=brand,
            response=response,
            message_count=message_count,
            first_message=is_first_message(message_count),
            llm_latency_ms=llm_latency_ms,
            follow_ups=follow_ups,
        )
