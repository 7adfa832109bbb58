"""Public chat endpoint for the web chat widget."""

import logging
import time
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator
from pydantic.alias_generators import to_camel

from web_agent.api.deps import get_chat_service, get_summary_service
from web_agent.domain.prompts.assembler import Channel, HistoryEntry
from web_agent.domain.services.chat_service import ChatService
from web_agent.domain.services.summary_service import SummaryService
from web_agent.llm.client import LLMGenerationError

logger = logging.getLogger(__name__)

router = APIRouter()


class ChatRequest(BaseModel):
    """Chat request from the web widget (camelCase or snake_case keys)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    brand: str
    message: str
    context: str = ""
    message_count: StrictInt | None = Field(default=None, ge=0)
    user_name: str | None = None
    summary: str | None = None
    history: list[HistoryEntry] = Field(default_factory=list)
    channel: Channel = Channel.WEB
    booking_already_scheduled: bool = False
    cross_channel_context: str | None = None
    used_buttons: list[str] = Field(default_factory=list)

    @field_validator("message")
    @classmethod
    def message_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Message is required")
        return v


class ChatResponse(BaseModel):
    """Chat response to the web widget."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    brand: str
    response: str
    message_count: int | None = None
    first_message: bool = False
    follow_ups: list[str] = Field(default_factory=list)


@router.post("", response_model=ChatResponse)
async def chat(
    chat_request: ChatRequest,
    chat_service: Annotated[ChatService, Depends(get_chat_service)],
) -> ChatResponse:
    """Public chat endpoint for the widget.

    Resolves the brand (unknown brands fall back to the default), assembles
    the brand's system prompt and relays the LLM reply.
    """
    start_time = time.time()

    try:
        result = await chat_service.process_chat(
            brand_key=chat_request.brand,
            user_message=chat_request.message,
            context=chat_request.context,
            message_count=chat_request.message_count,
            user_name=chat_request.user_name,
            summary=chat_request.summary,
            history=chat_request.history,
            channel=chat_request.channel,
            booking_already_scheduled=chat_request.booking_already_scheduled,
            cross_channel_context=chat_request.cross_channel_context,
            used_buttons=chat_request.used_buttons,
        )
    except LLMGenerationError as e:
        logger.error(
            f"Chat request failed - brand={chat_request.brand}, error={e}, "
            f"latency_ms={(time.time() - start_time) * 1000:.2f}",
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Chat service error",
        )

    latency_ms = (time.time() - start_time) * 1000
    logger.info(
        f"Chat request processed - brand={result.brand.brand.value}, "
        f"message_count={result.message_count}, latency_ms={latency_ms:.2f}, "
        f"llm_latency_ms={result.llm_latency_ms:.2f}"
    )

    return ChatResponse(
        brand=result.brand.brand.value,
        response=result.response,
        message_count=result.message_count,
        first_message=result.first_message,
        follow_ups=result.follow_ups,
    )


class SummarizeRequest(BaseModel):
    """Recent turns to fold into the running conversation summary."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    summary: str = ""
    history: list[HistoryEntry] = Field(default_factory=list)


class SummarizeResponse(BaseModel):
    """Updated conversation summary."""

    summary: str


@router.post("/summarize", response_model=SummarizeResponse)
async def summarize(
    summarize_request: SummarizeRequest,
    summary_service: Annotated[SummaryService, Depends(get_summary_service)],
) -> SummarizeResponse:
    """Update the widget's running conversation summary.

    The widget sends the summary back with later chat requests so the LLM
    keeps context beyond the recent turns.
    """
    try:
        summary = await summary_service.summarize(
            previous_summary=summarize_request.summary,
            history=summarize_request.history,
        )
    except LLMGenerationError as e:
        logger.error(f"Summarize request failed - error={e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Summary service error",
        )

    return SummarizeResponse(summary=summary)
