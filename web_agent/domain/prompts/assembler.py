"""Assembles system and user prompts from a brand's base config."""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Literal

from pydantic import BaseModel

from web_agent.domain.brands.registry import BrandId
from web_agent.domain.prompts.base_configs import get_base_config
from web_agent.domain.prompts.base_configs.common import (
    BOOKING_REMINDER,
    CROSS_CHANNEL_CONTEXT,
    FIRST_MESSAGE_GUIDANCE,
    PLAIN_TEXT_FORMATTING_INSTRUCTIONS,
    THIRD_MESSAGE_GUIDANCE,
    USER_NAME_LINE,
    VOICE_CHANNEL_RULES,
    WEB_FORMATTING_INSTRUCTIONS,
    WHATSAPP_CHANNEL_RULES,
)

FIRST_MESSAGE_SECTION = "first_message_restrictions"
KNOWLEDGE_BASE_SECTION = "knowledge_base"


class Channel(str, Enum):
    """Conversation channel."""

    WEB = "web"
    WHATSAPP = "whatsapp"
    VOICE = "voice"
    SOCIAL = "social"


class HistoryEntry(BaseModel):
    """One prior turn of the conversation."""

    role: Literal["user", "assistant"]
    content: str


@dataclass(frozen=True)
class PromptContext:
    """Caller-supplied inputs to prompt assembly."""

    context: str = ""
    message_count: int | None = None


def is_first_message(message_count: int | None) -> bool:
    """Whether this is the first user message.

    Both 0 and 1 count as first so 0-based and 1-based callers agree. Only
    real integers qualify: bools and floats are never a message count.
    """
    if not isinstance(message_count, int) or isinstance(message_count, bool):
        return False
    return message_count in (0, 1)


class PromptAssembler:
    """Assembles a brand's system prompt.

    The prompt is the brand's sections in ``default_section_order``: the
    identity header, the first-message restriction block (first message only),
    then the shared behavioural sections, with the caller's context rendered
    into the knowledge base section.
    """

    def __init__(self, brand: BrandId = BrandId.MASTER):
        """Initialize the assembler.

        Args:
            brand: Brand whose base config is assembled
        """
        self.brand = BrandId(brand)
        self.base_config = get_base_config(self.brand)

    def assemble(self, context: str = "", message_count: int | None = None) -> str:
        """Assemble the brand's system prompt.

        Args:
            context: Free-form conversation/knowledge context, interpolated as-is
            message_count: Number of user turns so far in the session

        Returns:
            Assembled system prompt string
        """
        sections = self._build_sections(context, message_count)

        # Assemble in order, skipping empty sections
        prompt_parts = []
        for section_key in self.base_config.default_section_order:
            content = sections.get(section_key)
            if content:
                prompt_parts.append(content)

        return "\n\n".join(prompt_parts)

    def assemble_for(self, prompt_context: PromptContext) -> str:
        """Assemble from a PromptContext value."""
        return self.assemble(prompt_context.context, prompt_context.message_count)

    def _build_sections(self, context: str, message_count: int | None) -> dict[str, str]:
        """Build static base sections plus the per-call sections."""
        sections = self.base_config.get_all_sections()
        sections[KNOWLEDGE_BASE_SECTION] = self.base_config.render_knowledge_base(context)

        if is_first_message(message_count):
            sections[FIRST_MESSAGE_SECTION] = (
                self.base_config.render_first_message_restrictions(message_count)
            )

        return sections


def assemble_prompt(
    brand: BrandId,
    context: str = "",
    message_count: int | None = None,
) -> str:
    """Convenience function to assemble a brand's system prompt.

    Args:
        brand: Brand to assemble for
        context: Free-form conversation/knowledge context
        message_count: Number of user turns so far

    Returns:
        Assembled system prompt
    """
    return PromptAssembler(brand).assemble(context, message_count)


def build_system_prompt(
    brand: BrandId,
    context: str = "",
    message_count: int | None = None,
    user_name: str | None = None,
    channel: Channel = Channel.WEB,
    cross_channel_context: str | None = None,
) -> str:
    """Build the full system prompt sent to the LLM.

    The brand prompt followed by the optional user name line, channel rules
    and cross-channel context.
    """
    parts = [assemble_prompt(brand, context, message_count)]

    if user_name:
        parts.append(USER_NAME_LINE.format(user_name=user_name))

    channel_rules = _channel_rules(channel)
    if channel_rules:
        parts.append(channel_rules)

    if cross_channel_context:
        parts.append(CROSS_CHANNEL_CONTEXT.format(cross_channel_context=cross_channel_context))

    return "\n\n".join(parts)


def build_user_prompt(
    message: str,
    summary: str | None = None,
    history: Iterable[HistoryEntry] = (),
    message_count: int | None = None,
    booking_already_scheduled: bool = False,
    channel: Channel = Channel.WEB,
) -> str:
    """Build the user prompt carrying conversation state and the latest message."""
    summary_block = (
        f"Conversation summary so far:\n{summary}"
        if summary
        else "Conversation summary so far:\nNo summary captured yet."
    )
    history_block = f"Recent turns:\n{format_history(history)}"

    instructions = [summary_block, history_block]

    if booking_already_scheduled:
        instructions.append(BOOKING_REMINDER)

    if channel == Channel.WHATSAPP:
        instructions.append(PLAIN_TEXT_FORMATTING_INSTRUCTIONS)
    else:
        instructions.append(WEB_FORMATTING_INSTRUCTIONS)

    if is_first_message(message_count):
        instructions.append(FIRST_MESSAGE_GUIDANCE.format(message_count=message_count or 0))
    elif message_count == 3:
        instructions.append(THIRD_MESSAGE_GUIDANCE)

    return "\n\n".join(instructions) + f"\n\nLatest user message:\n{message}\n\nCraft your reply:"


def format_history(history: Iterable[HistoryEntry] = ()) -> str:
    """Format prior turns as User:/Assistant: lines."""
    lines = [
        f"{'User' if entry.role == 'user' else 'Assistant'}: {entry.content}"
        for entry in history
    ]
    if not lines:
        return "No prior turns."
    return "\n".join(lines)


def _channel_rules(channel: Channel) -> str | None:
    """Channel-specific system prompt rules; web and social need none."""
    if channel == Channel.WHATSAPP:
        return WHATSAPP_CHANNEL_RULES
    if channel == Channel.VOICE:
        return VOICE_CHANNEL_RULES
    return None
