"""Follow-up button generation for the web chat widget."""

import logging
from collections.abc import Iterable, Sequence

from web_agent.domain.brands.registry import BrandConfiguration
from web_agent.domain.prompts.assembler import Channel, is_first_message
from web_agent.llm.client import LLMClient, LLMGenerationError

logger = logging.getLogger(__name__)

FIRST_MESSAGE_BUTTON_COUNT = 2
SUBSEQUENT_BUTTON_COUNT = 1
BUTTON_MAX_TOKENS = 60
SKIP_MARKER = "SKIP"

BOOKING_ACTION_BUTTONS = ("Reschedule Call", "View Booking Details")
BOOKING_AWARE_INFO_BUTTONS = ("Get Course Details", "Check Eligibility", "Financing Options")
COST_BUTTONS = ("Get Cost Breakdown", "Financing Options", "Talk to Counselor")
GENERIC_BUTTONS = ("Book a Demo Session", "Get Cost Breakdown", "Learn More")
FALLBACK_BUTTON = "Book a Demo Session"

COST_KEYWORDS = ("cost", "price", "pricing", "fee", "investment")
COST_REPLY_MARKERS = ("₹", "lakh", "$")
BOOKING_KEYWORDS = ("call", "demo", "book", "schedule", "meeting", "appointment")

BUTTON_SYSTEM_PROMPT = """You create one short, direct follow-up call-to-action button label for the {brand_name} chat widget.

AVAILABLE BUTTON TYPES (create contextual variations):
- Information: "Get Details", "Check Eligibility", "Learn More"
- Exploration: "Explore Options", "See Examples"
- Booking: "Book a Demo Session", "Book 1:1 Consultation", "Schedule Call"
- Next Steps: "Get Cost Breakdown", "Financing Options", "See Timeline"

BUTTON GENERATION RULES:
- 3-7 words. Title case. No emojis.
- Match the conversation flow: the next logical step for the user
- NEVER repeat what was just explained

If no relevant follow-up is appropriate, respond with only: SKIP
Output ONLY the button label text. No quotes. No explanation."""

BUTTON_USER_PROMPT = """User's question: {user_message}

Assistant's reply: {assistant_message}

Message count: {message_count}

Generate ONE contextual follow-up button label."""


class FollowUpService:
    """Suggests follow-up buttons after each assistant reply.

    Web only. Clicking an explore button opens the brand's explore menu;
    otherwise the first message gets two buttons and later messages one,
    capped by the brand's ``max_follow_ups``. The lead button is written by
    the LLM; the rest come from fixed pools, skipping buttons already used.
    """

    def __init__(self, llm_client: LLMClient) -> None:
        self.llm_client = llm_client

    async def generate_follow_ups(
        self,
        brand: BrandConfiguration,
        channel: Channel,
        user_message: str,
        assistant_message: str,
        message_count: int | None = None,
        used_buttons: Sequence[str] = (),
        has_existing_booking: bool = False,
    ) -> list[str]:
        """Generate follow-up buttons for one turn.

        Args:
            brand: Resolved brand configuration
            channel: Conversation channel; only web shows buttons
            user_message: Latest user message
            assistant_message: Assistant reply to it
            message_count: Number of user turns so far
            used_buttons: Buttons the user already clicked
            has_existing_booking: Whether the user already booked

        Returns:
            Button labels, possibly empty
        """
        if channel != Channel.WEB or not brand.show_follow_up_buttons:
            return []

        if brand.explore_buttons and "explore" in user_message.lower():
            return list(brand.explore_buttons)

        first_message = is_first_message(message_count)

        if has_existing_booking:
            buttons = self._booking_aware_buttons(first_message, used_buttons)
        elif first_message:
            buttons = await self._first_message_buttons(
                brand, user_message, assistant_message, message_count, used_buttons
            )
        else:
            buttons = await self._subsequent_buttons(
                brand, user_message, assistant_message, message_count, used_buttons
            )

        return buttons[: brand.max_follow_ups]

    def _booking_aware_buttons(
        self, first_message: bool, used_buttons: Sequence[str]
    ) -> list[str]:
        """Buttons for a user who already booked; never offers a new booking."""
        pool = BOOKING_AWARE_INFO_BUTTONS + BOOKING_ACTION_BUTTONS
        if first_message:
            return list(pool[:FIRST_MESSAGE_BUTTON_COUNT])
        return [_first_unused(pool, used_buttons) or BOOKING_ACTION_BUTTONS[0]]

    async def _first_message_buttons(
        self,
        brand: BrandConfiguration,
        user_message: str,
        assistant_message: str,
        message_count: int | None,
        used_buttons: Sequence[str],
    ) -> list[str]:
        pool = brand.quick_buttons + GENERIC_BUTTONS
        generated = await self._contextual_button(
            brand, user_message, assistant_message, message_count
        )
        if not generated:
            return _unused(pool, used_buttons)[:FIRST_MESSAGE_BUTTON_COUNT]

        second = _first_unused(pool, [generated, *used_buttons]) or FALLBACK_BUTTON
        return [generated, second]

    async def _subsequent_buttons(
        self,
        brand: BrandConfiguration,
        user_message: str,
        assistant_message: str,
        message_count: int | None,
        used_buttons: Sequence[str],
    ) -> list[str]:
        generated = await self._contextual_button(
            brand, user_message, assistant_message, message_count
        )
        used_lower = {button.lower() for button in used_buttons}
        if generated and generated.lower() not in used_lower:
            return [generated]

        if _mentions_cost(user_message, assistant_message):
            pool = COST_BUTTONS
        else:
            pool = brand.quick_buttons + GENERIC_BUTTONS
        # Everything used: repeat the pool rather than show nothing
        return [_first_unused(pool, used_buttons) or pool[0]]

    async def _contextual_button(
        self,
        brand: BrandConfiguration,
        user_message: str,
        assistant_message: str,
        message_count: int | None,
    ) -> str | None:
        """Ask the LLM for one button label; None when it skips or fails."""
        try:
            suggestion = await self.llm_client.generate(
                BUTTON_USER_PROMPT.format(
                    user_message=user_message,
                    assistant_message=assistant_message,
                    message_count=message_count if message_count is not None else "unknown",
                ),
                context={
                    "system_prompt": BUTTON_SYSTEM_PROMPT.format(brand_name=brand.name),
                    "temperature": 0.3,
                    "max_tokens": BUTTON_MAX_TOKENS,
                },
            )
        except LLMGenerationError as e:
            # Buttons are optional; the reply still goes out without them
            logger.warning(
                f"Follow-up button generation failed - brand={brand.brand.value}, error={e}"
            )
            return None

        lines = [line.strip() for line in suggestion.splitlines() if line.strip()]
        if not lines or lines[0].upper() == SKIP_MARKER:
            return None
        label = lines[0].replace('"', "").replace("'", "").strip()
        return label or None


def _mentions_cost(user_message: str, assistant_message: str) -> bool:
    lower_message = user_message.lower()
    lower_reply = assistant_message.lower()
    return any(k in lower_message for k in COST_KEYWORDS) or any(
        m in lower_reply for m in COST_REPLY_MARKERS
    )


def _is_similar(button: str, other: str) -> bool:
    """Same label, or two booking buttons both about a call or both about a demo."""
    first = button.lower().strip()
    second = other.lower().strip()
    if first == second:
        return True

    if not (
        any(k in first for k in BOOKING_KEYWORDS)
        and any(k in second for k in BOOKING_KEYWORDS)
    ):
        return False
    return ("call" in first and "call" in second) or ("demo" in first and "demo" in second)


def _unused(pool: Iterable[str], used_buttons: Sequence[str]) -> list[str]:
    """Pool entries not similar to a used button, deduplicated, in order."""
    result: list[str] = []
    for button in pool:
        if any(_is_similar(button, seen) for seen in [*used_buttons, *result]):
            continue
        result.append(button)
    return result


def _first_unused(pool: Iterable[str], used_buttons: Sequence[str]) -> str | None:
    unused = _unused(pool, used_buttons)
    return unused[0] if unused else None
