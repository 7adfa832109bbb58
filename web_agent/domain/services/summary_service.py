"""Rolling conversation summaries for the web chat widget."""

import logging
import re
from collections.abc import Sequence

from web_agent.domain.prompts.assembler import HistoryEntry, format_history
from web_agent.llm.client import LLMClient

logger = logging.getLogger(__name__)

SUMMARY_MAX_TOKENS = 60

# Bracketed metadata the client may have folded into earlier turns
_METADATA_PATTERNS = (
    re.compile(r"\[User's name is[^\]]+\]", re.IGNORECASE),
    re.compile(r"\[Booking Status:[^\]]+\]", re.IGNORECASE),
)
_BLANK_LINES = re.compile(r"\n\n+")

SUMMARY_SYSTEM_PROMPT = """You are an AI conversation summarizer. Create a SHORT, focused summary (1 sentence, max ~50 tokens) focusing ONLY on:
- User's intent (what they want)
- Next steps (what action is needed or in progress)
- Booking status (if they have booked something: date/time/status)
- Topic/question category (what the question is related to)

Do NOT explain what the bot said or what the user said back. Do NOT describe the conversation flow. Just state: intent, next steps, booking status (if any), and topic. Be extremely concise."""

SUMMARY_USER_PROMPT = """Previous summary:
{previous_summary}

New conversation:
{history}

Create a very short summary (1 sentence max). Focus ONLY on: intent, next steps, booking status (if booked), and what the question relates to. Do NOT explain the conversation flow or what was said."""


def strip_metadata(text: str) -> str:
    """Remove bracketed name/booking metadata and collapse blank lines."""
    for pattern in _METADATA_PATTERNS:
        text = pattern.sub("", text)
    return _BLANK_LINES.sub("\n", text).strip()


class SummaryService:
    """Folds recent turns into a one-sentence running summary."""

    def __init__(self, llm_client: LLMClient) -> None:
        self.llm_client = llm_client

    async def summarize(
        self,
        previous_summary: str = "",
        history: Sequence[HistoryEntry] = (),
    ) -> str:
        """Update the running summary with the given turns.

        Returns the cleaned previous summary unchanged when there are no turns
        to fold in.

        Raises:
            LLMGenerationError: If the LLM provider fails
        """
        cleaned_previous = strip_metadata(previous_summary)
        if not history:
            return cleaned_previous

        cleaned_history = [
            HistoryEntry(role=entry.role, content=strip_metadata(entry.content))
            for entry in history
        ]
        cleaned_history = [entry for entry in cleaned_history if entry.content]
        if not cleaned_history:
            return cleaned_previous

        summary = await self.llm_client.generate(
            SUMMARY_USER_PROMPT.format(
                previous_summary=cleaned_previous or "(none)",
                history=format_history(cleaned_history),
            ),
            context={
                "system_prompt": SUMMARY_SYSTEM_PROMPT,
                "temperature": 0,
                "max_tokens": SUMMARY_MAX_TOKENS,
            },
        )

        logger.debug(
            "Conversation summary updated",
            extra={"turns": len(cleaned_history), "summary_chars": len(summary)},
        )
        return summary.strip() or cleaned_previous
