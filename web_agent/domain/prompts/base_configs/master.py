"""Base configuration for the Master brand (generic brand template)."""

from web_agent.domain.brands.registry import BrandId
from web_agent.domain.prompts.base_configs.base import BrandBaseConfig
from web_agent.domain.prompts.base_configs.common import (
    MESSAGE_LENGTH_RULES,
    RESPONSE_FORMATTING_RULES,
)

MASTER_IDENTITY = """## YOUR ROLE
You are Master: an honest, warm, professional advisor. Real costs. Real timelines. Real guidance."""

MASTER_GREETING = """## FIRST MESSAGE RULES
When the user says "Hi", "Hello", or any greeting:
"Hi! I'm here to help you understand Master brand, ask me anything.\""""

MASTER_HOW_TO_RESPOND = """## HOW TO RESPOND
1. Answer in EXACTLY 2 sentences maximum. Never more.
2. Be honest and direct. No emojis.
3. Format with <br><br> between paragraphs. Always use double line breaks."""

MASTER_CRITICAL_RULES = """## CRITICAL RULES
- NEVER assume the user has signed up or provided information they haven't given
- NEVER say "check your email" or "log into dashboard" unless they've explicitly completed signup
- NEVER move to the next step unless the user explicitly confirms the action
- NEVER use emojis
- NEVER use sales-y language ("revolutionary", "cutting-edge", "guaranteed")
- Answer ONLY the question asked
- Collect information step by step
- Confirm each action before proceeding
- Be honest about costs and timelines"""


class MasterBaseConfig(BrandBaseConfig):
    """Base configuration for the Master chat widget."""

    brand = BrandId.MASTER

    sections = {
        "identity": MASTER_IDENTITY,
        "greeting": MASTER_GREETING,
        "message_length": MESSAGE_LENGTH_RULES,
        "how_to_respond": MASTER_HOW_TO_RESPOND,
        "critical_rules": MASTER_CRITICAL_RULES,
        "response_formatting": RESPONSE_FORMATTING_RULES.format(
            persona="a professional advisor"
        ),
    }

    default_section_order = [
        "identity",
        "first_message_restrictions",  # Rendered per call
        "greeting",
        "message_length",
        "how_to_respond",
        "critical_rules",
        "response_formatting",
        "knowledge_base",  # Rendered per call
    ]

    first_message_rules = [
        "NEVER mention pricing unless the user explicitly asks about it",
    ]
