"""Shared shape of a brand base configuration."""

from typing import ClassVar

from web_agent.domain.brands.registry import BrandId
from web_agent.domain.prompts.base_configs.common import (
    DEFAULT_KNOWLEDGE_GUIDANCE,
    FIRST_MESSAGE_RESTRICTIONS,
    KNOWLEDGE_BASE_INTEGRATION,
)


class BrandBaseConfig:
    """Base configuration for a brand's system prompt.

    Subclasses provide the brand's static sections and their order. Two
    sections are rendered per call rather than stored: ``knowledge_base``
    (interpolates the caller's context) and ``first_message_restrictions``
    (only present on the first message).
    """

    brand: ClassVar[BrandId]

    sections: ClassVar[dict[str, str]] = {}
    default_section_order: ClassVar[list[str]] = []

    # Extra first-message rules, one line each
    first_message_rules: ClassVar[list[str]] = []
    knowledge_guidance: ClassVar[str] = DEFAULT_KNOWLEDGE_GUIDANCE

    @classmethod
    def get_section(cls, section_key: str) -> str | None:
        """Get a base section by key."""
        return cls.sections.get(section_key)

    @classmethod
    def get_all_sections(cls) -> dict[str, str]:
        """Get all base sections."""
        return cls.sections.copy()

    @classmethod
    def render_knowledge_base(cls, context: str) -> str:
        """Render the knowledge base section around the caller's context."""
        return KNOWLEDGE_BASE_INTEGRATION.format(
            context=context, guidance=cls.knowledge_guidance
        )

    @classmethod
    def render_first_message_restrictions(cls, message_count: int | None) -> str:
        """Render the first-message restriction block."""
        brand_rules = "".join(f"- {rule}\n" for rule in cls.first_message_rules)
        return FIRST_MESSAGE_RESTRICTIONS.format(
            message_count=message_count or 0, brand_rules=brand_rules
        )
