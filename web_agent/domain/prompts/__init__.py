"""Brand prompt system.

- Base configs: per-brand identity, rules and sections (Python)
- Assembler: combines a brand's sections with runtime context into the final prompt
"""

from web_agent.domain.prompts.assembler import (
    Channel,
    HistoryEntry,
    PromptAssembler,
    PromptContext,
    assemble_prompt,
    build_system_prompt,
    build_user_prompt,
    is_first_message,
)

__all__ = [
    "Channel",
    "HistoryEntry",
    "PromptAssembler",
    "PromptContext",
    "assemble_prompt",
    "build_system_prompt",
    "build_user_prompt",
    "is_first_message",
]
