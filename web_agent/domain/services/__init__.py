"""Domain services."""

from web_agent.domain.services.chat_service import ChatResult, ChatService
from web_agent.domain.services.follow_up_service import FollowUpService
from web_agent.domain.services.summary_service import SummaryService

__all__ = ["ChatResult", "ChatService", "FollowUpService", "SummaryService"]
