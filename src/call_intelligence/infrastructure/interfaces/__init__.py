"""Infrastructure interface exports."""

from call_intelligence.infrastructure.interfaces.chat_completion_service import (
    ChatCompletionService,
)
from call_intelligence.infrastructure.interfaces.interaction_log import InteractionLog
from call_intelligence.infrastructure.interfaces.text_analytics_service import (
    TextAnalyticsService,
)

__all__ = [
    "ChatCompletionService",
    "InteractionLog",
    "TextAnalyticsService",
]
