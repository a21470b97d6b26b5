"""Infrastructure layer exports."""

from call_intelligence.infrastructure.azure_openai_chat import AzureOpenAIChatService
from call_intelligence.infrastructure.azure_text_analytics import (
    AzureTextAnalyticsService,
)
from call_intelligence.infrastructure.jsonl_interaction_log import (
    JsonLinesInteractionLog,
)

__all__ = [
    "AzureOpenAIChatService",
    "AzureTextAnalyticsService",
    "JsonLinesInteractionLog",
]
