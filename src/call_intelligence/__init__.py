from call_intelligence.config import AppConfig, load_config
from call_intelligence.exceptions import (
    InteractionLogError,
    InvalidTranscriptError,
    LLMServiceError,
    TextAnalyticsError,
)
from call_intelligence.logging import setup_logging

__all__ = [
    "setup_logging",
    "AppConfig",
    "load_config",
    "InteractionLogError",
    "InvalidTranscriptError",
    "LLMServiceError",
    "TextAnalyticsError",
]
