"""FastAPI dependency injection configuration."""

from functools import lru_cache

from azure.ai.textanalytics import TextAnalyticsClient
from azure.core.credentials import AzureKeyCredential
from openai import AzureOpenAI

from call_intelligence.config import AppConfig, load_config
from call_intelligence.domain import TextAnalyzer, TranscriptSummarizer
from call_intelligence.infrastructure import (
    AzureOpenAIChatService,
    AzureTextAnalyticsService,
    JsonLinesInteractionLog,
)
from call_intelligence.infrastructure.interfaces import InteractionLog
from call_intelligence.logging import setup_logging

logger = setup_logging()


@lru_cache
def get_config() -> AppConfig:
    """Returns the process-wide configuration, loaded on first use."""
    return load_config()


@lru_cache
def get_text_analyzer() -> TextAnalyzer:
    """Returns the text analyzer wired to Azure AI Language."""
    config = get_config().text_analytics

    def create_client() -> TextAnalyticsClient:
        client = TextAnalyticsClient(
            endpoint=config.endpoint,
            credential=AzureKeyCredential(config.api_key),
        )
        logger.info(
            "Text analytics client created", extra={"endpoint": config.endpoint}
        )
        return client

    return TextAnalyzer(AzureTextAnalyticsService(create_client, config.language))


@lru_cache
def get_summarizer() -> TranscriptSummarizer:
    """Returns the transcript summarizer wired to Azure OpenAI."""
    config = get_config()

    def create_client() -> AzureOpenAI:
        client = AzureOpenAI(
            azure_endpoint=config.openai.endpoint,
            api_key=config.openai.api_key,
            api_version=config.openai.api_version,
        )
        logger.info(
            "Azure OpenAI client created",
            extra={
                "endpoint": config.openai.endpoint,
                "deployment": config.openai.deployment_name,
            },
        )
        return client

    chat = AzureOpenAIChatService(create_client, config.openai.deployment_name)
    return TranscriptSummarizer(chat, config.openai, config.summarization)


@lru_cache
def get_interaction_log() -> InteractionLog:
    """Returns the append-only interaction log."""
    return JsonLinesInteractionLog(get_config().interaction_log.path)
