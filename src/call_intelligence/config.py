"""Application configuration loaded from environment variables."""

import os
from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_TELECOM_PROMPT = (
    "Summarize this telecom customer support call with key issues, "
    "resolution steps, and any sentiment cues."
)


class TextAnalyticsConfig(BaseModel, frozen=True):
    """Azure AI Language connection configuration."""

    endpoint: str
    api_key: str
    language: str = "en"


class OpenAIConfig(BaseModel, frozen=True):
    """Azure OpenAI deployment and tuning configuration."""

    endpoint: str
    api_key: str
    deployment_name: str
    api_version: str = "2024-06-01"
    max_tokens: int = Field(default=4000, gt=0)
    temperature: float = 0.7
    top_p: float = 0.95
    frequency_penalty: float = 0.0
    presence_penalty: float = 0.0
    telecom_prompt: str = DEFAULT_TELECOM_PROMPT


class SummarizationConfig(BaseModel, frozen=True):
    """Length budgets used when assembling completion requests."""

    custom_prompt_max_length: int = Field(default=3000, gt=0)
    custom_prompt_max_tokens: int = Field(default=1000, gt=0)
    pre_summary_max_tokens: int = Field(default=1000, gt=0)


class InteractionLogConfig(BaseModel, frozen=True):
    """Location of the append-only custom prompt interaction log."""

    path: Path = Path("data/interactions.jsonl")


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    text_analytics: TextAnalyticsConfig
    openai: OpenAIConfig
    summarization: SummarizationConfig = SummarizationConfig()
    interaction_log: InteractionLogConfig = InteractionLogConfig()


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        text_analytics=TextAnalyticsConfig(
            endpoint=os.getenv("AZURE_LANGUAGE_ENDPOINT", ""),
            api_key=os.getenv("AZURE_LANGUAGE_KEY", ""),
            language=os.getenv("AZURE_LANGUAGE_CODE", "en"),
        ),
        openai=OpenAIConfig(
            endpoint=os.getenv("AZURE_OPENAI_ENDPOINT", ""),
            api_key=os.getenv("AZURE_OPENAI_KEY", ""),
            deployment_name=os.getenv("AZURE_OPENAI_DEPLOYMENT", "gpt-4o-mini"),
            api_version=os.getenv("AZURE_OPENAI_API_VERSION", "2024-06-01"),
            max_tokens=int(os.getenv("OPENAI_MAX_TOKENS", "4000")),
            temperature=float(os.getenv("OPENAI_TEMPERATURE", "0.7")),
            top_p=float(os.getenv("OPENAI_TOP_P", "0.95")),
            frequency_penalty=float(os.getenv("OPENAI_FREQUENCY_PENALTY", "0")),
            presence_penalty=float(os.getenv("OPENAI_PRESENCE_PENALTY", "0")),
            telecom_prompt=os.getenv("OPENAI_TELECOM_PROMPT") or DEFAULT_TELECOM_PROMPT,
        ),
        interaction_log=InteractionLogConfig(
            path=Path(os.getenv("INTERACTION_LOG_PATH", "data/interactions.jsonl")),
        ),
    )
