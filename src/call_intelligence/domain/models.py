"""Domain models for transcript extraction and summarization."""

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class KeyPhrasesDocument(BaseModel):
    """Key phrases returned for one document, or the error that replaced them."""

    id: str
    key_phrases: list[str] = []
    error: str | None = None


class Entity(BaseModel):
    """A categorized span of text with the provider's confidence."""

    text: str
    category: str
    confidence_score: float


class EntitiesDocument(BaseModel):
    """Recognized entities for one document."""

    id: str
    entities: list[Entity] = []
    error: str | None = None


class PiiDocument(BaseModel):
    """PII recognition result for one document, with spans already masked."""

    id: str
    redacted_text: str = ""
    error: str | None = None


class ExtractionResult(BaseModel):
    """Labeled key phrase, entity and PII strings for one transcript."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    key_phrases_extracted: str
    entity_extracted: str
    pii_extracted: str


class ChatMessage(BaseModel):
    """A single message in a chat completion exchange."""

    role: Literal["system", "user", "assistant"]
    content: str | None = None


class CompletionParameters(BaseModel, frozen=True):
    """Sampling parameters sent with a chat completion request."""

    max_tokens: int
    temperature: float
    top_p: float
    frequency_penalty: float
    presence_penalty: float
