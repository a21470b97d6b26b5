"""Domain layer exports."""

from call_intelligence.domain.extraction_aggregator import ExtractionAggregator
from call_intelligence.domain.models import (
    ChatMessage,
    CompletionParameters,
    EntitiesDocument,
    Entity,
    ExtractionResult,
    KeyPhrasesDocument,
    PiiDocument,
)
from call_intelligence.domain.text_analyzer import TextAnalyzer
from call_intelligence.domain.transcript_summarizer import TranscriptSummarizer
from call_intelligence.domain.truncation import truncate_text

__all__ = [
    "ChatMessage",
    "CompletionParameters",
    "EntitiesDocument",
    "Entity",
    "ExtractionAggregator",
    "ExtractionResult",
    "KeyPhrasesDocument",
    "PiiDocument",
    "TextAnalyzer",
    "TranscriptSummarizer",
    "truncate_text",
]
