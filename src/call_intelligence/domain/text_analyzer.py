"""Key phrase, entity and PII extraction for a single transcript."""

from call_intelligence.domain.extraction_aggregator import ExtractionAggregator
from call_intelligence.domain.models import ExtractionResult
from call_intelligence.infrastructure.interfaces import TextAnalyticsService
from call_intelligence.logging import setup_logging

logger = setup_logging()


class TextAnalyzer:
    """Runs the three text analytics operations and aggregates their output."""

    def __init__(
        self,
        text_analytics: TextAnalyticsService,
        aggregator: ExtractionAggregator | None = None,
    ):
        self._text_analytics = text_analytics
        self._aggregator = aggregator or ExtractionAggregator()

    def analyze(self, transcript: str) -> ExtractionResult:
        """
        Extracts key phrases, entities and redacted PII from a transcript.

        The provider calls run one after another; each must finish before
        the next starts.

        Args:
            transcript: The call transcript text.

        Returns:
            ExtractionResult with the three labeled strings.

        Raises:
            TextAnalyticsError: If any provider call fails.
        """
        documents = [transcript]

        key_phrase_docs = self._text_analytics.extract_key_phrases(documents)
        entity_docs = self._text_analytics.recognize_entities(documents)
        pii_docs = self._text_analytics.recognize_pii_entities(documents)

        result = self._aggregator.aggregate(key_phrase_docs, entity_docs, pii_docs)
        logger.info(
            "Transcript extraction completed",
            extra={"transcript_length": len(transcript)},
        )
        return result
