"""Folds per-document text analytics results into labeled strings."""

from call_intelligence.domain.models import (
    EntitiesDocument,
    ExtractionResult,
    KeyPhrasesDocument,
    PiiDocument,
)
from call_intelligence.logging import setup_logging

logger = setup_logging()

KEY_PHRASES_LABEL = "KEY PHRASES: "
ENTITIES_LABEL = "ENTITIES: "
PII_LABEL = "PII (Redacted): "

ENTITY_CONFIDENCE_THRESHOLD = 0.5
REDACTION_MARKER = "*"


class ExtractionAggregator:
    """
    Builds the key phrase, entity and PII strings returned to callers.

    Documents flagged with an error are dropped before accumulation, so a
    failed document and a document with no findings produce the same output.
    """

    def aggregate(
        self,
        key_phrase_docs: list[KeyPhrasesDocument],
        entity_docs: list[EntitiesDocument],
        pii_docs: list[PiiDocument],
    ) -> ExtractionResult:
        """
        Aggregates the three provider responses into one result.

        Args:
            key_phrase_docs: Key phrase extraction results per document.
            entity_docs: Entity recognition results per document.
            pii_docs: PII recognition results per document.

        Returns:
            ExtractionResult with each field trimmed.
        """
        return ExtractionResult(
            key_phrases_extracted=self.key_phrases(key_phrase_docs),
            entity_extracted=self.entities(entity_docs),
            pii_extracted=self.pii(pii_docs),
        )

    def key_phrases(self, docs: list[KeyPhrasesDocument]) -> str:
        """Joins every phrase of every successful document."""
        text = KEY_PHRASES_LABEL
        for doc in self._successful(docs):
            text += ", ".join(doc.key_phrases) + " "
        return text.strip()

    def entities(self, docs: list[EntitiesDocument]) -> str:
        """Lists entities scored strictly above the confidence threshold."""
        text = ENTITIES_LABEL
        for doc in self._successful(docs):
            for entity in doc.entities:
                if entity.confidence_score > ENTITY_CONFIDENCE_THRESHOLD:
                    text += f"{entity.category}: {entity.text} | "
        return text.strip()

    def pii(self, docs: list[PiiDocument]) -> str:
        """Includes redacted text only where something was actually masked."""
        text = PII_LABEL
        for doc in self._successful(docs):
            if REDACTION_MARKER in doc.redacted_text:
                text += doc.redacted_text
        return text.strip()

    def _successful(self, docs):
        for doc in docs:
            if doc.error is not None:
                logger.debug(
                    "Skipping document with provider error",
                    extra={"document_id": doc.id, "error": doc.error},
                )
                continue
            yield doc
