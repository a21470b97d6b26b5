"""Azure AI Language implementation of the TextAnalyticsService interface."""

from collections.abc import Callable

from azure.ai.textanalytics import TextAnalyticsClient

from call_intelligence.domain.models import (
    EntitiesDocument,
    Entity,
    KeyPhrasesDocument,
    PiiDocument,
)
from call_intelligence.exceptions import TextAnalyticsError
from call_intelligence.infrastructure.interfaces import TextAnalyticsService
from call_intelligence.logging import setup_logging

logger = setup_logging()


class AzureTextAnalyticsService(TextAnalyticsService):
    """Runs key phrase, entity and PII recognition with Azure AI Language."""

    def __init__(
        self,
        client_factory: Callable[[], TextAnalyticsClient],
        language: str = "en",
    ):
        self._client_factory = client_factory
        self._client: TextAnalyticsClient | None = None
        self._language = language

    def extract_key_phrases(self, documents: list[str]) -> list[KeyPhrasesDocument]:
        results = self._call("extract_key_phrases", documents)
        return [self._to_key_phrases(r) for r in results]

    def recognize_entities(self, documents: list[str]) -> list[EntitiesDocument]:
        results = self._call("recognize_entities", documents)
        return [self._to_entities(r) for r in results]

    def recognize_pii_entities(self, documents: list[str]) -> list[PiiDocument]:
        results = self._call("recognize_pii_entities", documents)
        return [self._to_pii(r) for r in results]

    def _call(self, operation: str, documents: list[str]) -> list:
        """
        Invokes one batch operation on the SDK client.

        The client is created on first use.

        Raises:
            TextAnalyticsError: If the client cannot be created or the SDK
                call fails.
        """
        try:
            if self._client is None:
                self._client = self._client_factory()
            results = getattr(self._client, operation)(
                documents, language=self._language
            )
        except Exception as e:
            logger.exception(
                "Azure text analytics call failed", extra={"operation": operation}
            )
            raise TextAnalyticsError(operation, cause=e) from e

        logger.info(
            "Azure text analytics call completed",
            extra={"operation": operation, "document_count": len(documents)},
        )
        return list(results)

    @staticmethod
    def _to_key_phrases(result) -> KeyPhrasesDocument:
        if result.is_error:
            return KeyPhrasesDocument(id=result.id, error=_error_message(result))
        return KeyPhrasesDocument(id=result.id, key_phrases=list(result.key_phrases))

    @staticmethod
    def _to_entities(result) -> EntitiesDocument:
        if result.is_error:
            return EntitiesDocument(id=result.id, error=_error_message(result))
        entities = [
            Entity(text=e.text, category=e.category, confidence_score=e.confidence_score)
            for e in result.entities
        ]
        return EntitiesDocument(id=result.id, entities=entities)

    @staticmethod
    def _to_pii(result) -> PiiDocument:
        if result.is_error:
            return PiiDocument(id=result.id, error=_error_message(result))
        return PiiDocument(id=result.id, redacted_text=result.redacted_text or "")


def _error_message(result) -> str:
    """Returns the message of a DocumentError, falling back to its repr."""
    error = result.error
    return getattr(error, "message", None) or str(error)
