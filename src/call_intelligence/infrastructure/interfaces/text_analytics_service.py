"""Abstract interface for text analytics operations."""

from abc import ABC, abstractmethod

from call_intelligence.domain.models import (
    EntitiesDocument,
    KeyPhrasesDocument,
    PiiDocument,
)


class TextAnalyticsService(ABC):
    """Abstract base class for text analytics backends."""

    @abstractmethod
    def extract_key_phrases(self, documents: list[str]) -> list[KeyPhrasesDocument]:
        """
        Extracts key phrases from each document.

        Args:
            documents: The batch of texts to analyze.

        Returns:
            One result per document, in input order. Failed documents carry
            an error message instead of phrases.

        Raises:
            TextAnalyticsError: If the whole request fails.
        """
        pass

    @abstractmethod
    def recognize_entities(self, documents: list[str]) -> list[EntitiesDocument]:
        """
        Recognizes general (non-PII) entities in each document.

        Raises:
            TextAnalyticsError: If the whole request fails.
        """
        pass

    @abstractmethod
    def recognize_pii_entities(self, documents: list[str]) -> list[PiiDocument]:
        """
        Recognizes PII in each document and returns the redacted text.

        Raises:
            TextAnalyticsError: If the whole request fails.
        """
        pass
