"""Abstract interface for chat completion operations."""

from abc import ABC, abstractmethod

from call_intelligence.domain.models import ChatMessage, CompletionParameters


class ChatCompletionService(ABC):
    """Abstract base class for chat completion backends."""

    @abstractmethod
    def complete(
        self, messages: list[ChatMessage], parameters: CompletionParameters
    ) -> ChatMessage:
        """
        Sends a message list to the model and returns the first candidate.

        Args:
            messages: Conversation to complete, system message first.
            parameters: Sampling parameters and response length cap.

        Returns:
            The assistant message of the first returned choice.

        Raises:
            LLMServiceError: If the completion call fails.
        """
        pass
