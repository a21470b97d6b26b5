"""Azure OpenAI implementation of the ChatCompletionService interface."""

from collections.abc import Callable

from openai import AzureOpenAI

from call_intelligence.domain.models import ChatMessage, CompletionParameters
from call_intelligence.exceptions import LLMServiceError
from call_intelligence.infrastructure.interfaces import ChatCompletionService
from call_intelligence.logging import setup_logging

logger = setup_logging()


class AzureOpenAIChatService(ChatCompletionService):
    """Chat completion service backed by an Azure OpenAI deployment."""

    def __init__(
        self, client_factory: Callable[[], AzureOpenAI], deployment_name: str
    ):
        self._client_factory = client_factory
        self._client: AzureOpenAI | None = None
        self._deployment_name = deployment_name

    def complete(
        self, messages: list[ChatMessage], parameters: CompletionParameters
    ) -> ChatMessage:
        """
        Requests a chat completion from the configured deployment.

        Args:
            messages: Conversation to complete.
            parameters: Sampling parameters and response cap.

        Returns:
            The first choice's message.

        Raises:
            LLMServiceError: If the client cannot be created, or the API call
                fails or returns no choices.
        """
        try:
            if self._client is None:
                self._client = self._client_factory()
            response = self._client.chat.completions.create(
                model=self._deployment_name,
                messages=[m.model_dump() for m in messages],
                **parameters.model_dump(),
            )
        except Exception as e:
            logger.exception(
                "Azure OpenAI call failed",
                extra={"deployment": self._deployment_name},
            )
            raise LLMServiceError(str(e), cause=e) from e

        if not response.choices:
            logger.error(
                "Azure OpenAI returned no choices",
                extra={"deployment": self._deployment_name},
            )
            raise LLMServiceError("Azure OpenAI returned no choices")

        message = response.choices[0].message
        logger.info(
            "Chat completion received",
            extra={
                "deployment": self._deployment_name,
                "max_tokens": parameters.max_tokens,
            },
        )
        return ChatMessage(role=message.role, content=message.content)
