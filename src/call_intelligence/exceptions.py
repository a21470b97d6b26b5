"""Custom exceptions for the call intelligence service."""

from pathlib import Path


class InvalidTranscriptError(Exception):
    """Raised when a request does not carry a usable transcript."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class TextAnalyticsError(Exception):
    """Raised when a text analytics provider call fails."""

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        self.cause = cause
        super().__init__(f"Text analytics operation '{operation}' failed")


class LLMServiceError(Exception):
    """Raised when a chat completion call fails."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class InteractionLogError(Exception):
    """Raised when the interaction log cannot be opened for appending."""

    def __init__(self, path: Path, cause: Exception | None = None):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to open interaction log '{path}'")
