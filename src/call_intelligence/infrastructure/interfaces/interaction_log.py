"""Abstract interface for recording prompt interactions."""

from abc import ABC, abstractmethod
from typing import Any


class InteractionLog(ABC):
    """Abstract base class for append-only interaction logs."""

    @abstractmethod
    def record(
        self,
        transcript: Any,
        instruction: str | None,
        result: Any,
        client_address: str | None,
    ) -> None:
        """
        Appends one interaction. Implementations must not raise.

        Args:
            transcript: The transcript exactly as received.
            instruction: The caller's instruction, if any.
            result: The model message, or the error that replaced it.
            client_address: Address of the calling client.
        """
        pass
