"""Request bodies accepted by the HTTP API."""

from typing import Annotated, Any

from fastapi import Body
from pydantic import BaseModel, ConfigDict, Field

from call_intelligence.exceptions import InvalidTranscriptError

MISSING_TRANSCRIPT = "Invalid or missing transcript"

RawJsonBody = Annotated[Any, Body()]


class TranscriptRequest(BaseModel):
    """
    Body carrying a transcript.

    The field accepts any JSON value so routes can answer malformed input
    with a 400 instead of FastAPI's default 422.
    """

    transcript: Any = None

    @classmethod
    def from_body(cls, body: Any):
        """
        Builds the request from a raw JSON body.

        An absent body, or one that is not a JSON object, carries no fields
        and so reads as a request without a transcript.
        """
        if not isinstance(body, dict):
            body = {}
        return cls.model_validate(body)

    def require_transcript(self) -> Any:
        """
        Returns the transcript value as sent.

        Raises:
            InvalidTranscriptError: If the transcript is absent or null.
        """
        if self.transcript is None:
            raise InvalidTranscriptError(MISSING_TRANSCRIPT)
        return self.transcript

    def require_text(self) -> str:
        """
        Returns the transcript as a non-empty string.

        Raises:
            InvalidTranscriptError: If the transcript is absent, empty or not a string.
        """
        if not self.transcript or not isinstance(self.transcript, str):
            raise InvalidTranscriptError(MISSING_TRANSCRIPT)
        return self.transcript


class CustomPromptRequest(TranscriptRequest):
    """Transcript plus a caller-written instruction."""

    model_config = ConfigDict(populate_by_name=True)

    custom_prompt: Any = Field(default=None, alias="customPrompt")

    def instruction(self) -> str | None:
        """
        Returns the instruction, or None when the caller sent none.

        Raises:
            InvalidTranscriptError: If the instruction is present but not a string.
        """
        if self.custom_prompt is not None and not isinstance(self.custom_prompt, str):
            raise InvalidTranscriptError("customPrompt must be a string")
        return self.custom_prompt
