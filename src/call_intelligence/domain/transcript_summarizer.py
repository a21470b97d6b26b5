"""Prompt assembly and summarization of call transcripts."""

import json
from typing import Any

from call_intelligence.config import OpenAIConfig, SummarizationConfig
from call_intelligence.domain.models import ChatMessage, CompletionParameters
from call_intelligence.domain.truncation import truncate_text
from call_intelligence.exceptions import LLMServiceError
from call_intelligence.infrastructure.interfaces import ChatCompletionService
from call_intelligence.logging import setup_logging

logger = setup_logging()

SYSTEM_PROMPT = "You are a helpful assistant summarizing telecom support calls."
PRE_SUMMARY_SYSTEM_PROMPT = "You are a summarizer for telecom support calls."
PRE_SUMMARY_INSTRUCTION = (
    "Summarize the key parts of this telecom support call, "
    "naming agent and customer if possible."
)
TLDR_INSTRUCTION = "Tl;dr"


def serialize_transcript(transcript: Any) -> str:
    """Renders the request's transcript value as compact JSON text."""
    return json.dumps(transcript, ensure_ascii=False, separators=(",", ":"))


def build_prompt(transcript: str, instruction: str) -> str:
    """Joins transcript and instruction with a blank line."""
    return transcript + "\n\n" + instruction


class TranscriptSummarizer:
    """
    Produces chat completions for call transcripts.

    Transcripts are serialized to JSON text and truncated to a character
    budget before being sent. For custom prompts a truncated transcript is
    compressed first: the kept prefix is summarized by a separate call and
    the summary replaces it, followed by the rest of the transcript.
    """

    def __init__(
        self,
        chat_service: ChatCompletionService,
        openai_config: OpenAIConfig,
        summarization_config: SummarizationConfig,
    ):
        self._chat = chat_service
        self._openai = openai_config
        self._budgets = summarization_config

    def custom_prompt(self, transcript: Any, instruction: str | None) -> ChatMessage:
        """
        Answers a caller-supplied instruction about a transcript.

        Args:
            transcript: Transcript value from the request body.
            instruction: Free-text instruction; the configured telecom
                prompt is used when it is missing or blank.

        Returns:
            The model's message.

        Raises:
            LLMServiceError: If the main completion call fails.
        """
        text = serialize_transcript(transcript)
        processed = self.compress(text, self._budgets.custom_prompt_max_length)

        if not instruction or not instruction.strip():
            instruction = self._openai.telecom_prompt

        return self._chat.complete(
            self._messages(SYSTEM_PROMPT, build_prompt(processed, instruction)),
            self._parameters(self._budgets.custom_prompt_max_tokens),
        )

    def summarize(self, transcript: Any) -> ChatMessage:
        """
        Produces a short summary of a transcript.

        Raises:
            LLMServiceError: If the completion call fails.
        """
        text = serialize_transcript(transcript)
        truncated = truncate_text(text, self._openai.max_tokens)

        return self._chat.complete(
            self._messages(SYSTEM_PROMPT, build_prompt(truncated, TLDR_INSTRUCTION)),
            self._parameters(self._openai.max_tokens),
        )

    def compress(self, text: str, max_length: int) -> str:
        """
        Truncates text, replacing a shortened prefix with its summary.

        The summary is followed by everything after the kept prefix. The
        truncated text is always a prefix of ``text``, so slicing at its
        length neither repeats nor drops characters at the join.
        """
        truncated = truncate_text(text, max_length)
        if len(truncated) >= len(text):
            return truncated

        summary = self.pre_summarize(truncated)
        logger.info(
            "Transcript truncated and pre-summarized",
            extra={
                "original_length": len(text),
                "truncated_length": len(truncated),
                "summary_length": len(summary),
            },
        )
        return summary + text[len(truncated):]

    def pre_summarize(self, text: str) -> str:
        """Summarizes a transcript fragment. Returns an empty string on failure."""
        prompt = build_prompt(serialize_transcript(text), PRE_SUMMARY_INSTRUCTION)
        try:
            message = self._chat.complete(
                self._messages(PRE_SUMMARY_SYSTEM_PROMPT, prompt),
                self._parameters(self._budgets.pre_summary_max_tokens),
            )
        except LLMServiceError as e:
            logger.warning(
                "Pre-summary failed, continuing without it", extra={"error": str(e)}
            )
            return ""
        return (message.content or "").strip()

    def _messages(self, system_prompt: str, user_prompt: str) -> list[ChatMessage]:
        return [
            ChatMessage(role="system", content=system_prompt),
            ChatMessage(role="user", content=user_prompt),
        ]

    def _parameters(self, max_tokens: int) -> CompletionParameters:
        return CompletionParameters(
            max_tokens=max_tokens,
            temperature=self._openai.temperature,
            top_p=self._openai.top_p,
            frequency_penalty=self._openai.frequency_penalty,
            presence_penalty=self._openai.presence_penalty,
        )
