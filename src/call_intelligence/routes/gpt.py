"""Chat completion summarization endpoints."""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse

from call_intelligence.dependencies import get_interaction_log, get_summarizer
from call_intelligence.domain import ChatMessage, TranscriptSummarizer
from call_intelligence.exceptions import InvalidTranscriptError, LLMServiceError
from call_intelligence.infrastructure.interfaces import InteractionLog
from call_intelligence.logging import setup_logging
from call_intelligence.request_models import (
    CustomPromptRequest,
    RawJsonBody,
    TranscriptRequest,
)

logger = setup_logging()

router = APIRouter(prefix="/gpt", tags=["gpt"])

SummarizerDep = Annotated[TranscriptSummarizer, Depends(get_summarizer)]
InteractionLogDep = Annotated[InteractionLog, Depends(get_interaction_log)]


@router.get("/sayhello", response_class=PlainTextResponse)
def say_hello() -> str:
    """Liveness greeting for the GPT backend."""
    return f"Hello from the Azure GPT-4o Mini backend! {datetime.now().astimezone()}"


@router.post("/customPrompt", response_model=ChatMessage)
def custom_prompt(
    request: Request,
    summarizer: SummarizerDep,
    interaction_log: InteractionLogDep,
    body: RawJsonBody = None,
):
    """
    Runs a caller-written instruction against a transcript.

    Long transcripts are truncated and their opening is pre-summarized.
    Every interaction, successful or not, is appended to the interaction log.
    """
    try:
        prompt_request = CustomPromptRequest.from_body(body)
        transcript = prompt_request.require_transcript()
        instruction = prompt_request.instruction()
    except InvalidTranscriptError as e:
        raise HTTPException(status_code=400, detail=e.reason)

    client_address = request.client.host if request.client else None

    try:
        message = summarizer.custom_prompt(transcript, instruction)
    except LLMServiceError as e:
        logger.error(f"OpenAI error: {e}")
        interaction_log.record(transcript, instruction, e, client_address)
        raise HTTPException(status_code=502, detail=str(e))
    except Exception as e:
        logger.exception(f"Custom prompt failed: {e}")
        interaction_log.record(transcript, instruction, e, client_address)
        raise HTTPException(status_code=500, detail="Internal server error")

    interaction_log.record(transcript, instruction, message, client_address)
    return message


@router.post("/summarize", response_model=ChatMessage)
def summarize(summarizer: SummarizerDep, body: RawJsonBody = None):
    """Returns a tl;dr summary of a transcript."""
    try:
        transcript = TranscriptRequest.from_body(body).require_transcript()
    except InvalidTranscriptError as e:
        raise HTTPException(status_code=400, detail=e.reason)

    try:
        return summarizer.summarize(transcript)
    except LLMServiceError as e:
        logger.error(f"Summarization error: {e}")
        raise HTTPException(status_code=502, detail=str(e))
    except Exception as e:
        logger.exception(f"Summarization failed: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")
