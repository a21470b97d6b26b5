"""Text analytics endpoints."""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from call_intelligence.dependencies import get_text_analyzer
from call_intelligence.domain import ExtractionResult, TextAnalyzer
from call_intelligence.exceptions import InvalidTranscriptError, TextAnalyticsError
from call_intelligence.logging import setup_logging
from call_intelligence.request_models import RawJsonBody, TranscriptRequest

logger = setup_logging()

router = APIRouter(tags=["text-analytics"])

TextAnalyzerDep = Annotated[TextAnalyzer, Depends(get_text_analyzer)]

PROVIDER_ERROR_DETAIL = (
    "Azure Text Analytics error. Check keys, endpoint, and API availability."
)


@router.get("/ta/sayhello", response_class=PlainTextResponse)
def say_hello() -> str:
    """Liveness greeting for the text analytics backend."""
    return f"Hello World from the Azure Language TA backend! {datetime.now().astimezone()}"


@router.post("/ta-key-phrases", response_model=ExtractionResult)
def extract_key_phrases(analyzer: TextAnalyzerDep, body: RawJsonBody = None):
    """Returns key phrases, confident entities and redacted PII for a transcript."""
    try:
        transcript = TranscriptRequest.from_body(body).require_text()
    except InvalidTranscriptError as e:
        raise HTTPException(status_code=400, detail=e.reason)

    try:
        return analyzer.analyze(transcript)
    except TextAnalyticsError as e:
        logger.error(f"Azure TA error: {e}", extra={"operation": e.operation})
        raise HTTPException(status_code=500, detail=PROVIDER_ERROR_DETAIL)
    except Exception as e:
        logger.exception(f"Azure TA error: {e}")
        raise HTTPException(status_code=500, detail=PROVIDER_ERROR_DETAIL)
