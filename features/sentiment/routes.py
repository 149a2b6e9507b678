"""HTTP endpoint for sentiment analysis and chat replies.

The response body follows the browser client's contract directly (no API
envelope): the analysis object, ``{"chatResponse": ...}``, or ``{"error": ...}``.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from core.exceptions import ValidationError

from .dependencies import get_sentiment_service
from .schemas import AnalyzeSentimentRequest
from .service import SentimentService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["sentiment"])

ANALYSIS_FAILED_MESSAGE = "Failed to analyze sentiment"
INVALID_BODY_MESSAGE = "Invalid request body"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post("/api/analyze-sentiment")
async def analyze_sentiment(
    request: Request,
    service: SentimentService = Depends(get_sentiment_service),
) -> JSONResponse:
    """Analyze journal text, or produce a companion reply when ``isChat`` is set."""

    try:
        payload = await request.json()
        body = AnalyzeSentimentRequest.model_validate(payload)
    except ValueError as exc:
        # Covers undecodable JSON and pydantic validation failures alike
        if isinstance(exc, PydanticValidationError):
            logger.info("Rejected analyze-sentiment body with %d validation errors", exc.error_count())
        else:
            logger.info("Rejected analyze-sentiment body that is not valid JSON")
        return _error(status.HTTP_400_BAD_REQUEST, INVALID_BODY_MESSAGE)

    try:
        result = await service.handle(body)
    except ValidationError as exc:
        return _error(status.HTTP_400_BAD_REQUEST, exc.message)
    except Exception:
        logger.exception("Sentiment analysis failed")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, ANALYSIS_FAILED_MESSAGE)

    return JSONResponse(content=result.to_wire(exclude_none=True))


__all__ = ["router"]
