"""FastAPI dependencies for the sentiment feature."""

from __future__ import annotations

import logging
from typing import Optional

from core.clients.ai import get_openai_async_client
from core.config import get_settings
from core.providers.text import OpenAITextProvider

from .service import SentimentService

logger = logging.getLogger(__name__)

_sentiment_service: Optional[SentimentService] = None


def build_sentiment_service() -> SentimentService:
    """Create a service backed by OpenAI when a key is configured, otherwise demo mode."""

    settings = get_settings()
    client = get_openai_async_client(api_key=settings.openai_api_key, timeout=settings.request_timeout)
    if client is None:
        logger.info("OPENAI_API_KEY not set; sentiment analysis runs in demo mode")
        return SentimentService()

    logger.info("Sentiment analysis uses OpenAI model %s", settings.sentiment_model)
    return SentimentService(OpenAITextProvider(client, model=settings.sentiment_model))


def get_sentiment_service() -> SentimentService:
    """Provide the cached SentimentService dependency."""

    global _sentiment_service
    if _sentiment_service is None:
        _sentiment_service = build_sentiment_service()
    return _sentiment_service


def reset_sentiment_service() -> None:
    global _sentiment_service
    _sentiment_service = None


__all__ = ["build_sentiment_service", "get_sentiment_service", "reset_sentiment_service"]
