"""FastAPI dependencies for journal feature."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends

from features.sentiment.dependencies import get_sentiment_service
from features.sentiment.service import SentimentService
from infrastructure.storage import get_storage

from .repository import JournalStore
from .service import JournalService

logger = logging.getLogger(__name__)

_journal_store: Optional[JournalStore] = None


def get_journal_store() -> JournalStore:
    """Return the process-wide JournalStore; subscribers register on this instance."""

    global _journal_store
    if _journal_store is None:
        logger.debug("Initialising journal store")
        _journal_store = JournalStore(get_storage())
    return _journal_store


def get_journal_service(
    store: JournalStore = Depends(get_journal_store),
    sentiment: SentimentService = Depends(get_sentiment_service),
) -> JournalService:
    """Provide JournalService dependency."""
    return JournalService(store, sentiment)


def reset_journal_store() -> None:
    global _journal_store
    _journal_store = None


__all__ = ["get_journal_service", "get_journal_store", "reset_journal_store"]
