"""FastAPI dependencies for analytics feature."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends

from features.journal.dependencies import get_journal_store
from features.journal.repository import JournalStore

from .service import AnalyticsService

logger = logging.getLogger(__name__)

_analytics_service: Optional[AnalyticsService] = None
_attached_store: Optional[JournalStore] = None


def get_analytics_service(store: JournalStore = Depends(get_journal_store)) -> AnalyticsService:
    """Return the shared AnalyticsService, attached to the active journal store."""

    global _analytics_service, _attached_store
    if _analytics_service is None:
        _analytics_service = AnalyticsService()
    if _attached_store is not store:
        logger.debug("Attaching analytics to journal store")
        _analytics_service.attach(store)
        _attached_store = store
    return _analytics_service


def reset_analytics_service() -> None:
    global _analytics_service, _attached_store
    if _analytics_service is not None:
        _analytics_service.detach()
    _analytics_service = None
    _attached_store = None


__all__ = ["get_analytics_service", "reset_analytics_service"]
