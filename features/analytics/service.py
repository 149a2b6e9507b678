"""Dashboard state kept in step with the journal store."""

from __future__ import annotations

import logging
import threading
from datetime import UTC, datetime
from typing import Callable, List, Optional, Sequence

from features.journal.repository import JournalStore
from features.journal.schemas import JournalEntry

from .aggregations import build_dashboard, mood_calendar
from .schemas import DashboardSnapshot, MoodCalendar

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class AnalyticsService:
    """Subscribes to a :class:`JournalStore` and caches the derived dashboard.

    The snapshot is rebuilt on every entry change the store publishes and
    again when the calendar date moves on, since streak, today's mood and the
    consistency insight depend on the current date.
    """

    def __init__(self, *, clock: Clock | None = None) -> None:
        self._clock = clock or (lambda: datetime.now(UTC))
        self._lock = threading.Lock()
        self._entries: List[JournalEntry] = []
        self._snapshot: Optional[DashboardSnapshot] = None
        self._unsubscribe: Optional[Callable[[], None]] = None

    def attach(self, store: JournalStore) -> None:
        """Load the current entries from ``store`` and follow its changes."""

        self.detach()
        self.refresh(store.list_entries())
        self._unsubscribe = store.subscribe(self.refresh)

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def refresh(self, entries: Sequence[JournalEntry]) -> DashboardSnapshot:
        with self._lock:
            self._entries = list(entries)
            self._snapshot = build_dashboard(self._entries, self._clock())
            logger.debug("Dashboard recomputed for %d entries", len(self._entries))
            return self._snapshot

    def snapshot(self) -> DashboardSnapshot:
        current = self._snapshot
        if current is None or current.generated_at.date() != self._clock().date():
            return self.refresh(self._entries)
        return current

    def calendar(self, year: int, month: int) -> MoodCalendar:
        return mood_calendar(self._entries, year, month)

    def today(self) -> datetime:
        return self._clock()


__all__ = ["AnalyticsService"]
