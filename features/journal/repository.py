"""Repository for journal entries and chat history kept in key-value storage."""

from __future__ import annotations

import logging
import threading
from datetime import UTC, datetime
from typing import Callable, List, Literal, Optional, Sequence

from pydantic import ValidationError as PydanticValidationError

from config.storage import CHAT_HISTORY_KEY, ENTRIES_KEY
from core.exceptions import StorageError
from features.sentiment.schemas import Sentiment
from infrastructure.storage import KeyValueStorage

from .schemas import ChatMessage, EntryAnalysis, JournalEntry

logger = logging.getLogger(__name__)

EntryListener = Callable[[List[JournalEntry]], None]
Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _next_id(now: datetime, existing: Sequence[int]) -> int:
    """Millisecond timestamp, bumped past the largest existing id when needed."""

    candidate = int(now.timestamp() * 1000)
    if existing:
        candidate = max(candidate, max(existing) + 1)
    return candidate


class JournalStore:
    """Entry list (most-recent-first) and chat history (append order).

    Every entry mutation is published to subscribers with the full, fresh
    entry list so they can re-derive their views.
    """

    def __init__(self, storage: KeyValueStorage, *, clock: Clock | None = None) -> None:
        self._storage = storage
        self._clock = clock or _utc_now
        self._lock = threading.RLock()
        self._listeners: list[EntryListener] = []

    # Subscriptions ---------------------------------------------------------

    def subscribe(self, listener: EntryListener) -> Callable[[], None]:
        """Register ``listener``; the returned callable unsubscribes it."""

        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, entries: List[JournalEntry]) -> None:
        for listener in list(self._listeners):
            try:
                listener(list(entries))
            except Exception:
                logger.exception("Entry listener %r failed", listener)

    # Entries ---------------------------------------------------------------

    def list_entries(self, limit: Optional[int] = None) -> List[JournalEntry]:
        """Return entries, most recent first."""

        raw = self._storage.load(ENTRIES_KEY)
        if raw is None:
            return []
        if not isinstance(raw, list):
            raise StorageError(f"'{ENTRIES_KEY}' does not hold a list", operation="load")

        entries: List[JournalEntry] = []
        for item in raw:
            try:
                entries.append(JournalEntry.model_validate(item))
            except PydanticValidationError as exc:
                logger.warning("Skipping unreadable journal entry (%d errors)", exc.error_count())
        return entries[:limit] if limit is not None else entries

    def add_entry(
        self,
        *,
        content: str,
        mood: int,
        sentiment: Sentiment,
        emotions: Sequence[str],
        analysis: Optional[EntryAnalysis] = None,
    ) -> JournalEntry:
        """Create an entry, prepend it and notify subscribers."""

        with self._lock:
            entries = self.list_entries()
            entry = JournalEntry(
                id=_next_id(self._clock(), [item.id for item in entries]),
                date=self._clock(),
                mood=mood,
                content=content,
                sentiment=sentiment,
                emotions=list(emotions),
                analysis=analysis,
            )
            entries.insert(0, entry)
            self._storage.save(ENTRIES_KEY, [item.to_wire() for item in entries])
            logger.info("Saved journal entry %s (total=%d)", entry.id, len(entries))
            self._publish(entries)
        return entry

    def clear_entries(self) -> None:
        """Delete every entry and notify subscribers."""

        with self._lock:
            self._storage.delete(ENTRIES_KEY)
            logger.info("Cleared all journal entries")
            self._publish([])

    # Chat history ----------------------------------------------------------

    def list_chat_messages(self) -> List[ChatMessage]:
        """Return chat history in the order it was written."""

        raw = self._storage.load(CHAT_HISTORY_KEY)
        if raw is None:
            return []
        if not isinstance(raw, list):
            raise StorageError(f"'{CHAT_HISTORY_KEY}' does not hold a list", operation="load")

        messages: List[ChatMessage] = []
        for item in raw:
            try:
                messages.append(ChatMessage.model_validate(item))
            except PydanticValidationError as exc:
                logger.warning("Skipping unreadable chat message (%d errors)", exc.error_count())
        return messages

    def append_chat_message(self, message_type: Literal["user", "ai"], content: str) -> ChatMessage:
        with self._lock:
            messages = self.list_chat_messages()
            now = self._clock()
            message = ChatMessage(
                id=str(_next_id(now, [int(item.id) for item in messages if item.id.isdigit()])),
                type=message_type,
                content=content,
                timestamp=now,
            )
            messages.append(message)
            self._storage.save(CHAT_HISTORY_KEY, [item.to_wire() for item in messages])
        return message

    def clear_chat_history(self) -> None:
        with self._lock:
            self._storage.delete(CHAT_HISTORY_KEY)
            logger.info("Cleared chat history")


__all__ = ["EntryListener", "JournalStore"]
