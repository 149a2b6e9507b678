"""Service layer for journal feature."""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Sequence

from core.exceptions import ValidationError
from features.sentiment.schemas import Sentiment
from features.sentiment.service import SentimentService

from .repository import JournalStore
from .schemas import MOOD_LABELS, ChatExchange, ChatMessage, EntryAnalysis, JournalEntry

logger = logging.getLogger(__name__)

# Used when analysis failed outright
FALLBACK_SENTIMENT = Sentiment.NEUTRAL
FALLBACK_EMOTIONS = ("reflective",)

CHAT_CONTEXT_ENTRIES = 3
CHAT_CONTEXT_CHARS = 200
DEFAULT_CHAT_REPLY = "I'm here to help you process your thoughts and emotions. How are you feeling today?"


def build_chat_context(entries: Sequence[JournalEntry]) -> str:
    """Summarise the most recent entries for the companion prompt."""

    lines = []
    for entry in entries[:CHAT_CONTEXT_ENTRIES]:
        day = entry.date
        lines.append(
            f"Date: {day.month}/{day.day}/{day.year}, Mood: {entry.mood}/10, "
            f"Content: {entry.content[:CHAT_CONTEXT_CHARS]}..."
        )
    return "\n".join(lines)


def build_analysis_summary(entry: JournalEntry) -> Optional[str]:
    """Chat message announcing an entry's analysis, or ``None`` without insights."""

    if entry.analysis is None or not entry.analysis.insights:
        return None
    label = MOOD_LABELS.get(entry.mood, "okay").lower()
    return (
        f"I've analyzed your journal entry. Here's what I noticed: {entry.analysis.insights} "
        f"Your mood score of {entry.mood}/10 suggests you're feeling {label}. "
        "Would you like to talk about anything specific?"
    )


class JournalService:
    """Business logic for saving entries and talking to the companion.

    Store access is blocking, so the async workflows run it in a worker thread.
    """

    def __init__(self, store: JournalStore, sentiment: SentimentService) -> None:
        self._store = store
        self._sentiment = sentiment

    def list_entries(self, limit: Optional[int] = None) -> List[JournalEntry]:
        return self._store.list_entries(limit)

    def list_chat_messages(self) -> List[ChatMessage]:
        return self._store.list_chat_messages()

    async def save_entry(self, content: str, mood: int) -> JournalEntry:
        """Analyze and store a new entry.

        Saving never fails because of analysis: if the sentiment service raises,
        the entry is stored as neutral without an analysis attachment.
        """

        if not content or not content.strip():
            raise ValidationError("Entry content is required", field="content")

        analysis: Optional[EntryAnalysis] = None
        sentiment = FALLBACK_SENTIMENT
        emotions: Sequence[str] = FALLBACK_EMOTIONS
        try:
            result = await self._sentiment.analyze(content, mood)
        except Exception:
            logger.exception("Sentiment analysis raised; saving entry without analysis")
        else:
            analysis = EntryAnalysis.from_result(result)
            sentiment = result.sentiment
            emotions = result.emotions

        entry = await asyncio.to_thread(
            self._store.add_entry,
            content=content,
            mood=mood,
            sentiment=sentiment,
            emotions=emotions,
            analysis=analysis,
        )

        summary = build_analysis_summary(entry)
        if summary:
            await asyncio.to_thread(self._store.append_chat_message, "ai", summary)
        return entry

    async def send_chat_message(self, message: str) -> ChatExchange:
        """Store the user's message, ask the companion and store its reply."""

        if not message or not message.strip():
            raise ValidationError("Message is required", field="message")

        user_message = await asyncio.to_thread(self._store.append_chat_message, "user", message)
        recent = await asyncio.to_thread(self._store.list_entries, CHAT_CONTEXT_ENTRIES)
        context = build_chat_context(recent)
        prompt = f"User question: {message}\n\nRecent journal context:\n{context}"

        reply = await self._sentiment.chat(prompt)
        content = reply.chat_response or DEFAULT_CHAT_REPLY
        ai_message = await asyncio.to_thread(self._store.append_chat_message, "ai", content)
        return ChatExchange(user_message=user_message, reply=ai_message, is_demo=bool(reply.is_demo))


__all__ = [
    "DEFAULT_CHAT_REPLY",
    "JournalService",
    "build_analysis_summary",
    "build_chat_context",
]
