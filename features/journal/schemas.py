"""Pydantic schemas for journal feature."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, List, Literal, Optional

from pydantic import Field, field_serializer, field_validator, model_validator

from core.pydantic_schemas import CamelModel
from features.sentiment.schemas import Sentiment, SentimentAnalysis

MAX_CONTENT_LENGTH = 1000

MOOD_LABELS = {
    1: "Terrible",
    2: "Very Bad",
    3: "Bad",
    4: "Poor",
    5: "Okay",
    6: "Good",
    7: "Great",
    8: "Very Good",
    9: "Excellent",
    10: "Amazing",
}

_ANALYSIS_WIRE_KEYS = ("moodScore", "confidence", "keyPhrases", "insights", "recommendations", "isDemo")


class EntryAnalysis(CamelModel):
    """AI (or demo heuristic) analysis attached to an entry."""

    mood_score: float = Field(ge=1, le=10)
    confidence: float = Field(ge=0, le=1)
    key_phrases: List[str] = Field(default_factory=list)
    insights: str = ""
    recommendations: List[str] = Field(default_factory=list)
    is_demo: bool = False

    @field_serializer("mood_score")
    def _serialize_mood_score(self, value: float) -> int | float:
        return int(value) if float(value).is_integer() else value

    @classmethod
    def from_result(cls, result: SentimentAnalysis) -> "EntryAnalysis":
        return cls(
            mood_score=result.mood_score,
            confidence=result.confidence,
            key_phrases=list(result.key_phrases),
            insights=result.insights,
            recommendations=list(result.recommendations),
            is_demo=bool(result.is_demo),
        )


class JournalEntry(CamelModel):
    """Single journal entry.

    ``analysis`` is absent when sentiment analysis failed; the stored JSON
    flattens its fields onto the entry (``moodScore``, ``keyPhrases``...).
    """

    id: int
    date: datetime
    mood: int = Field(ge=1, le=10)
    content: str
    sentiment: Sentiment = Sentiment.NEUTRAL
    emotions: List[str] = Field(default_factory=list)
    analysis: Optional[EntryAnalysis] = None

    @model_validator(mode="before")
    @classmethod
    def _nest_flat_analysis(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "analysis" in data or data.get("moodScore") is None:
            return data
        nested = dict(data)
        nested["analysis"] = {key: nested.pop(key) for key in _ANALYSIS_WIRE_KEYS if key in nested}
        return nested

    @field_validator("date")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # Entries imported from older data may carry naive timestamps
        return value.replace(tzinfo=UTC) if value.tzinfo is None else value

    @property
    def mood_score(self) -> Optional[float]:
        return self.analysis.mood_score if self.analysis else None

    def to_wire(self, **kwargs: Any) -> dict[str, Any]:
        payload = self.model_dump(mode="json", by_alias=True, exclude={"analysis"}, **kwargs)
        if self.analysis is not None:
            payload.update(self.analysis.to_wire())
        return payload


class ChatMessage(CamelModel):
    """One message of the companion chat history."""

    id: str
    type: Literal["user", "ai"]
    content: str
    timestamp: datetime

    @field_validator("timestamp")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        return value.replace(tzinfo=UTC) if value.tzinfo is None else value


class CreateEntryRequest(CamelModel):
    """Request to save a journal entry."""

    content: str = Field(min_length=1, max_length=MAX_CONTENT_LENGTH)
    mood: int = Field(ge=1, le=10)


class ChatMessageRequest(CamelModel):
    """Request to send a message to the companion."""

    message: str = Field(min_length=1, max_length=MAX_CONTENT_LENGTH)


class ChatExchange(CamelModel):
    """User message plus the companion's reply."""

    user_message: ChatMessage
    reply: ChatMessage
    is_demo: bool = False


__all__ = [
    "MAX_CONTENT_LENGTH",
    "MOOD_LABELS",
    "ChatExchange",
    "ChatMessage",
    "ChatMessageRequest",
    "CreateEntryRequest",
    "EntryAnalysis",
    "JournalEntry",
]
