"""Pydantic schemas for the sentiment analysis contract."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import Field, field_serializer

from core.pydantic_schemas import CamelModel


class Sentiment(str, Enum):
    NEGATIVE = "negative"
    NEUTRAL = "neutral"
    POSITIVE = "positive"

    @property
    def rank(self) -> int:
        """Ordering used for comparisons: negative < neutral < positive."""

        return _SENTIMENT_RANK[self]


_SENTIMENT_RANK = {Sentiment.NEGATIVE: 0, Sentiment.NEUTRAL: 1, Sentiment.POSITIVE: 2}


class AnalyzeSentimentRequest(CamelModel):
    """Body of ``POST /api/analyze-sentiment``; ``text`` is validated by the service."""

    text: Optional[str] = None
    user_mood_rating: Optional[float] = Field(default=None, allow_inf_nan=False)
    is_chat: bool = False


class SentimentAnalysis(CamelModel):
    """Structured analysis of one journal entry."""

    sentiment: Sentiment = Field(description="Overall sentiment of the text")
    confidence: float = Field(ge=0, le=1, description="Confidence score between 0 and 1")
    emotions: List[str] = Field(default_factory=list, description="Detected emotions such as joy or calm")
    mood_score: float = Field(ge=1, le=10, description="Mood score from 1-10 derived from text and rating")
    key_phrases: List[str] = Field(default_factory=list, description="Phrases that influenced the result")
    insights: str = Field(default="", description="Brief observation about the emotional state")
    recommendations: List[str] = Field(default_factory=list, description="Wellness recommendations")
    is_demo: Optional[bool] = Field(default=None, description="True when produced by the keyword heuristic")
    error: Optional[str] = Field(default=None, description="Non-fatal note explaining a fallback")

    @field_serializer("mood_score")
    def _serialize_mood_score(self, value: float) -> int | float:
        # Whole scores go out as integers (6, not 6.0)
        return int(value) if float(value).is_integer() else value


class ChatReply(CamelModel):
    """Companion reply for chat mode."""

    chat_response: str
    is_demo: Optional[bool] = None


__all__ = ["AnalyzeSentimentRequest", "ChatReply", "Sentiment", "SentimentAnalysis"]
