"""Deterministic keyword heuristic used when no language model is available.

The word lists, emotion sets and constants below define demo-mode output and
must stay stable: clients and tests depend on reproducible results.
"""

from __future__ import annotations

import random
from typing import Sequence

from .schemas import ChatReply, Sentiment, SentimentAnalysis

POSITIVE_WORDS: tuple[str, ...] = (
    "happy",
    "good",
    "great",
    "amazing",
    "wonderful",
    "excited",
    "joy",
    "love",
    "peaceful",
)
NEGATIVE_WORDS: tuple[str, ...] = (
    "sad",
    "bad",
    "terrible",
    "awful",
    "angry",
    "frustrated",
    "stressed",
    "worried",
    "anxious",
)

EMOTIONS_BY_SENTIMENT: dict[Sentiment, tuple[str, ...]] = {
    Sentiment.POSITIVE: ("content", "optimistic", "peaceful"),
    Sentiment.NEGATIVE: ("concerned", "thoughtful", "processing"),
    Sentiment.NEUTRAL: ("calm", "reflective"),
}

FALLBACK_CONFIDENCE = 0.75
DEFAULT_MOOD_RATING = 5
KEY_PHRASE_COUNT = 3

DEFAULT_RECOMMENDATIONS: tuple[str, ...] = (
    "Take a few deep breaths and practice mindfulness",
    "Consider journaling about what's on your mind",
    "Remember to be kind to yourself during this time",
)

CANNED_CHAT_RESPONSES: tuple[str, ...] = (
    "Thank you for sharing that with me. It sounds like you're processing some important feelings. "
    "How are you taking care of yourself today?",
    "I hear you, and your feelings are completely valid. Sometimes it helps to take things one moment "
    "at a time. What's one small thing that might bring you comfort right now?",
    "It's really meaningful that you're taking time to reflect on your emotions. That shows great "
    "self-awareness. Have you tried any breathing exercises or gentle movement today?",
    "Your willingness to explore your feelings is a strength. Remember that it's okay to have difficult "
    "emotions - they're part of being human. What usually helps you feel more grounded?",
)


def count_keyword_hits(text: str, words: Sequence[str]) -> int:
    """Number of distinct ``words`` that occur in ``text`` (case-insensitive substring)."""

    lowered = text.lower()
    return sum(1 for word in words if word in lowered)


def classify_sentiment(text: str) -> Sentiment:
    positive = count_keyword_hits(text, POSITIVE_WORDS)
    negative = count_keyword_hits(text, NEGATIVE_WORDS)
    if positive > negative:
        return Sentiment.POSITIVE
    if negative > positive:
        return Sentiment.NEGATIVE
    return Sentiment.NEUTRAL


def adjust_mood_score(rating: int, sentiment: Sentiment) -> int:
    """Move ``rating`` one step toward ``sentiment``, bounded to [1, 10]."""

    if sentiment is Sentiment.POSITIVE:
        return min(10, rating + 1)
    if sentiment is Sentiment.NEGATIVE:
        return max(1, rating - 1)
    return rating


def generate_fallback_analysis(text: str, rating: int) -> SentimentAnalysis:
    """Return the heuristic analysis for ``text`` and a 1-10 ``rating``."""

    sentiment = classify_sentiment(text)
    return SentimentAnalysis(
        sentiment=sentiment,
        confidence=FALLBACK_CONFIDENCE,
        emotions=list(EMOTIONS_BY_SENTIMENT[sentiment]),
        mood_score=adjust_mood_score(rating, sentiment),
        key_phrases=text.split()[:KEY_PHRASE_COUNT],
        insights=(
            f"Based on your entry, you seem to be in a {sentiment.value} emotional state. "
            f"Your self-rating of {rating}/10 aligns with the tone of your writing."
        ),
        recommendations=list(DEFAULT_RECOMMENDATIONS),
        is_demo=True,
    )


def generate_fallback_chat(rng: random.Random) -> ChatReply:
    """Pick one canned supportive reply uniformly at random."""

    return ChatReply(chat_response=rng.choice(CANNED_CHAT_RESPONSES), is_demo=True)


__all__ = [
    "CANNED_CHAT_RESPONSES",
    "DEFAULT_MOOD_RATING",
    "DEFAULT_RECOMMENDATIONS",
    "EMOTIONS_BY_SENTIMENT",
    "FALLBACK_CONFIDENCE",
    "NEGATIVE_WORDS",
    "POSITIVE_WORDS",
    "adjust_mood_score",
    "classify_sentiment",
    "count_keyword_hits",
    "generate_fallback_analysis",
    "generate_fallback_chat",
]
