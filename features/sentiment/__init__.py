"""Sentiment analysis and chat companion feature."""

from .schemas import ChatReply, Sentiment, SentimentAnalysis
from .service import SentimentService

__all__ = ["ChatReply", "Sentiment", "SentimentAnalysis", "SentimentService"]
