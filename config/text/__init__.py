"""Text generation configuration aggregation."""

from .defaults import (
    CHAT_MAX_TOKENS,
    CHAT_TEMPERATURE,
    DEFAULT_MODEL,
    SENTIMENT_MAX_TOKENS,
    SENTIMENT_TEMPERATURE,
    SENTIMENT_TIMEOUT_SECONDS,
)

__all__ = [
    "CHAT_MAX_TOKENS",
    "CHAT_TEMPERATURE",
    "DEFAULT_MODEL",
    "SENTIMENT_MAX_TOKENS",
    "SENTIMENT_TEMPERATURE",
    "SENTIMENT_TIMEOUT_SECONDS",
]
