"""Text generation defaults for sentiment analysis and the chat companion."""

from __future__ import annotations

import os

# Model defaults
DEFAULT_MODEL = os.getenv("SENTIMENT_MODEL", "gpt-4o-mini")

# Generation defaults
SENTIMENT_TEMPERATURE = float(os.getenv("SENTIMENT_TEMPERATURE", "0.3"))
SENTIMENT_MAX_TOKENS = 800
CHAT_TEMPERATURE = float(os.getenv("CHAT_TEMPERATURE", "0.7"))
CHAT_MAX_TOKENS = 300

# Upstream calls are bounded; the fallback takes over on timeout
SENTIMENT_TIMEOUT_SECONDS = float(os.getenv("SENTIMENT_TIMEOUT_SECONDS", "20"))

__all__ = [
    "DEFAULT_MODEL",
    "SENTIMENT_TEMPERATURE",
    "SENTIMENT_MAX_TOKENS",
    "CHAT_TEMPERATURE",
    "CHAT_MAX_TOKENS",
    "SENTIMENT_TIMEOUT_SECONDS",
]
