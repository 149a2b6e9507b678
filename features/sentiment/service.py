"""Sentiment analysis service with a deterministic demo-mode fallback."""

from __future__ import annotations

import logging
import random
from typing import Any, Optional, Protocol

from pydantic import ValidationError as PydanticValidationError

from core.exceptions import ConfigurationError, ProviderError, ValidationError

from .fallback import DEFAULT_MOOD_RATING, generate_fallback_analysis, generate_fallback_chat
from .prompts import (
    ANALYSIS_SYSTEM_PROMPT,
    CHAT_SYSTEM_PROMPT,
    build_analysis_prompt,
    build_chat_prompt,
)
from .schemas import AnalyzeSentimentRequest, ChatReply, SentimentAnalysis

logger = logging.getLogger(__name__)

TEXT_REQUIRED_MESSAGE = "Text is required"
DEMO_MODE_NOTE = "Demo mode: Connect OpenAI API for full AI features"
PROVIDER_UNAVAILABLE_NOTE = "AI analysis is temporarily unavailable; showing demo analysis"


class TextProvider(Protocol):
    async def generate(self, prompt: str, *, system_prompt: Optional[str] = None) -> str: ...

    async def generate_json(self, prompt: str, *, system_prompt: Optional[str] = None) -> dict[str, Any]: ...


def require_text(text: Optional[str]) -> str:
    """Return ``text`` unchanged, or raise when it is missing or blank."""

    if not text or not text.strip():
        raise ValidationError(TEXT_REQUIRED_MESSAGE, field="text")
    return text


def normalise_mood_rating(value: Optional[float]) -> int:
    """Coerce a client-supplied rating into the 1-10 integer domain (default 5)."""

    if value is None:
        return DEFAULT_MOOD_RATING
    rating = int(round(value))
    if rating < 1 or rating > 10:
        logger.debug("Clamping out-of-range mood rating %s", value)
    return max(1, min(10, rating))


class SentimentService:
    """Turn free text into a structured analysis or a companion reply.

    With a provider configured the language model is used; without one, or
    whenever the provider fails, the keyword heuristic answers instead and the
    result is tagged ``is_demo``.
    """

    def __init__(self, provider: TextProvider | None = None, *, rng: random.Random | None = None) -> None:
        self._provider = provider
        self._rng = rng or random.Random()

    @property
    def ai_enabled(self) -> bool:
        return self._provider is not None

    async def handle(self, request: AnalyzeSentimentRequest) -> SentimentAnalysis | ChatReply:
        """Dispatch an endpoint request to chat or analysis mode."""

        if request.is_chat:
            return await self.chat(request.text)
        return await self.analyze(request.text, request.user_mood_rating)

    async def analyze(self, text: Optional[str], user_mood_rating: Optional[float] = None) -> SentimentAnalysis:
        text = require_text(text)
        rating = normalise_mood_rating(user_mood_rating)

        if self._provider is None:
            return generate_fallback_analysis(text, rating)

        try:
            payload = await self._provider.generate_json(
                build_analysis_prompt(text, rating),
                system_prompt=ANALYSIS_SYSTEM_PROMPT,
            )
            analysis = SentimentAnalysis.model_validate(payload)
        except ConfigurationError as exc:
            logger.warning("Sentiment provider misconfigured, using demo analysis: %s", exc.message)
            return self._fallback_analysis(text, rating, DEMO_MODE_NOTE)
        except ProviderError as exc:
            logger.warning("Sentiment provider failed, using demo analysis: %s", exc.message)
            return self._fallback_analysis(text, rating, PROVIDER_UNAVAILABLE_NOTE)
        except PydanticValidationError as exc:
            logger.warning("Sentiment provider returned an invalid analysis (%d errors)", exc.error_count())
            return self._fallback_analysis(text, rating, PROVIDER_UNAVAILABLE_NOTE)
        except Exception:
            logger.exception("Unexpected sentiment provider failure, using demo analysis")
            return self._fallback_analysis(text, rating, PROVIDER_UNAVAILABLE_NOTE)

        return analysis.model_copy(update={"is_demo": None, "error": None})

    async def chat(self, text: Optional[str]) -> ChatReply:
        text = require_text(text)

        if self._provider is None:
            return generate_fallback_chat(self._rng)

        try:
            reply = await self._provider.generate(build_chat_prompt(text), system_prompt=CHAT_SYSTEM_PROMPT)
        except (ConfigurationError, ProviderError) as exc:
            logger.warning("Chat provider failed, using canned reply: %s", exc)
            return generate_fallback_chat(self._rng)
        except Exception:
            logger.exception("Unexpected chat provider failure, using canned reply")
            return generate_fallback_chat(self._rng)

        if not reply:
            logger.warning("Chat provider returned an empty reply, using canned reply")
            return generate_fallback_chat(self._rng)
        return ChatReply(chat_response=reply)

    @staticmethod
    def _fallback_analysis(text: str, rating: int, note: str) -> SentimentAnalysis:
        return generate_fallback_analysis(text, rating).model_copy(update={"error": note})


__all__ = [
    "DEMO_MODE_NOTE",
    "PROVIDER_UNAVAILABLE_NOTE",
    "TEXT_REQUIRED_MESSAGE",
    "SentimentService",
    "normalise_mood_rating",
    "require_text",
]
