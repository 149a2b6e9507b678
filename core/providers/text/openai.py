"""OpenAI text generation provider implementation."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from config.text import (
    CHAT_MAX_TOKENS,
    CHAT_TEMPERATURE,
    DEFAULT_MODEL,
    SENTIMENT_MAX_TOKENS,
    SENTIMENT_TEMPERATURE,
)
from core.clients.ai import ai_clients
from core.exceptions import ProviderError

from .generation import generate_text

logger = logging.getLogger(__name__)


class OpenAITextProvider:
    """OpenAI chat-completions provider for plain text and JSON object output."""

    provider_name = "openai"

    def __init__(self, client: Any | None = None, *, model: str = DEFAULT_MODEL) -> None:
        self.client = client or ai_clients.get("openai_async")
        if not self.client:
            raise ProviderError("OpenAI client not initialized", provider="openai")
        self.model = model

    async def generate(
        self,
        prompt: str,
        *,
        system_prompt: Optional[str] = None,
        temperature: float = CHAT_TEMPERATURE,
        max_tokens: int = CHAT_MAX_TOKENS,
    ) -> str:
        """Return the stripped completion text."""

        response = await generate_text(
            client=self.client,
            prompt=prompt,
            model=self.model,
            temperature=temperature,
            max_tokens=max_tokens,
            system_prompt=system_prompt,
        )
        return response.text.strip()

    async def generate_json(
        self,
        prompt: str,
        *,
        system_prompt: Optional[str] = None,
        temperature: float = SENTIMENT_TEMPERATURE,
        max_tokens: int = SENTIMENT_MAX_TOKENS,
    ) -> Dict[str, Any]:
        """Return the completion decoded as a JSON object."""

        response = await generate_text(
            client=self.client,
            prompt=prompt,
            model=self.model,
            temperature=temperature,
            max_tokens=max_tokens,
            system_prompt=system_prompt,
            json_mode=True,
        )
        try:
            payload = json.loads(response.text)
        except json.JSONDecodeError as exc:
            logger.warning("OpenAI returned non-JSON content (%d chars)", len(response.text))
            raise ProviderError("OpenAI returned malformed JSON", provider="openai", original_error=exc) from exc

        if not isinstance(payload, dict):
            raise ProviderError("OpenAI JSON payload is not an object", provider="openai")
        return payload


__all__ = ["OpenAITextProvider"]
