"""OpenAI chat completion call and error mapping (non-streaming)."""

from __future__ import annotations

import logging
from typing import Any, Optional

import openai

from core.exceptions import ConfigurationError, ProviderError, RateLimitError
from core.pydantic_schemas import ProviderResponse

logger = logging.getLogger(__name__)


async def generate_text(
    *,
    client: Any,
    prompt: str,
    model: str,
    temperature: float,
    max_tokens: int,
    system_prompt: Optional[str] = None,
    json_mode: bool = False,
) -> ProviderResponse:
    """Generate a complete response (non-streaming)."""

    if not prompt or not prompt.strip():
        raise ProviderError("OpenAI prompt cannot be empty", provider="openai")

    messages: list[dict[str, str]] = []
    if system_prompt:
        messages.append({"role": "system", "content": system_prompt})
    messages.append({"role": "user", "content": prompt})

    params: dict[str, Any] = {
        "model": model,
        "messages": messages,
        "temperature": temperature,
        "max_tokens": max_tokens,
    }
    if json_mode:
        params["response_format"] = {"type": "json_object"}

    logger.debug(
        "OpenAI API call: model=%s, json_mode=%s, temperature=%s, max_tokens=%s",
        model,
        json_mode,
        temperature,
        max_tokens,
    )

    try:
        response = await client.chat.completions.create(**params)
    except openai.AuthenticationError as exc:
        logger.error("OpenAI rejected the configured API key: %s", exc)
        raise ConfigurationError("OpenAI API key was rejected", key="OPENAI_API_KEY") from exc
    except openai.RateLimitError as exc:
        logger.warning("OpenAI rate limit hit: %s", exc)
        raise RateLimitError(f"OpenAI rate limit: {exc}", retry_after=60) from exc
    except openai.APITimeoutError as exc:
        logger.warning("OpenAI request timed out: %s", exc)
        raise ProviderError("OpenAI request timed out", provider="openai", original_error=exc) from exc
    except openai.OpenAIError as exc:
        logger.error("OpenAI generate error: %s", exc)
        raise ProviderError(
            f"OpenAI API error: {exc}",
            provider="openai",
            original_error=exc,
        ) from exc

    if not response.choices:
        raise ProviderError("OpenAI returned no choices", provider="openai")

    choice = response.choices[0]
    text = getattr(choice.message, "content", None) or ""

    metadata = {
        "finish_reason": getattr(choice, "finish_reason", None),
        "usage": response.usage.model_dump() if getattr(response, "usage", None) else None,
    }

    return ProviderResponse(text=text, model=model, provider="openai", metadata=metadata)


__all__ = ["generate_text"]
