"""Initialise AI provider clients used across the application."""

from __future__ import annotations

import logging
from typing import Dict

from openai import AsyncOpenAI

from config.text import SENTIMENT_TIMEOUT_SECONDS
from core.utils.env import get_env

logger = logging.getLogger(__name__)

ai_clients: Dict[str, AsyncOpenAI] = {}


def get_openai_async_client(
    *,
    api_key: str | None = None,
    timeout: float | None = None,
) -> AsyncOpenAI | None:
    """Return the shared async OpenAI client, or ``None`` when no key is configured."""

    resolved_key = (api_key if api_key is not None else get_env("OPENAI_API_KEY", default="")) or ""
    if not resolved_key.strip():
        return None

    client = ai_clients.get("openai_async")
    if client is None:
        client = AsyncOpenAI(
            api_key=resolved_key.strip(),
            timeout=timeout or SENTIMENT_TIMEOUT_SECONDS,
            max_retries=1,
        )
        ai_clients["openai_async"] = client
        logger.info("Initialised OpenAI client")
    return client


async def close_ai_clients() -> None:
    """Close and forget every cached client."""

    while ai_clients:
        name, client = ai_clients.popitem()
        try:
            await client.close()
        except Exception:  # pragma: no cover - best-effort cleanup
            logger.debug("Failed to close %s client", name, exc_info=True)


__all__ = ["ai_clients", "close_ai_clients", "get_openai_async_client"]
