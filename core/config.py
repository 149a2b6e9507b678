"""Settings dataclass for dependency injection.

Domain-specific configuration lives in the ``config`` package:
- Environment detection: config.environment
- Provider credentials: config.api_keys
- Text generation: config.text
- Key-value storage: config.storage (read by infrastructure.storage)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache

from config import api_keys, environment, text


@dataclass(frozen=True)
class Settings:
    """Cross-cutting settings resolved once per process."""

    environment: str = environment.ENVIRONMENT
    openai_api_key: str = api_keys.OPENAI_API_KEY
    sentiment_model: str = text.DEFAULT_MODEL
    request_timeout: float = text.SENTIMENT_TIMEOUT_SECONDS
    cors_origins: list[str] = field(default_factory=lambda: list(environment.CORS_ORIGINS))

    @property
    def ai_enabled(self) -> bool:
        return bool(self.openai_api_key)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""

    return Settings()


__all__ = ["Settings", "get_settings"]
