"""Typed errors raised by services and mapped to HTTP responses in ``main.py``.

Every error carries a human readable ``message``, the HTTP status it maps to
and an optional ``context()`` dict that becomes the envelope's ``data``.

Provider failures never reach clients: the sentiment service catches them and
answers with the keyword fallback instead.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class ServiceError(Exception):
    """Base class for errors raised below the route layer."""

    status_code = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def context(self) -> Optional[Dict[str, Any]]:
        return None


class ValidationError(ServiceError):
    """Input that passed schema validation but is still unusable (e.g. blank text)."""

    status_code = 400

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field

    def context(self) -> Optional[Dict[str, Any]]:
        return {"field": self.field} if self.field else None


class ProviderError(ServiceError):
    """The language model call failed or returned something unusable."""

    status_code = 502

    def __init__(
        self,
        message: str,
        provider: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.provider = provider
        self.original_error = original_error


class RateLimitError(ProviderError):
    status_code = 429

    def __init__(self, message: str, retry_after: int | None = None) -> None:
        super().__init__(message, provider="openai")
        self.retry_after = retry_after


class ConfigurationError(ServiceError):
    """A required setting is missing, invalid, or was rejected upstream."""

    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key

    def context(self) -> Optional[Dict[str, Any]]:
        return {"key": self.key} if self.key else None


class StorageError(ServiceError):
    """Reading or writing the key-value store failed."""

    def __init__(self, message: str, operation: str | None = None) -> None:
        super().__init__(message)
        self.operation = operation

    def context(self) -> Optional[Dict[str, Any]]:
        return {"operation": self.operation} if self.operation else None


__all__ = [
    "ConfigurationError",
    "ProviderError",
    "RateLimitError",
    "ServiceError",
    "StorageError",
    "ValidationError",
]
