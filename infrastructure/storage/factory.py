"""Build and cache the configured storage backend.

The backend is created lazily on first access and shared by every feature
(journal entries, chat history, profile and settings live side by side under
their canonical keys, see ``config.storage``).
"""

from __future__ import annotations

import logging
from typing import Optional

from config.storage import BACKEND, DB_URL, ECHO
from core.exceptions import ConfigurationError

from .base import KeyValueStorage
from .memory import InMemoryStorage
from .sql import SqlKeyValueStorage

logger = logging.getLogger(__name__)

_storage: Optional[KeyValueStorage] = None


def create_storage(backend: str, *, db_url: str | None = None, echo: bool = False) -> KeyValueStorage:
    """Return a new storage instance for ``backend`` (``sql`` or ``memory``)."""

    normalized = (backend or "").strip().lower()
    if normalized == "memory":
        logger.info("Using in-memory storage; data is lost on restart")
        return InMemoryStorage()
    if normalized == "sql":
        if not db_url:
            raise ConfigurationError("STORAGE_DB_URL must be set for the sql backend", key="STORAGE_DB_URL")
        logger.info("Using SQL key-value storage")
        return SqlKeyValueStorage(db_url, echo=echo)
    raise ConfigurationError(f"Unsupported storage backend '{backend}'", key="STORAGE_BACKEND")


def get_storage() -> KeyValueStorage:
    """Return the process-wide storage, creating it from configuration on first use."""

    global _storage
    if _storage is None:
        _storage = create_storage(BACKEND, db_url=DB_URL, echo=ECHO)
    return _storage


def close_storage() -> None:
    """Dispose of the process-wide storage."""

    global _storage
    if _storage is not None:
        _storage.close()
        _storage = None


__all__ = ["close_storage", "create_storage", "get_storage"]
