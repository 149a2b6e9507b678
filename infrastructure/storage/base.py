"""Storage abstraction with an explicit JSON serialization boundary."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any

from core.exceptions import StorageError


def encode_value(key: str, value: Any) -> str:
    """Serialise a JSON-compatible value for storage."""

    try:
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError) as exc:
        raise StorageError(f"Value for '{key}' is not JSON serialisable", operation="save") from exc


def decode_value(key: str, raw: str | None) -> Any:
    """Deserialise a stored value; ``None`` means the key is absent."""

    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise StorageError(f"Stored value for '{key}' is not valid JSON", operation="load") from exc


class KeyValueStorage(ABC):
    """Durable key to JSON-value mapping.

    Implementations store encoded strings and must round-trip anything
    accepted by :func:`encode_value`.
    """

    def load(self, key: str) -> Any:
        """Return the decoded value stored under ``key`` or ``None``."""

        return decode_value(key, self._read(key))

    def save(self, key: str, value: Any) -> None:
        """Encode ``value`` and store it under ``key``, replacing any previous value."""

        self._write(key, encode_value(key, value))

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove ``key``; missing keys are ignored."""

    @abstractmethod
    def keys(self) -> list[str]:
        """Return every stored key."""

    @abstractmethod
    def _read(self, key: str) -> str | None:
        ...

    @abstractmethod
    def _write(self, key: str, raw: str) -> None:
        ...

    def close(self) -> None:
        """Release backend resources."""


__all__ = ["KeyValueStorage", "decode_value", "encode_value"]
