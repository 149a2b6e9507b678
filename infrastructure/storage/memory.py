"""Process-local storage backend."""

from __future__ import annotations

from .base import KeyValueStorage


class InMemoryStorage(KeyValueStorage):
    """Dictionary-backed storage; values still pass through JSON encoding."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def _read(self, key: str) -> str | None:
        return self._data.get(key)

    def _write(self, key: str, raw: str) -> None:
        self._data[key] = raw

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)


__all__ = ["InMemoryStorage"]
