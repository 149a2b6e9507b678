"""Common pydantic data models shared across the application."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ProviderResponse(BaseModel):
    """Standardised response returned by provider implementations."""

    text: str
    model: str
    provider: str
    metadata: Optional[Dict[str, Any]] = None


class CamelModel(BaseModel):
    """Model that reads and writes camelCase keys on the wire.

    Python code uses snake_case attributes; payloads stored in key-value
    storage and returned by the API use the camelCase names browser clients
    expect (``moodScore``, ``keyPhrases``).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self, **kwargs: Any) -> Dict[str, Any]:
        """Dump to a JSON-compatible dict using camelCase aliases."""

        return self.model_dump(mode="json", by_alias=True, **kwargs)


__all__ = ["CamelModel", "ProviderResponse"]
