"""API key loading for external providers."""

from __future__ import annotations

import os
from typing import Dict


def load_api_keys() -> Dict[str, str]:
    """Load API keys from the environment; a missing key is an empty string."""

    return {
        "openai": (os.getenv("OPENAI_API_KEY") or "").strip(),
    }


API_KEYS = load_api_keys()

OPENAI_API_KEY = API_KEYS["openai"]


__all__ = [
    "API_KEYS",
    "OPENAI_API_KEY",
    "load_api_keys",
]
