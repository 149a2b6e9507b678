"""Environment detection and helpers."""

from __future__ import annotations

import os
from typing import Literal

Environment = Literal["development", "production", "test"]


def get_node_env() -> Environment:
    """Return the current runtime environment label."""

    raw = os.getenv("NODE_ENV", "development").lower()
    if raw in ("development", "production", "test"):
        return raw  # type: ignore[return-value]
    return "development"


def get_cors_origins() -> list[str]:
    """Return explicitly allowed CORS origins (comma separated in ``CORS_ORIGINS``)."""

    raw = os.getenv("CORS_ORIGINS", "")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


ENVIRONMENT: Environment = get_node_env()

CORS_ORIGINS = get_cors_origins()

__all__ = [
    "Environment",
    "ENVIRONMENT",
    "CORS_ORIGINS",
    "get_cors_origins",
    "get_node_env",
]
