"""Environment variable access for the core package."""

from __future__ import annotations

import os

from config.environment import get_node_env
from core.exceptions import ConfigurationError

_TRUTHY = {"1", "true", "yes", "on"}


def get_env(key: str, default: str | None = None, *, required: bool = False) -> str | None:
    """Read ``key``; with ``required`` a missing variable is a ConfigurationError."""

    value = os.getenv(key, default)
    if value is None and required:
        raise ConfigurationError(f"Environment variable {key} must be set", key=key)
    return value


def get_bool_env(key: str, default: bool = False) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


def is_production() -> bool:
    return get_node_env() == "production"


__all__ = ["get_bool_env", "get_env", "get_node_env", "is_production"]
