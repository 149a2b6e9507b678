"""Key-value storage configuration and canonical storage keys."""

from __future__ import annotations

import os

BACKEND = os.getenv("STORAGE_BACKEND", "sql").strip().lower()
DB_URL = os.getenv("STORAGE_DB_URL", "sqlite:///mind_haven.db")
ECHO = os.getenv("STORAGE_DB_ECHO", "false").lower() == "true"

# One key per concept; entries are stored most-recent-first
USER_KEY = "mind-haven-user"
ENTRIES_KEY = "mind-haven-entries"
CHAT_HISTORY_KEY = "mind-haven-chat-history"
SETTINGS_KEY = "mind-haven-settings"

__all__ = [
    "BACKEND",
    "DB_URL",
    "ECHO",
    "USER_KEY",
    "ENTRIES_KEY",
    "CHAT_HISTORY_KEY",
    "SETTINGS_KEY",
]
