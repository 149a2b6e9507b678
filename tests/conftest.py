"""Test configuration helpers."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

# Ensure the repository root is importable so that ``import core`` and the other
# absolute imports used throughout the codebase succeed from any working directory.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Tests never talk to OpenAI and never touch the on-disk database
os.environ["OPENAI_API_KEY"] = ""
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("NODE_ENV", "test")

from features.analytics.dependencies import reset_analytics_service  # noqa: E402
from features.journal.dependencies import reset_journal_store  # noqa: E402
from features.journal.repository import JournalStore  # noqa: E402
from features.profile.repository import ProfileStore  # noqa: E402
from features.sentiment.dependencies import reset_sentiment_service  # noqa: E402
from infrastructure.storage import InMemoryStorage, close_storage  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_cached_dependencies():
    """Drop module-level singletons so each test starts from clean state."""

    yield
    reset_analytics_service()
    reset_journal_store()
    reset_sentiment_service()
    close_storage()


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def journal_store(storage: InMemoryStorage) -> JournalStore:
    return JournalStore(storage)


@pytest.fixture
def profile_store(storage: InMemoryStorage) -> ProfileStore:
    return ProfileStore(storage)
