"""FastAPI dependencies for profile feature."""

from __future__ import annotations

from fastapi import Depends

from features.journal.dependencies import get_journal_store
from features.journal.repository import JournalStore
from infrastructure.storage import get_storage

from .repository import ProfileStore
from .service import ProfileService


def get_profile_store() -> ProfileStore:
    return ProfileStore(get_storage())


def get_profile_service(
    profiles: ProfileStore = Depends(get_profile_store),
    journal: JournalStore = Depends(get_journal_store),
) -> ProfileService:
    """Provide ProfileService dependency."""
    return ProfileService(profiles, journal)


__all__ = ["get_profile_service", "get_profile_store"]
