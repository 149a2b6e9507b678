"""Service layer for profile feature."""

from __future__ import annotations

import logging
from typing import Optional

from features.journal.repository import JournalStore

from .repository import ProfileStore
from .schemas import UpdateProfileRequest, UserProfile, UserSettings

logger = logging.getLogger(__name__)


class ProfileService:
    """Profile, settings and the wholesale data removal operations."""

    def __init__(self, profiles: ProfileStore, journal: JournalStore) -> None:
        self._profiles = profiles
        self._journal = journal

    def get_profile(self) -> Optional[UserProfile]:
        return self._profiles.get_profile()

    def update_profile(self, request: UpdateProfileRequest) -> UserProfile:
        profile = UserProfile(name=request.name, email=request.email)
        return self._profiles.save_profile(profile)

    def get_settings(self) -> UserSettings:
        return self._profiles.get_settings()

    def update_settings(self, settings: UserSettings) -> UserSettings:
        return self._profiles.save_settings(settings)

    def clear_all_data(self) -> None:
        """Remove entries, chat history and settings; the profile stays."""

        self._journal.clear_entries()
        self._journal.clear_chat_history()
        self._profiles.delete_settings()
        logger.info("Cleared all user data")

    def delete_account(self) -> None:
        self.clear_all_data()
        self._profiles.delete_profile()
        logger.info("Deleted user account")


__all__ = ["ProfileService"]
