"""Repository for the profile and settings records."""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from config.storage import SETTINGS_KEY, USER_KEY
from infrastructure.storage import KeyValueStorage

from .schemas import UserProfile, UserSettings

logger = logging.getLogger(__name__)


class ProfileStore:
    def __init__(self, storage: KeyValueStorage) -> None:
        self._storage = storage

    def get_profile(self) -> Optional[UserProfile]:
        raw = self._storage.load(USER_KEY)
        if raw is None:
            return None
        try:
            return UserProfile.model_validate(raw)
        except PydanticValidationError:
            logger.warning("Stored profile is unreadable; treating as absent")
            return None

    def save_profile(self, profile: UserProfile) -> UserProfile:
        self._storage.save(USER_KEY, profile.to_wire())
        return profile

    def delete_profile(self) -> None:
        self._storage.delete(USER_KEY)

    def get_settings(self) -> UserSettings:
        """Stored settings merged over the defaults."""

        raw = self._storage.load(SETTINGS_KEY)
        if raw is None:
            return UserSettings()
        try:
            return UserSettings.model_validate(raw)
        except PydanticValidationError:
            logger.warning("Stored settings are unreadable; using defaults")
            return UserSettings()

    def save_settings(self, settings: UserSettings) -> UserSettings:
        self._storage.save(SETTINGS_KEY, settings.to_wire())
        return settings

    def delete_settings(self) -> None:
        self._storage.delete(SETTINGS_KEY)


__all__ = ["ProfileStore"]
