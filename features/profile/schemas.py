"""Pydantic schemas for the user profile and settings."""

from __future__ import annotations

from typing import Any

from pydantic import EmailStr, Field, field_validator

from core.pydantic_schemas import CamelModel


class UserProfile(CamelModel):
    name: str = ""
    email: str = ""


class NotificationSettings(CamelModel):
    daily_reminders: bool = True
    weekly_reports: bool = True
    mood_alerts: bool = False


class PrivacySettings(CamelModel):
    data_sharing: bool = False
    analytics: bool = True


class UserSettings(CamelModel):
    """Preferences; missing sections fall back to their defaults."""

    notifications: NotificationSettings = Field(default_factory=NotificationSettings)
    privacy: PrivacySettings = Field(default_factory=PrivacySettings)


class UpdateProfileRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr

    @field_validator("name", "email", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


__all__ = [
    "NotificationSettings",
    "PrivacySettings",
    "UpdateProfileRequest",
    "UserProfile",
    "UserSettings",
]
