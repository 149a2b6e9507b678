"""User profile, settings and account data removal."""

from .repository import ProfileStore
from .schemas import UserProfile, UserSettings
from .service import ProfileService

__all__ = ["ProfileService", "ProfileStore", "UserProfile", "UserSettings"]
