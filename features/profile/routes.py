"""FastAPI routes for profile feature."""

import logging

from fastapi import APIRouter, Depends

from core.pydantic_schemas import ok as api_ok
from features.profile.dependencies import get_profile_service
from features.profile.schemas import UpdateProfileRequest, UserSettings
from features.profile.service import ProfileService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/profile", tags=["profile"])


@router.get("")
def get_profile(service: ProfileService = Depends(get_profile_service)) -> dict:
    profile = service.get_profile()
    if profile is None:
        return api_ok("No profile saved", data=None)
    return api_ok("Profile retrieved", data=profile.to_wire())


@router.put("")
def update_profile(
    request: UpdateProfileRequest,
    service: ProfileService = Depends(get_profile_service),
) -> dict:
    """Save the display name and email used to sign in."""
    profile = service.update_profile(request)
    return api_ok("Profile saved", data=profile.to_wire())


@router.get("/settings")
def get_settings(service: ProfileService = Depends(get_profile_service)) -> dict:
    return api_ok("Settings retrieved", data=service.get_settings().to_wire())


@router.put("/settings")
def update_settings(
    settings: UserSettings,
    service: ProfileService = Depends(get_profile_service),
) -> dict:
    saved = service.update_settings(settings)
    return api_ok("Settings saved", data=saved.to_wire())


@router.delete("/data")
def clear_all_data(service: ProfileService = Depends(get_profile_service)) -> dict:
    """Remove entries, chat history and settings."""
    service.clear_all_data()
    return api_ok("All data has been cleared")


@router.delete("")
def delete_account(service: ProfileService = Depends(get_profile_service)) -> dict:
    service.delete_account()
    return api_ok("Account deleted")


__all__ = ["router"]
