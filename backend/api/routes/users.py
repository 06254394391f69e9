"""
User-related endpoints.

Provides endpoints for the signed-in user's own profile.
"""

from fastapi import APIRouter, Depends

from modules.users.models import UpdateProfileRequest, UpdateProfileResponse, User
from modules.users.service import UserService
from ..dependencies import get_user_service
from ..middleware.auth import get_current_user
from ..models.errors import ERROR_RESPONSES

router = APIRouter(responses=ERROR_RESPONSES)


@router.put("/profile", response_model=UpdateProfileResponse)
async def update_profile(
    request: UpdateProfileRequest,
    user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
) -> UpdateProfileResponse:
    """
    Update the current user's profile.

    Only phone, city, location and lastDonationDate may be sent;
    lastDonationDate may be null to clear it.
    """
    updated = await service.update_profile(user, request)
    return UpdateProfileResponse(message="Profile updated successfully", user=updated)
