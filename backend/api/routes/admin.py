"""
Admin endpoints.

Admin login is public; everything else requires the admin role.
"""

from fastapi import APIRouter, Depends

from modules.admin.models import DashboardStats
from modules.admin.service import AdminService
from modules.auth.interfaces import IAuthService
from modules.auth.models import (
    AdminAuthResponse,
    AdminProfile,
    AdminProfileResponse,
    LoginRequest,
)
from modules.users.models import DeleteUserResponse, User, UserListResponse
from modules.users.service import UserService
from ..dependencies import get_admin_service, get_auth_service, get_user_service
from ..middleware.auth import require_admin
from ..models.errors import ERROR_RESPONSES

router = APIRouter(responses=ERROR_RESPONSES)


@router.post("/login", response_model=AdminAuthResponse)
async def admin_login(
    request: LoginRequest,
    auth: IAuthService = Depends(get_auth_service),
) -> AdminAuthResponse:
    """Log in to an admin account. Donor accounts are rejected with 401."""
    session = await auth.admin_login(request)
    return AdminAuthResponse(
        message="Admin login successful",
        token=session.token,
        admin=AdminProfile.from_user(session.user),
    )


@router.get("/profile", response_model=AdminProfileResponse)
async def get_admin_profile(admin: User = Depends(require_admin)) -> AdminProfileResponse:
    return AdminProfileResponse(admin=AdminProfile.from_user(admin))


@router.get("/stats", response_model=DashboardStats, dependencies=[Depends(require_admin)])
async def get_dashboard_stats(
    service: AdminService = Depends(get_admin_service),
) -> DashboardStats:
    """Total users, events and registrations."""
    return await service.get_dashboard_stats()


@router.get("/users", response_model=UserListResponse, dependencies=[Depends(require_admin)])
async def list_users(service: UserService = Depends(get_user_service)) -> UserListResponse:
    """All accounts, newest first."""
    return UserListResponse(users=await service.list_users())


@router.delete(
    "/users/{user_id}",
    response_model=DeleteUserResponse,
    dependencies=[Depends(require_admin)],
)
async def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> DeleteUserResponse:
    deleted = await service.delete_user(user_id)
    return DeleteUserResponse(message="User deleted successfully", user=deleted)
