"""
Authentication endpoints.

Donor signup and login, and the current user's profile.
"""

from fastapi import APIRouter, Depends, status

from modules.auth.interfaces import IAuthService
from modules.auth.models import AuthResponse, LoginRequest, SignupRequest
from modules.users.models import User, UserResponse
from ..dependencies import get_auth_service
from ..middleware.auth import get_current_user
from ..models.errors import ERROR_RESPONSES

router = APIRouter(responses=ERROR_RESPONSES)


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    request: SignupRequest,
    auth: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Create a donor account and return a token for it.

    Returns 409 if the email is already registered.
    """
    session = await auth.signup(request)
    return AuthResponse(message="User registered successfully", token=session.token, user=session.user)


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    auth: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Log in with email and password."""
    session = await auth.login(request)
    return AuthResponse(message="Login successful", token=session.token, user=session.user)


@router.get("/profile", response_model=UserResponse)
async def get_profile(user: User = Depends(get_current_user)) -> UserResponse:
    """
    Get the current user's profile.

    Requires authentication.
    """
    return UserResponse(user=user)
