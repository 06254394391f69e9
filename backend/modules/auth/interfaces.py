"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with fakes and keeps the API layer decoupled from storage.
"""

from typing import Protocol, Optional, runtime_checkable

from modules.users.models import User

from .models import AuthSession, LoginRequest, SignupRequest


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def signup(self, request: SignupRequest) -> AuthSession:
        """
        Create a donor account and issue a token for it.

        Raises:
            EmailAlreadyRegisteredError: If the email already has an account
        """
        ...

    async def login(self, request: LoginRequest) -> AuthSession:
        """
        Verify email and password and issue a token.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password
        """
        ...

    async def admin_login(self, request: LoginRequest) -> AuthSession:
        """
        Like login, but the stored role must be admin.

        Raises:
            InvalidAdminCredentialsError: Unknown email, non-admin, or wrong password
        """
        ...

    async def authenticate(self, token: Optional[str]) -> User:
        """
        Resolve a bearer token to the current user record.

        Raises:
            UnauthenticatedError: Missing token, bad token, or deleted account
        """
        ...
