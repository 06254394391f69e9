"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API
error handlers to return appropriate HTTP responses.

Every way a request can fail to authenticate ends up as
UnauthenticatedError, whose public message is always the same. The
specific cause is kept in ``cause`` for logging only.
"""

from typing import Iterable

from shared.exceptions import AuthenticationError, AuthorizationError


UNAUTHENTICATED_MESSAGE = "Unauthorized"


class InvalidTokenError(AuthenticationError):
    """Raised by the token service for malformed, tampered or expired tokens."""

    def __init__(self, reason: str = "invalid token"):
        super().__init__(
            UNAUTHENTICATED_MESSAGE,
            code="INVALID_TOKEN",
            details={"reason": reason},
        )
        self.reason = reason


class UnauthenticatedError(AuthenticationError):
    """Raised when a request cannot be bound to a principal."""

    def __init__(self, cause: str):
        super().__init__(
            UNAUTHENTICATED_MESSAGE,
            code="UNAUTHENTICATED",
            details={"cause": cause},
        )
        self.cause = cause

    def to_dict(self) -> dict:
        # cause is diagnostic only and never leaves the server
        return {"message": UNAUTHENTICATED_MESSAGE}


class InvalidCredentialsError(AuthenticationError):
    """Raised when email/password login fails."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class InvalidAdminCredentialsError(InvalidCredentialsError):
    """Raised when admin login fails, including for non-admin accounts."""

    def __init__(self):
        super().__init__("Invalid admin credentials")


class InsufficientPermissionsError(AuthorizationError):
    """Raised when the principal's role is not allowed on a route."""

    def __init__(self, allowed_roles: Iterable[str], user_role: str, message: str | None = None):
        allowed = sorted(allowed_roles)
        super().__init__(
            message or "Forbidden: insufficient permissions",
            code="INSUFFICIENT_PERMISSIONS",
            details={"allowed_roles": allowed, "user_role": user_role},
        )
