"""
Authentication module.

Handles token issuance and verification, password hashing, signup/login,
and resolution of bearer tokens to users.

Public API:
- IAuthService: Interface for auth operations
- TokenService: Bearer token signing and verification
- PasswordHasher: bcrypt password hashing
- Auth exceptions: UnauthenticatedError, InvalidTokenError, etc.
"""

from .interfaces import IAuthService
from .models import AuthSession, LoginRequest, SignupRequest
from .passwords import PasswordHasher
from .tokens import TokenClaims, TokenService
from .exceptions import (
    InvalidTokenError,
    UnauthenticatedError,
    InvalidCredentialsError,
    InvalidAdminCredentialsError,
    InsufficientPermissionsError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Services
    "PasswordHasher",
    "TokenService",
    # Models
    "AuthSession",
    "LoginRequest",
    "SignupRequest",
    "TokenClaims",
    # Exceptions
    "InvalidTokenError",
    "UnauthenticatedError",
    "InvalidCredentialsError",
    "InvalidAdminCredentialsError",
    "InsufficientPermissionsError",
]
