"""
Users module.

Owns the credential store (user accounts and password hashes) and
profile management.
"""

from .models import User, UserCredentials, UserSummary, UpdateProfileRequest
from .exceptions import UserNotFoundError, EmailAlreadyRegisteredError, EmptyProfileUpdateError

__all__ = [
    "User",
    "UserCredentials",
    "UserSummary",
    "UpdateProfileRequest",
    "UserNotFoundError",
    "EmailAlreadyRegisteredError",
    "EmptyProfileUpdateError",
]
