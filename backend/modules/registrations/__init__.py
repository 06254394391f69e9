"""
Registrations module.

Binds donors to events, at most once per (user, event) pair.

Public API:
- IRegistrationService: Interface for registration operations
- Registration models and exceptions
"""

from .interfaces import IRegistrationService
from .models import (
    Registration,
    RegistrationDetail,
    RegistrationStatus,
    RegistrationWithEvent,
    CreateRegistrationRequest,
)
from .exceptions import AlreadyRegisteredError, RegistrationNotFoundError

__all__ = [
    "IRegistrationService",
    "Registration",
    "RegistrationDetail",
    "RegistrationStatus",
    "RegistrationWithEvent",
    "CreateRegistrationRequest",
    "AlreadyRegisteredError",
    "RegistrationNotFoundError",
]
