"""
Registrations module interface.

The API layer depends on IRegistrationService for all registration operations.
"""

from typing import Protocol, runtime_checkable

from modules.users.models import User

from .models import RegistrationDetail, RegistrationWithEvent


@runtime_checkable
class IRegistrationService(Protocol):
    """
    Interface for registration operations.

    Implementations must guarantee at most one registration per
    (user, event) pair, including under concurrent requests.
    """

    async def register(self, user: User, event_id: str) -> RegistrationDetail:
        """
        Register a user for an event.

        Raises:
            ValidationError: If event_id is not a valid ID
            EventNotFoundError: If the event does not exist
            AlreadyRegisteredError: If the pair is already registered
        """
        ...

    async def list_for_user(self, user: User) -> list[RegistrationWithEvent]:
        """A user's registrations with their events, newest first."""
        ...

    async def cancel(self, registration_id: str, user: User) -> None:
        """
        Cancel one of the user's own registrations.

        Raises:
            RegistrationNotFoundError: If absent or owned by another user
        """
        ...

    async def list_all(self) -> list[RegistrationDetail]:
        """Every registration with user summary and event. Admin only."""
        ...
