"""
Registrations module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError


class AlreadyRegisteredError(ConflictError):
    """Raised when the user already holds a registration for the event."""

    def __init__(self, user_id: str, event_id: str):
        super().__init__(
            "Already registered for this event",
            code="ALREADY_REGISTERED",
            details={"user_id": user_id, "event_id": event_id},
        )


class RegistrationNotFoundError(NotFoundError):
    """
    Raised when a registration does not exist or belongs to someone else.

    The two cases are deliberately indistinguishable.
    """

    def __init__(self, registration_id: str):
        super().__init__(
            "Registration not found",
            code="REGISTRATION_NOT_FOUND",
            details={"registration_id": registration_id},
        )
