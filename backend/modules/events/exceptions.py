"""
Events module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class EventNotFoundError(NotFoundError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str):
        super().__init__(
            "Event not found",
            code="EVENT_NOT_FOUND",
            details={"event_id": event_id},
        )


class EmptyEventUpdateError(ValidationError):
    """Raised when an event update carries no fields."""

    def __init__(self):
        super().__init__(
            "At least one field is required for update",
            code="EMPTY_UPDATE",
        )
