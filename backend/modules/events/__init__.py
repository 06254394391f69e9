"""
Events module.

Donation event listings. Reads are public; writes are admin only.
"""

from .models import Event, CreateEventRequest, UpdateEventRequest
from .exceptions import EventNotFoundError, EmptyEventUpdateError

__all__ = [
    "Event",
    "CreateEventRequest",
    "UpdateEventRequest",
    "EventNotFoundError",
    "EmptyEventUpdateError",
]
