"""
Events service implementation.

Event listings are public; every write is reserved for admins by the routes.
"""

import logging
from datetime import datetime, timezone

from shared.validators import ensure_uuid
from modules.users.models import User

from .exceptions import EmptyEventUpdateError, EventNotFoundError
from .models import CreateEventRequest, Event, UpdateEventRequest
from .repository import EventRepository

logger = logging.getLogger(__name__)


class EventService:
    """CRUD operations for donation events."""

    def __init__(self, events: EventRepository):
        self._events = events

    async def create_event(self, creator: User, request: CreateEventRequest) -> Event:
        """Create an event owned by ``creator``, who is already resolved from the store."""
        event = await self._events.create(request.to_record(created_by=creator.id))
        logger.info(f"Event {event.id} created by {creator.id}")
        return event

    async def list_events(self) -> list[Event]:
        return await self._events.list_all()

    async def get_event(self, event_id: str) -> Event:
        event_id = ensure_uuid(event_id, "event")
        event = await self._events.get_by_id(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    async def update_event(self, event_id: str, request: UpdateEventRequest) -> Event:
        event_id = ensure_uuid(event_id, "event")
        update = request.to_update()
        if not update:
            raise EmptyEventUpdateError()

        update["updated_at"] = datetime.now(timezone.utc).isoformat()
        event = await self._events.update(event_id, update)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    async def delete_event(self, event_id: str) -> None:
        """Delete an event. Its registrations are not cascaded."""
        event_id = ensure_uuid(event_id, "event")
        if not await self._events.delete(event_id):
            raise EventNotFoundError(event_id)
        logger.info(f"Event {event_id} deleted")
