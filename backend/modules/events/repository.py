"""
Event repository for database access.

Encapsulates all Supabase queries and data mapping for the ``events`` table.
"""

from typing import Optional, Any

from shared.repository import BaseRepository
from .models import Event


TABLE = "events"


class EventRepository(BaseRepository[Event]):
    """
    Repository for event data access.

    Note: This repository does NOT perform authorization checks.
    Routes gate every write behind the admin role.
    """

    async def create(self, data: dict[str, Any]) -> Event:
        result = await self._execute_write(self._db.table(TABLE).insert(data).execute())
        return self._map_to_event(result.data[0])

    async def get_by_id(self, event_id: str) -> Optional[Event]:
        result = await self._db.table(TABLE).select("*").eq("id", event_id).execute()
        if not result.data:
            return None
        return self._map_to_event(result.data[0])

    async def list_all(self) -> list[Event]:
        """All events, soonest first."""
        result = await self._db.table(TABLE).select("*").order("date").execute()
        return [self._map_to_event(row) for row in result.data]

    async def get_many(self, event_ids: list[str]) -> dict[str, Event]:
        """Events keyed by ID. IDs of deleted events are simply absent."""
        if not event_ids:
            return {}
        result = await self._db.table(TABLE).select("*").in_("id", event_ids).execute()
        return {str(row["id"]): self._map_to_event(row) for row in result.data}

    async def update(self, event_id: str, data: dict[str, Any]) -> Optional[Event]:
        result = await self._execute_write(
            self._db.table(TABLE).update(data).eq("id", event_id).execute()
        )
        if not result.data:
            return None
        return self._map_to_event(result.data[0])

    async def delete(self, event_id: str) -> bool:
        """
        Delete an event. Returns False if it did not exist.

        Registrations pointing at the event are left untouched.
        """
        result = await self._db.table(TABLE).delete().eq("id", event_id).execute()
        return bool(result.data)

    async def count(self) -> int:
        result = await self._db.table(TABLE).select("id", count="exact").execute()
        return result.count or 0

    def _map_to_event(self, data: dict[str, Any]) -> Event:
        """Map database row to Event model."""
        return Event(
            id=str(data["id"]),
            title=data["title"],
            description=data.get("description"),
            location=data["location"],
            city=data["city"],
            date=data["date"],
            time=data["time"],
            organizer=data["organizer"],
            contact_number=data["contact_number"],
            required_blood_groups=data.get("required_blood_groups") or [],
            created_by=str(data["created_by"]),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )
