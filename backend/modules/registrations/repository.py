"""
Registration repository for database access.

The ``registrations_user_event_key`` unique constraint over
(user_id, event_id) is the final arbiter of registration uniqueness.
"""

from typing import Optional, Any

from shared.repository import BaseRepository
from .models import Registration, RegistrationStatus


TABLE = "registrations"


class RegistrationRepository(BaseRepository[Registration]):
    """
    Repository for registration data access.

    Event and user references are plain columns; deleting an event or a
    user does not remove its registrations.
    """

    async def create(self, user_id: str, event_id: str) -> Registration:
        """
        Insert a registration.

        Raises:
            DuplicateKeyError: If the (user, event) pair already exists.
        """
        data = {
            "user_id": user_id,
            "event_id": event_id,
            "status": RegistrationStatus.REGISTERED.value,
        }
        result = await self._execute_write(self._db.table(TABLE).insert(data).execute())
        return self._map_to_registration(result.data[0])

    async def find_by_user_and_event(self, user_id: str, event_id: str) -> Optional[Registration]:
        result = await self._db.table(TABLE).select("*").eq("user_id", user_id).eq(
            "event_id", event_id
        ).limit(1).execute()
        if not result.data:
            return None
        return self._map_to_registration(result.data[0])

    async def list_for_user(self, user_id: str) -> list[Registration]:
        """A user's registrations, newest first."""
        result = await self._db.table(TABLE).select("*").eq("user_id", user_id).order(
            "created_at", desc=True
        ).execute()
        return [self._map_to_registration(row) for row in result.data]

    async def list_all(self) -> list[Registration]:
        """Every registration, newest first."""
        result = await self._db.table(TABLE).select("*").order("created_at", desc=True).execute()
        return [self._map_to_registration(row) for row in result.data]

    async def delete_owned(self, registration_id: str, user_id: str) -> bool:
        """
        Delete a registration only if it belongs to ``user_id``.

        Returns:
            False when nothing matched both predicates.
        """
        result = await self._db.table(TABLE).delete().eq("id", registration_id).eq(
            "user_id", user_id
        ).execute()
        return bool(result.data)

    async def count(self) -> int:
        result = await self._db.table(TABLE).select("id", count="exact").execute()
        return result.count or 0

    def _map_to_registration(self, data: dict[str, Any]) -> Registration:
        """Map database row to Registration model."""
        return Registration(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            event_id=str(data["event_id"]),
            status=data.get("status") or RegistrationStatus.REGISTERED.value,
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )
