"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and the translation of constraint violations.
"""

from typing import Any, Awaitable, TypeVar, Generic
from postgrest.exceptions import APIError
from supabase import AsyncClient

from .exceptions import DuplicateKeyError


T = TypeVar("T")

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


def is_unique_violation(error: APIError) -> bool:
    """Return True if a PostgREST error was caused by a unique constraint."""
    return str(getattr(error, "code", "")) == UNIQUE_VIOLATION


def _constraint_name(error: APIError) -> str | None:
    # Postgres reports: duplicate key value violates unique constraint "name"
    message = getattr(error, "message", None) or ""
    if '"' in message:
        return message.split('"')[1]
    return None


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - _execute_write() which turns unique violations into DuplicateKeyError

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class EventRepository(BaseRepository[Event]):
            async def get_by_id(self, event_id: str) -> Optional[Event]:
                result = await self._db.table("events").select("*").eq("id", event_id).execute()
                if not result.data:
                    return None
                return self._map_to_event(result.data[0])
    """

    def __init__(self, db: AsyncClient) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Async Supabase client instance for database operations.
        """
        self._db = db

    async def _execute_write(self, query: Awaitable[Any]) -> Any:
        """
        Await a write query, re-raising unique violations as DuplicateKeyError.

        All other storage errors propagate unchanged.
        """
        try:
            return await query
        except APIError as e:
            if is_unique_violation(e):
                raise DuplicateKeyError(_constraint_name(e)) from e
            raise
