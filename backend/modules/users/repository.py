"""
User repository for database access.

This is the credential store: it is the only code that reads or writes the
``password_hash`` column, and it only returns that column through
``get_credentials_by_email``.
"""

from typing import Optional, Any

from shared.models import Role
from shared.repository import BaseRepository
from .models import User, UserCredentials, UserSummary


TABLE = "users"

# Every column except password_hash
PUBLIC_COLUMNS = (
    "id, name, email, phone, blood_group, date_of_birth, city, location, "
    "last_donation_date, role, created_at, updated_at"
)
SUMMARY_COLUMNS = "id, name, email, phone, blood_group, city"


class UserRepository(BaseRepository[User]):
    """
    Repository for user accounts.

    Email uniqueness is enforced by the ``users_email_key`` constraint;
    inserts that violate it raise DuplicateKeyError.
    """

    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get a user by ID, without the password hash."""
        result = await self._db.table(TABLE).select(PUBLIC_COLUMNS).eq("id", user_id).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    async def get_credentials_by_email(self, email: str) -> Optional[UserCredentials]:
        """
        Get a user and their password hash by (normalized) email.

        Args:
            email: Lower-cased, trimmed email address.
        """
        result = await self._db.table(TABLE).select("*").eq("email", email).limit(1).execute()
        if not result.data:
            return None
        row = result.data[0]
        return UserCredentials(user=self._map_to_user(row), password_hash=row["password_hash"])

    async def email_exists(self, email: str) -> bool:
        result = await self._db.table(TABLE).select("id").eq("email", email).limit(1).execute()
        return bool(result.data)

    async def create(self, data: dict[str, Any]) -> User:
        """
        Insert a new user.

        Raises:
            DuplicateKeyError: If the email is already taken.
        """
        result = await self._execute_write(self._db.table(TABLE).insert(data).execute())
        return self._map_to_user(result.data[0])

    async def update(self, user_id: str, data: dict[str, Any]) -> Optional[User]:
        """Update columns on a user. Returns None if the user no longer exists."""
        result = await self._execute_write(
            self._db.table(TABLE).update(data).eq("id", user_id).execute()
        )
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    async def list_all(self) -> list[User]:
        """All users, newest first."""
        result = await self._db.table(TABLE).select(PUBLIC_COLUMNS).order(
            "created_at", desc=True
        ).execute()
        return [self._map_to_user(row) for row in result.data]

    async def delete(self, user_id: str) -> Optional[User]:
        """Delete a user and return the deleted record, or None if absent."""
        result = await self._db.table(TABLE).delete().eq("id", user_id).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    async def count(self) -> int:
        result = await self._db.table(TABLE).select("id", count="exact").execute()
        return result.count or 0

    async def get_summaries(self, user_ids: list[str]) -> dict[str, UserSummary]:
        """Summaries keyed by user ID. Missing users are simply absent."""
        if not user_ids:
            return {}
        result = await self._db.table(TABLE).select(SUMMARY_COLUMNS).in_(
            "id", user_ids
        ).execute()
        return {str(row["id"]): UserSummary(**{**row, "id": str(row["id"])}) for row in result.data}

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    def _map_to_user(self, data: dict[str, Any]) -> User:
        """Map database row to User model. password_hash is dropped."""
        return User(
            id=str(data["id"]),
            name=data["name"],
            email=data["email"],
            phone=data["phone"],
            blood_group=data["blood_group"],
            date_of_birth=data["date_of_birth"],
            city=data["city"],
            location=data["location"],
            last_donation_date=data.get("last_donation_date"),
            role=Role(data.get("role") or Role.DONOR.value),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )
