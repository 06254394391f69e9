"""
User service implementation.

Profile updates for the account owner and account administration.
"""

import logging
from datetime import datetime, timezone

from shared.validators import ensure_uuid

from .exceptions import EmptyProfileUpdateError, UserNotFoundError
from .models import UpdateProfileRequest, User
from .repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Account management on top of the user repository."""

    def __init__(self, users: UserRepository):
        self._users = users

    async def update_profile(self, user: User, request: UpdateProfileRequest) -> User:
        """
        Apply a partial profile update for the authenticated user.

        Only phone, city, location and lastDonationDate are writable;
        UpdateProfileRequest rejects any other key.
        """
        update = request.to_update()
        if not update:
            raise EmptyProfileUpdateError()

        update["updated_at"] = datetime.now(timezone.utc).isoformat()
        updated = await self._users.update(user.id, update)
        if updated is None:
            raise UserNotFoundError(user.id)
        return updated

    async def list_users(self) -> list[User]:
        return await self._users.list_all()

    async def delete_user(self, user_id: str) -> User:
        """Hard-delete an account. Admin only; registrations are left in place."""
        user_id = ensure_uuid(user_id, "user")
        deleted = await self._users.delete(user_id)
        if deleted is None:
            raise UserNotFoundError(user_id)
        logger.info(f"Deleted user {user_id}")
        return deleted
