"""
Registrations service implementation.

Registration uniqueness is decided by the database. The service checks for
an existing registration first so the common case gets a clean 409, then
inserts; if a concurrent request won the race in between, the unique
constraint rejects the insert and the DuplicateKeyError is reported as the
same conflict.
"""

import logging

from shared.exceptions import DuplicateKeyError
from shared.validators import ensure_uuid
from modules.events.exceptions import EventNotFoundError
from modules.events.repository import EventRepository
from modules.users.models import User, UserSummary
from modules.users.repository import UserRepository

from .exceptions import AlreadyRegisteredError, RegistrationNotFoundError
from .interfaces import IRegistrationService
from .models import RegistrationDetail, RegistrationWithEvent
from .repository import RegistrationRepository

logger = logging.getLogger(__name__)


class RegistrationService(IRegistrationService):
    """Event registration backed by the registrations table."""

    def __init__(
        self,
        registrations: RegistrationRepository,
        events: EventRepository,
        users: UserRepository,
    ):
        self._registrations = registrations
        self._events = events
        self._users = users

    async def register(self, user: User, event_id: str) -> RegistrationDetail:
        """Register ``user`` for an event; see the module docstring for the protocol."""
        event_id = ensure_uuid(event_id, "event")

        event = await self._events.get_by_id(event_id)
        if event is None:
            raise EventNotFoundError(event_id)

        existing = await self._registrations.find_by_user_and_event(user.id, event_id)
        if existing is not None:
            raise AlreadyRegisteredError(user.id, event_id)

        try:
            registration = await self._registrations.create(user.id, event_id)
        except DuplicateKeyError:
            logger.info(f"Concurrent registration for user {user.id} event {event_id} rejected")
            raise AlreadyRegisteredError(user.id, event_id)

        return RegistrationDetail(
            **registration.model_dump(),
            event=event,
            user=UserSummary(id=user.id, name=user.name, email=user.email),
        )

    async def list_for_user(self, user: User) -> list[RegistrationWithEvent]:
        registrations = await self._registrations.list_for_user(user.id)
        events = await self._events.get_many(sorted({r.event_id for r in registrations}))
        return [
            RegistrationWithEvent(**r.model_dump(), event=events.get(r.event_id))
            for r in registrations
        ]

    async def cancel(self, registration_id: str, user: User) -> None:
        """Ownership is part of the delete predicate, so foreign IDs read as missing."""
        registration_id = ensure_uuid(registration_id, "registration")
        if not await self._registrations.delete_owned(registration_id, user.id):
            raise RegistrationNotFoundError(registration_id)

    async def list_all(self) -> list[RegistrationDetail]:
        registrations = await self._registrations.list_all()
        events = await self._events.get_many(sorted({r.event_id for r in registrations}))
        users = await self._users.get_summaries(sorted({r.user_id for r in registrations}))
        return [
            RegistrationDetail(
                **r.model_dump(),
                event=events.get(r.event_id),
                user=users.get(r.user_id),
            )
            for r in registrations
        ]
