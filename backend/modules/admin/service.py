"""
Admin service implementation.
"""

import asyncio

from modules.events.repository import EventRepository
from modules.registrations.repository import RegistrationRepository
from modules.users.repository import UserRepository

from .models import DashboardStats


class AdminService:
    """Read-only aggregate views for administrators."""

    def __init__(
        self,
        users: UserRepository,
        events: EventRepository,
        registrations: RegistrationRepository,
    ):
        self._users = users
        self._events = events
        self._registrations = registrations

    async def get_dashboard_stats(self) -> DashboardStats:
        total_users, total_events, total_registrations = await asyncio.gather(
            self._users.count(),
            self._events.count(),
            self._registrations.count(),
        )
        return DashboardStats(
            total_users=total_users,
            total_events=total_events,
            total_registrations=total_registrations,
        )
