"""
Admin module data models.
"""

from shared.models import CamelModel


class DashboardStats(CamelModel):
    """Totals shown on the admin dashboard."""

    total_users: int
    total_events: int
    total_registrations: int
