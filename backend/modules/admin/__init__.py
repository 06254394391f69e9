"""
Admin module.

Dashboard figures for administrators. Account administration itself lives
in the users module.
"""

from .models import DashboardStats

__all__ = ["DashboardStats"]
