"""
Shared infrastructure for DonorHub backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- repository: Base repository with constraint-violation translation

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, init_supabase_client, reset_client_cache
from .exceptions import (
    DonorHubError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ConflictError,
    DuplicateKeyError,
    ConfigurationError,
)
from .models import BloodGroup, CamelModel, Role

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "init_supabase_client",
    "reset_client_cache",
    "DonorHubError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "DuplicateKeyError",
    "ConfigurationError",
    "BloodGroup",
    "CamelModel",
    "Role",
]
