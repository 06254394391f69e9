"""
Database client factory for Supabase.

The backend talks to Postgres through a single service-role async client,
created once during application startup and shared by every repository.
"""

from typing import Optional
from supabase import acreate_client, AsyncClient

from .config import get_settings

# Module-level client cache
_service_client: Optional[AsyncClient] = None


async def init_supabase_client() -> AsyncClient:
    """
    Create the service-role Supabase client (bypasses RLS).

    Called from the application lifespan. Subsequent calls return the
    cached client.

    Returns:
        Async Supabase client configured with the service role key
    """
    global _service_client

    if _service_client is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
            )
        _service_client = await acreate_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )

    return _service_client


def get_supabase_client() -> AsyncClient:
    """
    Get the initialised Supabase client.

    Raises:
        RuntimeError: If init_supabase_client() has not run yet
    """
    if _service_client is None:
        raise RuntimeError("Supabase client not initialised. Start the app via its lifespan.")
    return _service_client


def reset_client_cache() -> None:
    """
    Reset the cached database client.

    Useful for testing or when configuration changes.
    """
    global _service_client
    _service_client = None
