"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface
where it has one, and this file creates the concrete implementations.
"""

from datetime import timedelta
from typing import TYPE_CHECKING

from shared.config import get_settings

# Type checking imports (avoids circular imports)
if TYPE_CHECKING:
    from modules.admin.service import AdminService
    from modules.auth.interfaces import IAuthService
    from modules.auth.passwords import PasswordHasher
    from modules.auth.tokens import TokenService
    from modules.events.repository import EventRepository
    from modules.events.service import EventService
    from modules.registrations.interfaces import IRegistrationService
    from modules.registrations.repository import RegistrationRepository
    from modules.users.repository import UserRepository
    from modules.users.service import UserService


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access, except the
    token service, which the application lifespan builds eagerly so that a
    missing JWT secret stops startup.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._token_service: "TokenService | None" = None
        self._password_hasher: "PasswordHasher | None" = None
        self._user_repository: "UserRepository | None" = None
        self._event_repository: "EventRepository | None" = None
        self._registration_repository: "RegistrationRepository | None" = None
        self._auth_service: "IAuthService | None" = None
        self._user_service: "UserService | None" = None
        self._event_service: "EventService | None" = None
        self._registration_service: "IRegistrationService | None" = None
        self._admin_service: "AdminService | None" = None

    @property
    def tokens(self) -> "TokenService":
        """Get the token service. Raises ConfigurationError without JWT_SECRET."""
        if self._token_service is None:
            from modules.auth.tokens import TokenService
            settings = get_settings()
            self._token_service = TokenService(
                settings.jwt_secret,
                expires_in=timedelta(days=settings.jwt_expires_days),
            )
        return self._token_service

    @property
    def passwords(self) -> "PasswordHasher":
        if self._password_hasher is None:
            from modules.auth.passwords import PasswordHasher
            self._password_hasher = PasswordHasher(rounds=get_settings().bcrypt_rounds)
        return self._password_hasher

    @property
    def user_repository(self) -> "UserRepository":
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            from shared.database import get_supabase_client
            self._user_repository = UserRepository(get_supabase_client())
        return self._user_repository

    @property
    def event_repository(self) -> "EventRepository":
        if self._event_repository is None:
            from modules.events.repository import EventRepository
            from shared.database import get_supabase_client
            self._event_repository = EventRepository(get_supabase_client())
        return self._event_repository

    @property
    def registration_repository(self) -> "RegistrationRepository":
        if self._registration_repository is None:
            from modules.registrations.repository import RegistrationRepository
            from shared.database import get_supabase_client
            self._registration_repository = RegistrationRepository(get_supabase_client())
        return self._registration_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                users=self.user_repository,
                tokens=self.tokens,
                passwords=self.passwords,
            )
        return self._auth_service

    @property
    def users(self) -> "UserService":
        """Get the user service instance."""
        if self._user_service is None:
            from modules.users.service import UserService
            self._user_service = UserService(self.user_repository)
        return self._user_service

    @property
    def events(self) -> "EventService":
        """Get the event service instance."""
        if self._event_service is None:
            from modules.events.service import EventService
            self._event_service = EventService(self.event_repository)
        return self._event_service

    @property
    def registrations(self) -> "IRegistrationService":
        """Get the registration service instance."""
        if self._registration_service is None:
            from modules.registrations.service import RegistrationService
            self._registration_service = RegistrationService(
                registrations=self.registration_repository,
                events=self.event_repository,
                users=self.user_repository,
            )
        return self._registration_service

    @property
    def admin(self) -> "AdminService":
        """Get the admin service instance."""
        if self._admin_service is None:
            from modules.admin.service import AdminService
            self._admin_service = AdminService(
                users=self.user_repository,
                events=self.event_repository,
                registrations=self.registration_repository,
            )
        return self._admin_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self.__init__()


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_user_service() -> "UserService":
    """FastAPI dependency for user service."""
    return get_container().users


def get_event_service() -> "EventService":
    """FastAPI dependency for event service."""
    return get_container().events


def get_registration_service() -> "IRegistrationService":
    """FastAPI dependency for registration service."""
    return get_container().registrations


def get_admin_service() -> "AdminService":
    """FastAPI dependency for admin service."""
    return get_container().admin
