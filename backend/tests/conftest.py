"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
in-memory repositories, real services wired to them, and an application
whose service dependencies are overridden to use those services.
"""

import os

import pytest
from fastapi.testclient import TestClient

# Must be set before settings are first read
TEST_JWT_SECRET = "test-secret-key-for-testing-only"
os.environ.setdefault("JWT_SECRET", TEST_JWT_SECRET)

from shared.config import get_settings  # noqa: E402
from api.app import create_app  # noqa: E402
from api.dependencies import (  # noqa: E402
    get_admin_service,
    get_auth_service,
    get_event_service,
    get_registration_service,
    get_user_service,
    reset_container,
)
from modules.admin.service import AdminService  # noqa: E402
from modules.auth.passwords import PasswordHasher  # noqa: E402
from modules.auth.service import AuthService  # noqa: E402
from modules.auth.tokens import TokenService  # noqa: E402
from modules.events.service import EventService  # noqa: E402
from modules.registrations.service import RegistrationService  # noqa: E402
from modules.users.models import User  # noqa: E402
from modules.users.service import UserService  # noqa: E402

from fakes import (  # noqa: E402
    ADMIN_PASSWORD,
    DONOR_PASSWORD,
    FakeEventRepository,
    FakeRegistrationRepository,
    FakeUserRepository,
    hash_password,
)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached settings and the service container around each test."""
    get_settings.cache_clear()
    reset_container()
    yield
    get_settings.cache_clear()
    reset_container()


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(TEST_JWT_SECRET)


@pytest.fixture
def password_hasher() -> PasswordHasher:
    # Minimum bcrypt cost keeps the suite fast
    return PasswordHasher(rounds=4)


@pytest.fixture
def user_repo() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def event_repo() -> FakeEventRepository:
    return FakeEventRepository()


@pytest.fixture
def registration_repo() -> FakeRegistrationRepository:
    return FakeRegistrationRepository()


@pytest.fixture
def donor(user_repo: FakeUserRepository) -> User:
    return user_repo.add(
        name="Dana Donor",
        email="dana@example.com",
        password_hash=hash_password(DONOR_PASSWORD),
    )


@pytest.fixture
def admin(user_repo: FakeUserRepository) -> User:
    return user_repo.add(
        name="Alex Admin",
        email="admin@example.com",
        password_hash=hash_password(ADMIN_PASSWORD),
        role="admin",
    )


@pytest.fixture
def auth_service(user_repo, token_service, password_hasher) -> AuthService:
    return AuthService(users=user_repo, tokens=token_service, passwords=password_hasher)


@pytest.fixture
def user_service(user_repo) -> UserService:
    return UserService(user_repo)


@pytest.fixture
def event_service(event_repo) -> EventService:
    return EventService(event_repo)


@pytest.fixture
def registration_service(registration_repo, event_repo, user_repo) -> RegistrationService:
    return RegistrationService(
        registrations=registration_repo,
        events=event_repo,
        users=user_repo,
    )


@pytest.fixture
def admin_service(user_repo, event_repo, registration_repo) -> AdminService:
    return AdminService(users=user_repo, events=event_repo, registrations=registration_repo)


@pytest.fixture
def app(auth_service, user_service, event_service, registration_service, admin_service):
    """Application wired to the in-memory services. The lifespan is not run."""
    application = create_app()
    application.dependency_overrides[get_auth_service] = lambda: auth_service
    application.dependency_overrides[get_user_service] = lambda: user_service
    application.dependency_overrides[get_event_service] = lambda: event_service
    application.dependency_overrides[get_registration_service] = lambda: registration_service
    application.dependency_overrides[get_admin_service] = lambda: admin_service
    return application


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def donor_headers(donor: User, token_service: TokenService) -> dict[str, str]:
    """Authorization headers for the donor fixture."""
    return {"Authorization": f"Bearer {token_service.issue(donor.id)}"}


@pytest.fixture
def admin_headers(admin: User, token_service: TokenService) -> dict[str, str]:
    """Authorization headers for the admin fixture."""
    return {"Authorization": f"Bearer {token_service.issue(admin.id)}"}
