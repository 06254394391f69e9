import pytest
from datetime import datetime, timedelta, timezone

from shared.models import Role
from modules.auth.exceptions import (
    InvalidAdminCredentialsError,
    InvalidCredentialsError,
    UnauthenticatedError,
)
from modules.auth.interfaces import IAuthService
from modules.auth.models import LoginRequest, SignupRequest
from modules.auth.tokens import TokenService
from modules.users.exceptions import EmailAlreadyRegisteredError

from fakes import ADMIN_PASSWORD, DONOR_PASSWORD


def signup_request(**overrides) -> SignupRequest:
    payload = {
        "name": "Jane Donor",
        "email": "Jane@Example.com",
        "password": "password123",
        "phone": "+15550100",
        "bloodGroup": "AB-",
        "dateOfBirth": "1990-05-15",
        "city": "Springfield",
        "location": "12 Elm Street",
    }
    payload.update(overrides)
    return SignupRequest.model_validate(payload)


class TestAuthService:
    def test_implements_interface(self, auth_service):
        assert isinstance(auth_service, IAuthService)


class TestSignup:
    @pytest.mark.asyncio
    async def test_creates_donor_and_issues_token(self, auth_service, user_repo, token_service):
        session = await auth_service.signup(signup_request())

        assert session.user.email == "jane@example.com"
        assert session.user.role is Role.DONOR
        assert token_service.verify(session.token).user_id == session.user.id
        assert session.user.id in user_repo.rows

    @pytest.mark.asyncio
    async def test_stores_hash_not_password(self, auth_service, user_repo, password_hasher):
        session = await auth_service.signup(signup_request())
        stored = user_repo.rows[session.user.id]["password_hash"]

        assert stored != "password123"
        assert await password_hasher.verify("password123", stored)

    @pytest.mark.asyncio
    async def test_duplicate_email(self, auth_service):
        await auth_service.signup(signup_request())
        with pytest.raises(EmailAlreadyRegisteredError) as exc_info:
            await auth_service.signup(signup_request(email="jane@example.com"))
        assert exc_info.value.status_code == 409
        assert exc_info.value.message == "Email is already registered"

    @pytest.mark.asyncio
    async def test_lost_uniqueness_race_is_conflict(self, auth_service, user_repo, monkeypatch):
        """If the pre-check misses a concurrent signup, the constraint still wins."""
        await auth_service.signup(signup_request())

        async def never_exists(email):
            return False

        monkeypatch.setattr(user_repo, "email_exists", never_exists)
        with pytest.raises(EmailAlreadyRegisteredError):
            await auth_service.signup(signup_request())


class TestLogin:
    @pytest.mark.asyncio
    async def test_valid_credentials(self, auth_service, donor, token_service):
        session = await auth_service.login(LoginRequest(email=donor.email, password=DONOR_PASSWORD))
        assert session.user.id == donor.id
        assert token_service.verify(session.token).user_id == donor.id

    @pytest.mark.asyncio
    async def test_email_is_case_insensitive(self, auth_service, donor):
        session = await auth_service.login(
            LoginRequest(email="  DANA@example.com", password=DONOR_PASSWORD)
        )
        assert session.user.id == donor.id

    @pytest.mark.asyncio
    async def test_wrong_password(self, auth_service, donor):
        with pytest.raises(InvalidCredentialsError) as exc_info:
            await auth_service.login(LoginRequest(email=donor.email, password="wrong-password"))
        assert exc_info.value.message == "Invalid credentials"

    @pytest.mark.asyncio
    async def test_unknown_email(self, auth_service):
        with pytest.raises(InvalidCredentialsError):
            await auth_service.login(LoginRequest(email="ghost@example.com", password="whatever"))


class TestAdminLogin:
    @pytest.mark.asyncio
    async def test_admin_credentials(self, auth_service, admin):
        session = await auth_service.admin_login(
            LoginRequest(email=admin.email, password=ADMIN_PASSWORD)
        )
        assert session.user.id == admin.id

    @pytest.mark.asyncio
    async def test_donor_rejected_even_with_correct_password(self, auth_service, donor):
        with pytest.raises(InvalidAdminCredentialsError) as exc_info:
            await auth_service.admin_login(LoginRequest(email=donor.email, password=DONOR_PASSWORD))
        assert exc_info.value.message == "Invalid admin credentials"
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_wrong_password(self, auth_service, admin):
        with pytest.raises(InvalidAdminCredentialsError):
            await auth_service.admin_login(LoginRequest(email=admin.email, password="nope-nope"))


class TestAuthenticate:
    @pytest.mark.asyncio
    async def test_resolves_current_user(self, auth_service, donor, token_service):
        user = await auth_service.authenticate(token_service.issue(donor.id))
        assert user.id == donor.id

    @pytest.mark.asyncio
    async def test_reads_fresh_record(self, auth_service, donor, user_repo, token_service):
        """Role changes apply to tokens issued before the change."""
        token = token_service.issue(donor.id)
        user_repo.rows[donor.id]["role"] = "admin"
        user = await auth_service.authenticate(token)
        assert user.role is Role.ADMIN

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", [None, ""])
    async def test_missing_token(self, auth_service, token):
        with pytest.raises(UnauthenticatedError) as exc_info:
            await auth_service.authenticate(token)
        assert exc_info.value.cause == "missing bearer token"

    @pytest.mark.asyncio
    async def test_expired_token(self, auth_service, donor, token_service):
        token = token_service.issue(donor.id, now=datetime.now(timezone.utc) - timedelta(days=8))
        with pytest.raises(UnauthenticatedError) as exc_info:
            await auth_service.authenticate(token)
        assert exc_info.value.cause == "token expired"

    @pytest.mark.asyncio
    async def test_foreign_signature(self, auth_service, donor):
        token = TokenService("some-other-secret-that-is-long-enough!!").issue(donor.id)
        with pytest.raises(UnauthenticatedError):
            await auth_service.authenticate(token)

    @pytest.mark.asyncio
    async def test_deleted_user(self, auth_service, donor, user_repo, token_service):
        """A valid token for a deleted account no longer authenticates."""
        token = token_service.issue(donor.id)
        await user_repo.delete(donor.id)
        with pytest.raises(UnauthenticatedError) as exc_info:
            await auth_service.authenticate(token)
        assert exc_info.value.message == "Unauthorized"
        assert donor.id in exc_info.value.cause
