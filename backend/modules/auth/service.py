"""
Authentication service implementation.

Signup, login, admin login, and resolution of bearer tokens to users.
"""

import logging
from typing import Optional

from shared.exceptions import DuplicateKeyError
from shared.models import Role
from modules.users.exceptions import EmailAlreadyRegisteredError
from modules.users.models import User
from modules.users.repository import UserRepository

from .exceptions import (
    InvalidAdminCredentialsError,
    InvalidCredentialsError,
    InvalidTokenError,
    UnauthenticatedError,
)
from .interfaces import IAuthService
from .models import AuthSession, LoginRequest, SignupRequest
from .passwords import PasswordHasher
from .tokens import TokenService

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Uses the user repository as credential store, bcrypt for password
    hashing and signed JWTs as bearer tokens.
    """

    def __init__(
        self,
        users: UserRepository,
        tokens: TokenService,
        passwords: PasswordHasher,
    ):
        self._users = users
        self._tokens = tokens
        self._passwords = passwords

    async def signup(self, request: SignupRequest) -> AuthSession:
        """
        Create a donor account.

        The email pre-check gives the usual answer cheaply; the unique
        constraint on users.email decides when two signups race.
        """
        if await self._users.email_exists(request.email):
            raise EmailAlreadyRegisteredError(request.email)

        password_hash = await self._passwords.hash(request.password)

        data = {
            "name": request.name,
            "email": request.email,
            "password_hash": password_hash,
            "phone": request.phone,
            "blood_group": request.blood_group.value,
            "date_of_birth": request.date_of_birth.isoformat(),
            "city": request.city,
            "location": request.location,
            "last_donation_date": (
                request.last_donation_date.isoformat() if request.last_donation_date else None
            ),
            "role": Role.DONOR.value,
        }

        try:
            user = await self._users.create(data)
        except DuplicateKeyError:
            logger.info("Signup lost email uniqueness race")
            raise EmailAlreadyRegisteredError(request.email)

        return AuthSession(token=self._tokens.issue(user.id), user=user)

    async def login(self, request: LoginRequest) -> AuthSession:
        credentials = await self._users.get_credentials_by_email(request.normalized_email)
        if credentials is None:
            raise InvalidCredentialsError()

        if not await self._passwords.verify(request.password, credentials.password_hash):
            raise InvalidCredentialsError()

        user = credentials.user
        return AuthSession(token=self._tokens.issue(user.id), user=user)

    async def admin_login(self, request: LoginRequest) -> AuthSession:
        credentials = await self._users.get_credentials_by_email(request.normalized_email)
        if credentials is None or credentials.user.role != Role.ADMIN:
            raise InvalidAdminCredentialsError()

        if not await self._passwords.verify(request.password, credentials.password_hash):
            raise InvalidAdminCredentialsError()

        user = credentials.user
        return AuthSession(token=self._tokens.issue(user.id), user=user)

    async def authenticate(self, token: Optional[str]) -> User:
        """
        Resolve a bearer token to the current user record.

        Re-reads the user on every call: a token may outlive its account.
        """
        if not token:
            raise UnauthenticatedError("missing bearer token")

        try:
            claims = self._tokens.verify(token)
        except InvalidTokenError as e:
            raise UnauthenticatedError(e.reason)

        user = await self._users.get_by_id(claims.user_id)
        if user is None:
            raise UnauthenticatedError(f"user {claims.user_id} not found")

        return user
