"""
Bearer token issuance and verification.

Tokens are HS256 JWTs carrying the user ID in ``sub`` plus ``iat`` and
``exp``. There is no revocation list: a token stays valid until it expires,
so callers must still check that the account exists (see AuthService).
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
import jwt  # PyJWT
from pydantic import BaseModel, Field

from shared.exceptions import ConfigurationError

from .exceptions import InvalidTokenError


DEFAULT_TOKEN_TTL = timedelta(days=7)


class TokenClaims(BaseModel):
    """Verified claims of a bearer token."""

    sub: str = Field(..., min_length=1, description="Subject (user ID)")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")

    @property
    def user_id(self) -> str:
        return self.sub


class TokenService:
    """
    Signs and verifies bearer tokens with a process-wide secret.

    Built once at startup. An empty secret is a configuration error and is
    reported immediately rather than on the first request.
    """

    ALGORITHM = "HS256"

    def __init__(self, secret: str, expires_in: timedelta = DEFAULT_TOKEN_TTL):
        if not secret:
            raise ConfigurationError(
                "JWT_SECRET is not defined in environment variables",
                code="MISSING_JWT_SECRET",
            )
        self._secret = secret
        self._expires_in = expires_in

    @property
    def expires_in(self) -> timedelta:
        return self._expires_in

    def issue(self, user_id: str, now: Optional[datetime] = None) -> str:
        """
        Issue a token for a user.

        Args:
            user_id: ID of the account the token binds to
            now: Issuance time, defaults to the current UTC time

        Returns:
            Encoded JWT string
        """
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "sub": user_id,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._expires_in).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self.ALGORITHM)

    def verify(self, token: str) -> TokenClaims:
        """
        Verify signature and expiry and return the claims.

        Raises:
            InvalidTokenError: For malformed, tampered or expired tokens.
                The reason is recorded on the error but not exposed.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.ALGORITHM],
                options={"require": ["sub", "iat", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise InvalidTokenError("token expired")
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"invalid token: {e}")

        sub = payload.get("sub")
        if not isinstance(sub, str) or not sub:
            raise InvalidTokenError("invalid token payload")

        return TokenClaims(sub=sub, iat=int(payload["iat"]), exp=int(payload["exp"]))
